"""Formatters de logging estruturado.

Todo log sai como JSON com os campos de REQUIRED_LOG_FIELDS. Campos de
contexto passados via `extra` (endpoint, environment, status_code...) são
anexados pelo JsonFormatter sem configuração adicional.

Nunca registrar chave privada, assinatura ou corpo de webhook.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Campos obrigatórios em todo log estruturado
REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

# Mapeamento de nomes de campos para formato padrão
FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Exemplo de output:
        {
            "asctime": "2026-03-10 10:30:00,123",
            "level": "INFO",
            "logger": "app.infra.keys.public_key_cache",
            "message": "public_key_cache_miss",
            "correlation_id": "",
            "service": "starkinfra",
            "environment": "sandbox"
        }
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)

    return JsonFormatter(
        format_string,
        rename_fields=FIELD_RENAME_MAP,
    )
