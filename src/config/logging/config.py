"""Configuração centralizada de logging.

A biblioteca apenas emite logs via `logging.getLogger(__name__)`; quem
decide handlers e nível é a aplicação hospedeira. `configure_logging`
é um atalho para quem quer o formato JSON padrão.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="minha-app")

    logger = get_logger(__name__)
    logger.info("page_fetched", extra={"endpoint": "event", "items": 100})
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "starkinfra"

# httpx/httpcore logam a URL completa de cada requisição em INFO/DEBUG
NOISY_LOGGERS = ("httpx", "httpcore")


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id, service e environment em cada record.

    Valores explícitos passados via `extra` têm precedência; `environment`
    só é preenchido quando configurado.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
        environment: str | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")
        self._environment = environment

    def filter(self, record: logging.LogRecord) -> bool:
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        if self._environment and not getattr(record, "environment", None):
            record.environment = self._environment
        return True


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
    environment: str | None = None,
) -> None:
    """Configura logging JSON estruturado.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função opcional que retorna o correlation_id
            do contexto atual (ex: de uma ContextVar da aplicação).
        environment: Ambiente Stark Infra padrão anexado aos logs que não
            informam o próprio (ex: "sandbox").

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter, environment))

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substituir handlers existentes para evitar duplicação
    root.handlers = [handler]

    for noisy in NOISY_LOGGERS:
        logging.getLogger(noisy).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo especificado (geralmente __name__)."""
    return logging.getLogger(name)


def log_fallback(
    logger: logging.Logger,
    component: str,
    reason: str | None = None,
    **context: object,
) -> None:
    """Log observável de fallback deliberado.

    Usado quando o cliente segue adiante sem falhar, por exemplo ao manter
    o log de um Event sem decodificar por ser de uma subscription ainda
    não modelada.

    Args:
        logger: Logger instance.
        component: Nome do componente (ex: "event_log_resolver").
        reason: Razão do fallback (ex: "unmapped_subscription").
        **context: Campos extras sem dados sensíveis.
    """
    extra: dict[str, object] = {
        "fallback_used": True,
        "component": component,
        **context,
    }
    if reason:
        extra["reason"] = reason

    logger.info(
        "Fallback applied for %s",
        component,
        extra=extra,
    )
