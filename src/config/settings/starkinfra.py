"""Settings específicas da API Stark Infra.

Hosts, versão da API, idioma, timeouts e credenciais opcionais.
O gerenciamento de chaves fica com a aplicação hospedeira; aqui apenas
carregamos o que ela disponibiliza via ambiente.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from config.settings.base.core import Environment, parse_environment

API_VERSION: str = "v2"
SANDBOX_BASE_URL: str = "https://sandbox.api.starkinfra.com"
PRODUCTION_BASE_URL: str = "https://api.starkinfra.com"
ACCEPTED_LANGUAGES: tuple[str, ...] = ("en-US", "pt-BR")
MAX_PAGE_SIZE: int = 100


@dataclass(frozen=True)
class StarkInfraSettings:
    """Configurações do cliente Stark Infra.

    Attributes:
        environment: Ambiente alvo (sandbox|production)
        project_id: ID do Project (credencial de projeto)
        organization_id: ID da Organization (alternativa ao projeto)
        workspace_id: Workspace opcional para credencial de organização
        private_key: Chave privada ECDSA secp256k1 em PEM
        language: Idioma das mensagens de erro da API
        api_version: Versão da API (ex: v2)
        request_timeout_seconds: Timeout por requisição HTTP
        max_retries: Tentativas extras em GETs com erro transitório
        max_page_size: Tamanho máximo de página aceito pelo servidor
        sandbox_base_url: Host do sandbox
        production_base_url: Host de produção
    """

    environment: Environment = Environment.SANDBOX
    project_id: str = ""
    organization_id: str = ""
    workspace_id: str = ""
    private_key: str = ""

    language: str = "en-US"
    api_version: str = API_VERSION

    request_timeout_seconds: float = 15.0
    max_retries: int = 3
    max_page_size: int = MAX_PAGE_SIZE

    sandbox_base_url: str = SANDBOX_BASE_URL
    production_base_url: str = PRODUCTION_BASE_URL

    def base_url_for(self, environment: Environment | None = None) -> str:
        """Retorna URL base com versão para o ambiente.

        Args:
            environment: Ambiente desejado. Usa self.environment se None.

        Returns:
            URL no formato: https://sandbox.api.starkinfra.com/v2
        """
        target = environment or self.environment
        host = (
            self.production_base_url
            if target is Environment.PRODUCTION
            else self.sandbox_base_url
        )
        return f"{host.rstrip('/')}/{self.api_version}"

    def validate(self) -> list[str]:
        """Valida configurações mínimas.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if self.language not in ACCEPTED_LANGUAGES:
            errors.append(
                f"STARKINFRA_LANGUAGE inválido: {self.language}. "
                f"Válidos: {', '.join(ACCEPTED_LANGUAGES)}"
            )

        if self.request_timeout_seconds <= 0:
            errors.append("STARKINFRA_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if self.max_retries < 0:
            errors.append("STARKINFRA_MAX_RETRIES deve ser >= 0")

        if not 1 <= self.max_page_size <= MAX_PAGE_SIZE:
            errors.append(f"STARKINFRA_MAX_PAGE_SIZE deve estar entre 1 e {MAX_PAGE_SIZE}")

        if self.project_id and self.organization_id:
            errors.append(
                "Configure STARKINFRA_PROJECT_ID ou STARKINFRA_ORGANIZATION_ID, não ambos"
            )

        if self.workspace_id and not self.organization_id:
            errors.append("STARKINFRA_WORKSPACE_ID requer STARKINFRA_ORGANIZATION_ID")

        return errors


def _load_from_env() -> StarkInfraSettings:
    """Carrega StarkInfraSettings a partir de variáveis de ambiente."""
    return StarkInfraSettings(
        environment=parse_environment(os.getenv("STARKINFRA_ENVIRONMENT", "sandbox")),
        project_id=os.getenv("STARKINFRA_PROJECT_ID", ""),
        organization_id=os.getenv("STARKINFRA_ORGANIZATION_ID", ""),
        workspace_id=os.getenv("STARKINFRA_WORKSPACE_ID", ""),
        private_key=os.getenv("STARKINFRA_PRIVATE_KEY", ""),
        language=os.getenv("STARKINFRA_LANGUAGE", "en-US"),
        api_version=os.getenv("STARKINFRA_API_VERSION", API_VERSION),
        request_timeout_seconds=float(
            os.getenv("STARKINFRA_REQUEST_TIMEOUT_SECONDS", "15")
        ),
        max_retries=int(os.getenv("STARKINFRA_MAX_RETRIES", "3")),
        max_page_size=int(os.getenv("STARKINFRA_MAX_PAGE_SIZE", str(MAX_PAGE_SIZE))),
        sandbox_base_url=os.getenv("STARKINFRA_SANDBOX_BASE_URL", SANDBOX_BASE_URL),
        production_base_url=os.getenv(
            "STARKINFRA_PRODUCTION_BASE_URL", PRODUCTION_BASE_URL
        ),
    )


@lru_cache(maxsize=1)
def get_starkinfra_settings() -> StarkInfraSettings:
    """Retorna instância cacheada de StarkInfraSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
