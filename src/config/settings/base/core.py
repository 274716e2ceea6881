"""Settings base do cliente Stark Infra.

Ambiente de execução e parâmetros comuns a todos os recursos.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache


class Environment(str, Enum):
    """Ambiente da API (cada um com chaves e URL próprios)."""

    SANDBOX = "sandbox"
    PRODUCTION = "production"


def parse_environment(env_str: str | Environment) -> Environment:
    """Converte string de ambiente para Environment.

    Raises:
        ValueError: Se o valor não for um ambiente conhecido.
    """
    if isinstance(env_str, Environment):
        return env_str
    env_lower = env_str.strip().lower()
    if env_lower in ("production", "prod"):
        return Environment.PRODUCTION
    if env_lower == "sandbox":
        return Environment.SANDBOX
    valid = ", ".join(env.value for env in Environment)
    raise ValueError(f"Ambiente inválido: {env_str}. Válidos: {valid}")


@dataclass(frozen=True)
class BaseSettings:
    """Configurações base do processo.

    Attributes:
        environment: Ambiente padrão da API (sandbox|production)
        service_name: Nome do serviço para logs
        log_level: Nível de log inicial
    """

    environment: Environment = Environment.SANDBOX
    service_name: str = "starkinfra"
    log_level: str = "INFO"

    @property
    def is_production(self) -> bool:
        """Retorna True se ambiente é produção."""
        return self.environment is Environment.PRODUCTION

    def validate(self) -> list[str]:
        """Valida configurações base.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []
        if not self.service_name:
            errors.append("SERVICE_NAME não pode ser vazio")
        return errors


def _load_base_from_env() -> BaseSettings:
    """Carrega BaseSettings de variáveis de ambiente."""
    return BaseSettings(
        environment=parse_environment(os.getenv("STARKINFRA_ENVIRONMENT", "sandbox")),
        service_name=os.getenv("SERVICE_NAME", "starkinfra"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
    )


@lru_cache(maxsize=1)
def get_base_settings() -> BaseSettings:
    """Retorna instância cacheada de BaseSettings."""
    return _load_base_from_env()
