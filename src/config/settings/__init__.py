"""Agregador de settings do cliente Stark Infra.

Re-exporta todas as settings e funções de cada módulo.
"""

from __future__ import annotations

from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
    parse_environment,
)
from config.settings.starkinfra import (
    ACCEPTED_LANGUAGES,
    API_VERSION,
    MAX_PAGE_SIZE,
    PRODUCTION_BASE_URL,
    SANDBOX_BASE_URL,
    StarkInfraSettings,
    get_starkinfra_settings,
)

__all__ = [
    # Constants
    "ACCEPTED_LANGUAGES",
    "API_VERSION",
    "MAX_PAGE_SIZE",
    "PRODUCTION_BASE_URL",
    "SANDBOX_BASE_URL",
    # Base
    "BaseSettings",
    "Environment",
    # Stark Infra
    "StarkInfraSettings",
    "get_base_settings",
    "get_starkinfra_settings",
    "parse_environment",
]
