"""Helpers de logging para a API Stark Infra (sem credenciais nem corpos)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from utils.errors import RequestError

logger = logging.getLogger(__name__)


def log_api_error(error: RequestError, method: str, path: str) -> None:
    """Loga erro da API sem expor o corpo da resposta."""
    logger.warning(
        "starkinfra_api_error",
        extra={
            "method": method,
            "path": path,
            "status_code": error.status_code,
            "error_type": type(error).__name__,
            "is_retryable": error.is_retryable,
        },
    )


def log_success(method: str, path: str, status_code: int) -> None:
    """Loga sucesso sem expor dados sensíveis."""
    logger.debug(
        "starkinfra_api_success",
        extra={
            "method": method,
            "path": path,
            "status_code": status_code,
        },
    )
