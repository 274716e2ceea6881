"""Bootstrap — composition root do cliente.

Uso:
    from app.bootstrap import create_starkinfra_client, initialize_logging

    initialize_logging()
    with create_starkinfra_client() as client:
        for event in client.event.query(limit=10, is_delivered=False):
            ...
"""

from __future__ import annotations

from config.logging import configure_logging
from config.settings import get_base_settings

from .clients import StarkInfraClient, create_starkinfra_client, user_from_settings


def initialize_logging() -> None:
    """Configura logging JSON com nível, serviço e ambiente das settings base."""
    base = get_base_settings()
    configure_logging(
        level=base.log_level,
        service_name=base.service_name,
        environment=base.environment.value,
    )


__all__ = [
    "StarkInfraClient",
    "create_starkinfra_client",
    "initialize_logging",
    "user_from_settings",
]
