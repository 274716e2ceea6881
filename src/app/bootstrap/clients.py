"""Factories do cliente Stark Infra.

Único ponto do app que conhece a camada api: monta o cliente HTTP
autenticado e conecta as implementações concretas aos protocolos.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.connectors.starkinfra.http_client import StarkInfraHttpClient
from api.connectors.starkinfra.user import Organization, Project, User
from app.infra.keys import ApiPublicKeyFetcher, PublicKeyCache
from app.registry import build_default_registry
from app.resources import (
    EventResource,
    PixDomainResource,
    PixRequestResource,
    RequestResource,
    WebhookResource,
)
from app.services import PaginatedFetcher, RestService, SignatureVerifier
from config.settings import StarkInfraSettings, get_starkinfra_settings
from utils.errors import ConfigurationError

if TYPE_CHECKING:
    import httpx

    from app.registry import TypeRegistry

logger = logging.getLogger(__name__)


class StarkInfraClient:
    """Cliente completo: um HTTP autenticado, um registro e um cache de chaves.

    Seguro para uso concorrente; o único estado mutável compartilhado é
    o cache de chaves públicas.
    """

    def __init__(
        self,
        http_client: StarkInfraHttpClient,
        registry: TypeRegistry | None = None,
        public_keys: PublicKeyCache | None = None,
        max_page_size: int | None = None,
    ) -> None:
        self.http_client = http_client
        self.registry = registry or build_default_registry()
        self.public_keys = public_keys or PublicKeyCache(ApiPublicKeyFetcher(http_client))
        self.fetcher = PaginatedFetcher(
            http_client,
            self.registry,
            max_page_size or http_client.settings.max_page_size,
        )
        self.rest = RestService(http_client, self.registry)
        self.verifier = SignatureVerifier(self.public_keys, self.registry)

        services = (self.fetcher, self.rest, self.verifier, http_client.environment)
        self.event = EventResource(*services)
        self.webhook = WebhookResource(*services)
        self.pix_request = PixRequestResource(*services)
        self.pix_domain = PixDomainResource(*services)
        self.request = RequestResource(http_client)

    def close(self) -> None:
        self.http_client.close()

    def __enter__(self) -> StarkInfraClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def user_from_settings(settings: StarkInfraSettings) -> User:
    """Monta a credencial configurada (Project ou Organization).

    Raises:
        ConfigurationError: Sem credencial ou chave privada inválida
    """
    if not settings.private_key or not (settings.project_id or settings.organization_id):
        raise ConfigurationError(
            "A user is required to access the API: configure STARKINFRA_PROJECT_ID "
            "or STARKINFRA_ORGANIZATION_ID and STARKINFRA_PRIVATE_KEY"
        )
    try:
        if settings.project_id:
            return Project(
                environment=settings.environment,
                id=settings.project_id,
                private_key=settings.private_key,
            )
        return Organization(
            environment=settings.environment,
            id=settings.organization_id,
            private_key=settings.private_key,
            workspace_id=settings.workspace_id or None,
        )
    except ValueError as exc:
        raise ConfigurationError(str(exc)) from exc


def create_starkinfra_client(
    settings: StarkInfraSettings | None = None,
    user: User | None = None,
    transport: httpx.BaseTransport | None = None,
) -> StarkInfraClient:
    """Cria StarkInfraClient com settings do ambiente.

    Args:
        settings: StarkInfraSettings opcional. Se None, carrega do ambiente.
        user: Credencial explícita. Se None, montada a partir de settings.
        transport: Transport httpx opcional (testes)

    Raises:
        ConfigurationError: Settings inválidas ou credencial ausente
    """
    settings = settings or get_starkinfra_settings()
    errors = settings.validate()
    if errors:
        raise ConfigurationError("; ".join(errors))

    user = user or user_from_settings(settings)
    http_client = StarkInfraHttpClient(settings=settings, user=user, transport=transport)
    logger.info(
        "starkinfra_client_created",
        extra={"environment": user.environment.value, "api_version": settings.api_version},
    )
    return StarkInfraClient(http_client)
