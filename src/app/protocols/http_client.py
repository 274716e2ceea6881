"""Protocolos HTTP usados pelo app.

Evita dependência direta da camada api.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from config.settings import Environment


class ApiResponseProtocol(Protocol):
    """Resposta 2xx com corpo JSON."""

    status: int
    content: str

    def json(self) -> dict[str, Any]: ...


class StarkInfraHttpClientProtocol(Protocol):
    """Contrato mínimo para o cliente HTTP autenticado.

    Implementações levantam RequestError para status não-2xx e falhas de
    transporte; retries, se houver, são responsabilidade delas.
    """

    @property
    def environment(self) -> Environment: ...

    def fetch(
        self,
        method: str,
        path: str,
        payload: dict[str, Any] | None = None,
        query: dict[str, Any] | None = None,
        environment: Environment | None = None,
    ) -> ApiResponseProtocol: ...
