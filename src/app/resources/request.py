"""Acesso direto a qualquer rota da API, sem decodificação de domínio.

Útil para recursos ainda não modelados no cliente; a resposta chega como
ApiResponse (status, conteúdo bruto e `json()`).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from app.protocols.http_client import (
        ApiResponseProtocol,
        StarkInfraHttpClientProtocol,
    )


def _route(path: str) -> str:
    return path.strip("/")


class RequestResource:
    """Requisições assinadas para um caminho arbitrário (ex: "/pix-request/")."""

    def __init__(self, http_client: StarkInfraHttpClientProtocol) -> None:
        self._http_client = http_client

    def get(self, path: str, query: dict[str, Any] | None = None) -> ApiResponseProtocol:
        return self._http_client.fetch("GET", _route(path), query=query)

    def post(
        self,
        path: str,
        payload: dict[str, Any],
        query: dict[str, Any] | None = None,
    ) -> ApiResponseProtocol:
        return self._http_client.fetch("POST", _route(path), payload=payload, query=query)

    def patch(
        self,
        path: str,
        payload: dict[str, Any],
        query: dict[str, Any] | None = None,
    ) -> ApiResponseProtocol:
        return self._http_client.fetch("PATCH", _route(path), payload=payload, query=query)

    def put(
        self,
        path: str,
        payload: dict[str, Any],
        query: dict[str, Any] | None = None,
    ) -> ApiResponseProtocol:
        """Cria o recurso ou o substitui se já existir."""
        return self._http_client.fetch("PUT", _route(path), payload=payload, query=query)

    def delete(self, path: str, query: dict[str, Any] | None = None) -> ApiResponseProtocol:
        return self._http_client.fetch("DELETE", _route(path), query=query)
