"""Busca da chave pública vigente no endpoint `public-key`."""

from __future__ import annotations

from typing import TYPE_CHECKING

from utils.errors import ParseError

if TYPE_CHECKING:
    from app.protocols.http_client import StarkInfraHttpClientProtocol
    from config.settings import Environment

PUBLIC_KEY_PATH = "public-key"


class ApiPublicKeyFetcher:
    """Obtém o PEM da chave mais recente via cliente autenticado."""

    def __init__(self, http_client: StarkInfraHttpClientProtocol) -> None:
        self._http_client = http_client

    def __call__(self, environment: Environment) -> str:
        """Retorna o PEM da chave pública do ambiente.

        Raises:
            RequestError: Falha HTTP
            ParseError: Resposta sem `publicKeys[0].content`
        """
        response = self._http_client.fetch(
            "GET",
            PUBLIC_KEY_PATH,
            query={"limit": 1},
            environment=environment,
        )
        keys = response.json().get("publicKeys")
        if not isinstance(keys, list) or not keys or not isinstance(keys[0], dict):
            raise ParseError("public key response without publicKeys")
        content = keys[0].get("content")
        if not isinstance(content, str) or not content:
            raise ParseError("public key response without content")
        return content
