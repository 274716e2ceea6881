"""Protocolos e contratos do core da aplicação."""

from .http_client import ApiResponseProtocol, StarkInfraHttpClientProtocol
from .public_key import PublicKeyFetcherProtocol, PublicKeyProviderProtocol

__all__ = [
    "ApiResponseProtocol",
    "PublicKeyFetcherProtocol",
    "PublicKeyProviderProtocol",
    "StarkInfraHttpClientProtocol",
]
