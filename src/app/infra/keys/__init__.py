"""Chaves públicas da Stark Infra: busca e cache."""

from .fetcher import PUBLIC_KEY_PATH, ApiPublicKeyFetcher
from .public_key_cache import PublicKeyCache

__all__ = [
    "PUBLIC_KEY_PATH",
    "ApiPublicKeyFetcher",
    "PublicKeyCache",
]
