"""Protocolos para obtenção da chave pública de verificação."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from cryptography.hazmat.primitives.asymmetric import ec

    from config.settings import Environment


class PublicKeyFetcherProtocol(Protocol):
    """Busca o PEM da chave pública vigente no ambiente."""

    def __call__(self, environment: Environment) -> str: ...


class PublicKeyProviderProtocol(Protocol):
    """Fonte de chaves com cache e refresh explícito."""

    def get(self, environment: Environment) -> ec.EllipticCurvePublicKey: ...

    def refresh(self, environment: Environment) -> ec.EllipticCurvePublicKey: ...
