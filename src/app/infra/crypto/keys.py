"""Carga de chaves ECDSA secp256k1 em formato PEM."""

from __future__ import annotations

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec

from .constants import CURVE


def load_private_key(private_key_pem: str) -> ec.EllipticCurvePrivateKey:
    """Carrega chave privada usada para assinar requisições.

    Args:
        private_key_pem: Chave privada em formato PEM

    Returns:
        Chave privada secp256k1

    Raises:
        ValueError: Se a chave não for uma secp256k1 válida
    """
    try:
        key = serialization.load_pem_private_key(
            private_key_pem.encode("utf-8"),
            password=None,
        )
    except (ValueError, TypeError) as exc:
        raise ValueError(
            "Private-key must be a valid secp256k1 ECDSA string in pem format"
        ) from exc

    if not isinstance(key, ec.EllipticCurvePrivateKey) or key.curve.name != CURVE.name:
        raise ValueError("Private-key must be a valid secp256k1 ECDSA string in pem format")
    return key


def load_public_key(public_key_pem: str) -> ec.EllipticCurvePublicKey:
    """Carrega chave pública da Stark Infra.

    Raises:
        ValueError: Se o PEM não for uma chave pública secp256k1
    """
    key = serialization.load_pem_public_key(public_key_pem.encode("utf-8"))
    if not isinstance(key, ec.EllipticCurvePublicKey) or key.curve.name != CURVE.name:
        raise ValueError("Public key must be a secp256k1 ECDSA key in pem format")
    return key


def public_key_pem(private_key: ec.EllipticCurvePrivateKey) -> str:
    """Exporta a chave pública correspondente em PEM (SubjectPublicKeyInfo)."""
    return (
        private_key.public_key()
        .public_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        )
        .decode("utf-8")
    )
