"""Assinatura e verificação ECDSA (secp256k1 + SHA-256, DER em base64)."""

from __future__ import annotations

import base64
import binascii

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.asymmetric.utils import decode_dss_signature

from utils.errors import InvalidSignatureError

from .constants import SIGNATURE_ALGORITHM


def sign_message(message: bytes, private_key: ec.EllipticCurvePrivateKey) -> str:
    """Assina mensagem e retorna assinatura DER em base64."""
    signature = private_key.sign(message, SIGNATURE_ALGORITHM)
    return base64.b64encode(signature).decode("ascii")


def decode_signature(signature: str) -> bytes:
    """Decodifica assinatura base64 para DER validado.

    Raises:
        InvalidSignatureError: Se não for base64 válido ou DER de ECDSA
    """
    try:
        der = base64.b64decode(signature.strip(), validate=True)
        decode_dss_signature(der)
    except (ValueError, binascii.Error) as exc:
        raise InvalidSignatureError("The provided signature is not valid") from exc
    return der


def verify_signature(
    content: bytes,
    signature_der: bytes,
    public_key: ec.EllipticCurvePublicKey,
) -> bool:
    """Verifica assinatura sobre os bytes exatos de `content`.

    Returns:
        True se a assinatura confere com a chave
    """
    try:
        public_key.verify(signature_der, content, SIGNATURE_ALGORITHM)
    except InvalidSignature:
        return False
    return True
