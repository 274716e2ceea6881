"""Criptografia ECDSA usada pela API Stark Infra.

- Assinatura de requisições de saída com a chave privada do usuário.
- Verificação de webhooks com a chave pública da Stark Infra.

O primitivo de curva elíptica vem de `cryptography`.
"""

from .constants import CURVE, SIGNATURE_ALGORITHM
from .keys import load_private_key, load_public_key, public_key_pem
from .signature import decode_signature, sign_message, verify_signature

__all__ = [
    "CURVE",
    "SIGNATURE_ALGORITHM",
    "decode_signature",
    "load_private_key",
    "load_public_key",
    "public_key_pem",
    "sign_message",
    "verify_signature",
]
