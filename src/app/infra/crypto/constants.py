"""Constantes criptográficas da API Stark Infra."""

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec

CURVE = ec.SECP256K1()
SIGNATURE_ALGORITHM = ec.ECDSA(hashes.SHA256())
