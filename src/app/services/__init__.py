"""Serviços de aplicação: paginação, verificação de assinatura e REST."""

from .pagination import PaginatedFetcher
from .rest import RestService
from .signature_verifier import SignatureVerifier

__all__ = [
    "PaginatedFetcher",
    "RestService",
    "SignatureVerifier",
]
