"""Webhook Stark Infra: leitura de assinatura e parse autenticado de Events."""

from .receive import (
    SIGNATURE_HEADER,
    get_signature_header,
    http_status_for,
    parse_webhook_request,
)

__all__ = [
    "SIGNATURE_HEADER",
    "get_signature_header",
    "http_status_for",
    "parse_webhook_request",
]
