"""Recebimento de Events no endpoint do usuário (sem logar o corpo)."""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from utils.errors import InvalidSignatureError, ParseError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.domain import Event
    from app.services import SignatureVerifier
    from config.settings import Environment

SIGNATURE_HEADER = "Digital-Signature"


def get_signature_header(headers: Mapping[str, str]) -> str:
    """Lê Digital-Signature sem diferenciar maiúsculas/minúsculas.

    Raises:
        InvalidSignatureError: Header ausente ou vazio
    """
    expected = SIGNATURE_HEADER.lower()
    for name, value in headers.items():
        if name.lower() == expected and value:
            return value
    raise InvalidSignatureError("missing_signature_header")


def parse_webhook_request(
    raw_body: bytes,
    headers: Mapping[str, str],
    verifier: SignatureVerifier,
    environment: Environment | str,
) -> Event:
    """Valida assinatura e decodifica o Event recebido.

    Args:
        raw_body: Corpo bruto do request (bytes exatos recebidos)
        headers: Headers recebidos
        verifier: SignatureVerifier do cliente
        environment: Ambiente cuja chave assina os Events

    Raises:
        ParseError: Corpo não é JSON ou não tem "event"
        InvalidSignatureError: Header ausente ou assinatura inválida

    Returns:
        Event decodificado
    """
    signature = get_signature_header(headers)
    return cast(
        "Event",
        verifier.parse_and_verify(raw_body, signature, "Event", environment, key="event"),
    )


def http_status_for(error: Exception) -> int:
    """Status HTTP sugerido para responder à Stark Infra em caso de falha.

    ParseError -> 400, InvalidSignatureError -> 401, demais -> 500.
    """
    if isinstance(error, InvalidSignatureError):
        return 401
    if isinstance(error, ParseError):
        return 400
    return 500
