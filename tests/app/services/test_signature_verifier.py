"""Testes para SignatureVerifier.

As chaves secp256k1 são geradas no próprio teste; o "servidor" de chaves
públicas é um fetcher que devolve PEMs em sequência.
"""

from __future__ import annotations

import base64
import json

import pytest

from app.domain import Event, PixRequest, PixRequestLog
from app.infra.keys import PublicKeyCache
from app.registry import build_default_registry
from app.services import SignatureVerifier
from config.settings import Environment
from tests.fakes.fake_starkinfra import (
    PIX_REQUEST_PAYLOAD,
    ScriptedKeyFetcher,
    event_payload,
    generate_private_key,
    public_key_pem,
    sign,
)
from utils.errors import InvalidSignatureError, ParseError

SIGNING_KEY = generate_private_key()
OTHER_KEY = generate_private_key()


def _verifier(*pems: str) -> tuple[SignatureVerifier, ScriptedKeyFetcher]:
    fetcher = ScriptedKeyFetcher(*pems)
    verifier = SignatureVerifier(PublicKeyCache(fetcher), build_default_registry())
    return verifier, fetcher


def _event_body() -> bytes:
    # Espaçamento e ordem de chaves propositalmente diferentes de json.dumps
    return (
        b'{"event": {"id":"123", "log": '
        + json.dumps({
            "id": "789",
            "created": "2020-03-10T10:30:00+00:00",
            "type": "created",
            "errors": [],
            "request": PIX_REQUEST_PAYLOAD,
        }).encode()
        + b', "created":"2020-03-10T10:30:00+00:00", "is_delivered":false,'
        + b' "workspace_id":"456",  "subscription":"pix-request.in"}}'
    )


class TestVerify:
    """Verificação com cache e um único refresh."""

    def test_valid_signature(self) -> None:
        verifier, fetcher = _verifier(public_key_pem(SIGNING_KEY))
        content = b'{"hello": "world"}'

        assert verifier.verify(content, sign(content, SIGNING_KEY), Environment.SANDBOX)
        assert len(fetcher.calls) == 1

    def test_cached_key_reused(self) -> None:
        verifier, fetcher = _verifier(public_key_pem(SIGNING_KEY))
        content = b"{}"
        signature = sign(content, SIGNING_KEY)

        verifier.verify(content, signature, Environment.SANDBOX)
        verifier.verify(content, signature, Environment.SANDBOX)

        assert len(fetcher.calls) == 1

    def test_rotated_key_accepted_after_one_refresh(self) -> None:
        """Chave em cache antiga: um refresh e a verificação passa."""
        verifier, fetcher = _verifier(public_key_pem(OTHER_KEY), public_key_pem(SIGNING_KEY))
        content = b'{"rotated": true}'

        assert verifier.verify(content, sign(content, SIGNING_KEY), "sandbox")
        assert len(fetcher.calls) == 2

    def test_mismatch_refreshes_exactly_once_then_fails(self) -> None:
        verifier, fetcher = _verifier(public_key_pem(OTHER_KEY))
        content = b'{"forged": true}'

        with pytest.raises(InvalidSignatureError):
            verifier.assert_valid(content, sign(content, SIGNING_KEY), Environment.SANDBOX)

        assert len(fetcher.calls) == 2
        assert verifier.verify(content, sign(content, SIGNING_KEY), "sandbox") is False

    def test_malformed_signature_fails_without_fetching(self) -> None:
        verifier, fetcher = _verifier(public_key_pem(SIGNING_KEY))

        with pytest.raises(InvalidSignatureError):
            verifier.assert_valid(b"{}", "not base64!!", Environment.SANDBOX)
        with pytest.raises(InvalidSignatureError):
            verifier.assert_valid(
                b"{}",
                base64.b64encode(b"not a der signature").decode(),
                Environment.SANDBOX,
            )

        assert fetcher.calls == []

    def test_verifies_exact_bytes_not_reserialized_json(self) -> None:
        """Re-serializar o JSON muda os bytes e invalida a assinatura."""
        verifier, _ = _verifier(public_key_pem(SIGNING_KEY))
        raw = _event_body()
        signature = sign(raw, SIGNING_KEY)
        reserialized = json.dumps(json.loads(raw)).encode()

        assert reserialized != raw
        assert verifier.verify(raw, signature, Environment.SANDBOX) is True
        assert verifier.verify(reserialized, signature, Environment.SANDBOX) is False

    def test_keys_isolated_per_environment(self) -> None:
        verifier, fetcher = _verifier(public_key_pem(SIGNING_KEY))
        content = b"{}"
        signature = sign(content, SIGNING_KEY)

        verifier.verify(content, signature, Environment.SANDBOX)
        verifier.verify(content, signature, Environment.PRODUCTION)

        assert fetcher.calls == [Environment.SANDBOX, Environment.PRODUCTION]


class TestParseAndVerify:
    """Testes para SignatureVerifier.parse_and_verify."""

    def test_event_webhook_scenario(self) -> None:
        verifier, _ = _verifier(public_key_pem(SIGNING_KEY))
        raw = _event_body()

        event = verifier.parse_and_verify(
            raw, sign(raw, SIGNING_KEY), "Event", Environment.SANDBOX, key="event"
        )

        assert isinstance(event, Event)
        assert event.id == "123"
        assert event.workspace_id == "456"
        assert event.is_delivered is False
        assert event.subscription == "pix-request.in"
        assert isinstance(event.log, PixRequestLog)
        assert event.log.id == "789"

    def test_accepts_str_content(self) -> None:
        verifier, _ = _verifier(public_key_pem(SIGNING_KEY))
        content = json.dumps({"event": event_payload()})

        event = verifier.parse_and_verify(
            content, sign(content.encode(), SIGNING_KEY), "Event", "sandbox", key="event"
        )

        assert event.id == "123"

    def test_whole_document_when_key_is_none(self) -> None:
        verifier, _ = _verifier(public_key_pem(SIGNING_KEY))
        raw = json.dumps(PIX_REQUEST_PAYLOAD).encode()

        request = verifier.parse_and_verify(
            raw, sign(raw, SIGNING_KEY), "PixRequest", Environment.SANDBOX
        )

        assert isinstance(request, PixRequest)
        assert request.sender_name == "joao"

    def test_forged_content_raises_invalid_signature(self) -> None:
        verifier, _ = _verifier(public_key_pem(SIGNING_KEY))
        raw = _event_body()
        signature = sign(raw, SIGNING_KEY)
        tampered = raw.replace(b'"123"', b'"124"')

        with pytest.raises(InvalidSignatureError):
            verifier.parse_and_verify(tampered, signature, "Event", "sandbox", key="event")

    def test_invalid_json_is_parse_error(self) -> None:
        verifier, fetcher = _verifier(public_key_pem(SIGNING_KEY))
        raw = b"not json"

        with pytest.raises(ParseError):
            verifier.parse_and_verify(raw, sign(raw, SIGNING_KEY), "Event", "sandbox", key="event")

        assert fetcher.calls == []

    def test_missing_key_is_parse_error(self) -> None:
        verifier, _ = _verifier(public_key_pem(SIGNING_KEY))
        raw = b'{"notEvent": {}}'

        with pytest.raises(ParseError, match="event"):
            verifier.parse_and_verify(raw, sign(raw, SIGNING_KEY), "Event", "sandbox", key="event")

    def test_non_object_payload_is_parse_error(self) -> None:
        verifier, _ = _verifier(public_key_pem(SIGNING_KEY))
        raw = b"[1, 2]"

        with pytest.raises(ParseError):
            verifier.parse_and_verify(raw, sign(raw, SIGNING_KEY), "Event", "sandbox")
