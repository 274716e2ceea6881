"""Testes para TypeRegistry e o catálogo padrão."""

from __future__ import annotations

import pytest

from app.domain import PixDomain, PixRequestLog, Webhook
from app.registry import (
    Decoded,
    Raw,
    TypeRegistry,
    build_default_registry,
    lift,
    model_decoder,
)
from app.registry.catalog import MODEL_TYPES
from tests.fakes.fake_starkinfra import PIX_REQUEST_PAYLOAD, SAMPLE_PAYLOADS, webhook_item
from utils.errors import ConfigurationError, ParseError


class TestTypeRegistry:
    """Registro, lookup e decodificação."""

    def test_register_and_decode(self) -> None:
        registry = TypeRegistry()
        registry.register("Webhook", model_decoder(Webhook))

        webhook = registry.decode("Webhook", webhook_item(1))

        assert isinstance(webhook, Webhook)
        assert webhook.id == "1"
        assert "Webhook" in registry

    def test_duplicate_registration_raises(self) -> None:
        registry = TypeRegistry()
        registry.register("Webhook", model_decoder(Webhook))
        with pytest.raises(ConfigurationError, match="already registered"):
            registry.register("Webhook", model_decoder(Webhook))

    def test_unknown_type_raises_configuration_error(self) -> None:
        """Tipo não registrado é defeito de programação, não falha de parse."""
        registry = TypeRegistry()
        with pytest.raises(ConfigurationError, match="unregistered resource type: Boleto"):
            registry.decode("Boleto", {"id": "1"})
        with pytest.raises(ConfigurationError):
            registry.decode_many("Boleto", [])

    def test_descriptor_derives_endpoint_and_keys(self) -> None:
        registry = build_default_registry()
        descriptor = registry.descriptor("PixRequestLog")
        assert descriptor.endpoint == "pix-request/log"
        assert descriptor.list_key == "logs"
        assert descriptor.object_key == "log"

        descriptor = registry.descriptor("PixDomain")
        assert descriptor.endpoint == "pix-domain"
        assert descriptor.list_key == "domains"
        assert descriptor.object_key == "domain"


class TestDecodeMany:
    """decode_many: ordem preservada e idempotência."""

    def test_preserves_order(self) -> None:
        registry = build_default_registry()
        payloads = [Raw(webhook_item(i)) for i in range(5)]

        webhooks = registry.decode_many("Webhook", payloads)

        assert [webhook.id for webhook in webhooks] == ["0", "1", "2", "3", "4"]

    def test_decoded_values_pass_through_unchanged(self) -> None:
        registry = build_default_registry()
        existing = registry.decode("Webhook", webhook_item(7))

        result = registry.decode_many(
            "Webhook",
            [Raw(webhook_item(6)), Decoded(existing), Raw(webhook_item(8))],
        )

        assert result[1] is existing
        assert [webhook.id for webhook in result] == ["6", "7", "8"]

    def test_sample_payloads_cover_every_registered_type(self) -> None:
        assert set(SAMPLE_PAYLOADS) == set(build_default_registry().type_names())

    @pytest.mark.parametrize("type_name", sorted(SAMPLE_PAYLOADS))
    def test_idempotent_for_registered_types(self, type_name: str) -> None:
        """Re-decodificar um objeto já decodificado devolve o mesmo objeto."""
        registry = build_default_registry()
        once = registry.decode_many(type_name, [Raw(SAMPLE_PAYLOADS[type_name])])

        twice = registry.decode_many(type_name, [Decoded(value) for value in once])
        untagged = registry.decode_many(type_name, once)

        assert twice == once
        assert twice[0] is once[0]
        assert untagged[0] is once[0]

    def test_event_redecode_keeps_typed_log(self) -> None:
        registry = build_default_registry()
        event = registry.decode("Event", SAMPLE_PAYLOADS["Event"])

        (again,) = registry.decode_many("Event", [event])

        assert again is event
        assert isinstance(again.log, PixRequestLog)

    def test_untagged_mixed_list(self) -> None:
        """Mappings e Resources sem rótulo são decodificados, sem perda de itens."""
        registry = build_default_registry()
        existing = registry.decode("Webhook", webhook_item(7))

        result = registry.decode_many("Webhook", [webhook_item(6), existing, webhook_item(8)])

        assert [webhook.id for webhook in result] == ["6", "7", "8"]
        assert result[1] is existing

    def test_unsupported_item_raises(self) -> None:
        registry = build_default_registry()
        with pytest.raises(TypeError):
            registry.decode_many("Webhook", [webhook_item(1), "not a payload"])

    def test_lift_tags_values(self) -> None:
        registry = build_default_registry()
        existing = registry.decode("Webhook", webhook_item(1))

        assert lift(existing) == Decoded(existing)
        assert lift({"id": "2"}) == Raw({"id": "2"})
        with pytest.raises(TypeError):
            lift(["not", "a", "mapping"])


class TestCatalog:
    def test_all_model_types_registered(self) -> None:
        registry = build_default_registry()
        for model in MODEL_TYPES:
            assert model.__name__ in registry
        assert "Event" in registry

    def test_missing_required_field_raises_parse_error(self) -> None:
        registry = build_default_registry()
        payload = dict(PIX_REQUEST_PAYLOAD)
        del payload["endToEndId"]

        with pytest.raises(ParseError, match="end"):
            registry.decode("PixRequest", payload)

    def test_accepts_camel_and_snake_case(self) -> None:
        registry = build_default_registry()
        camel = registry.decode("PixRequest", PIX_REQUEST_PAYLOAD)
        snake = registry.decode("PixRequest", camel.model_dump())

        assert camel.end_to_end_id == "E34052649202205271219dKrmVefNEZy"
        assert snake == camel

    def test_nested_certificates_decoded(self) -> None:
        registry = build_default_registry()
        domain = registry.decode(
            "PixDomain",
            {"name": "pix.bank.com", "certificates": [{"content": "-----BEGIN"}]},
        )
        assert isinstance(domain, PixDomain)
        assert domain.certificates[0].content == "-----BEGIN"

    def test_unknown_fields_ignored(self) -> None:
        registry = build_default_registry()
        webhook = registry.decode("Webhook", {**webhook_item(1), "brandNewField": 1})
        assert webhook.url == "https://example.com/hook/1"

    def test_to_api_json_uses_camel_case(self) -> None:
        registry = build_default_registry()
        request = registry.decode("PixRequest", PIX_REQUEST_PAYLOAD)
        data = request.to_api_json()
        assert data["endToEndId"] == PIX_REQUEST_PAYLOAD["endToEndId"]
        assert "end_to_end_id" not in data
