"""Catálogo de tipos distribuídos com o cliente."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from app.domain import (
    Certificate,
    CreditNoteLog,
    Event,
    IssuingCardLog,
    IssuingInvoiceLog,
    IssuingPurchaseLog,
    PixChargebackLog,
    PixClaimLog,
    PixDomain,
    PixInfractionLog,
    PixKeyLog,
    PixRequest,
    PixRequestLog,
    PixReversal,
    PixReversalLog,
    Webhook,
)
from app.domain.resource import Resource
from utils.errors import ParseError

from .resolver import EventLogResolver
from .type_registry import DecodeFn, TypeRegistry

MODEL_TYPES: tuple[type[Resource], ...] = (
    Webhook,
    PixRequest,
    PixReversal,
    PixDomain,
    Certificate,
    PixKeyLog,
    PixClaimLog,
    PixChargebackLog,
    PixInfractionLog,
    PixRequestLog,
    PixReversalLog,
    IssuingCardLog,
    IssuingInvoiceLog,
    IssuingPurchaseLog,
    CreditNoteLog,
)


def _validate(model: type[Resource], payload: Mapping[str, Any]) -> Resource:
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        fields = sorted(
            ".".join(str(part) for part in error["loc"]) for error in exc.errors()
        )
        raise ParseError(f"invalid {model.__name__} payload: {', '.join(fields)}") from exc


def model_decoder(model: type[Resource]) -> DecodeFn:
    """Decodificador padrão: valida o payload no modelo pydantic."""

    def decode(payload: Mapping[str, Any]) -> Resource:
        return _validate(model, payload)

    return decode


def event_decoder(resolver: EventLogResolver) -> DecodeFn:
    """Decodificador de Event com resolução do log pela subscription."""

    def decode(payload: Mapping[str, Any]) -> Resource:
        return _validate(Event, resolver.decode_event_payload(payload))

    return decode


def build_default_registry() -> TypeRegistry:
    """Cria registro com todos os tipos distribuídos."""
    registry = TypeRegistry()
    for model in MODEL_TYPES:
        registry.register(model.__name__, model_decoder(model))
    registry.register("Event", event_decoder(EventLogResolver(registry)))
    return registry
