"""Registro de tipos e resolução polimórfica de payloads."""

from .catalog import build_default_registry, event_decoder, model_decoder
from .payload import Decoded, Payload, Raw, lift
from .resolver import EventLogResolver
from .subscriptions import LOG_TYPE_BY_SUBSCRIPTION, SubscriptionKind
from .type_registry import DecodeFn, ResourceDescriptor, TypeRegistry

__all__ = [
    "LOG_TYPE_BY_SUBSCRIPTION",
    "DecodeFn",
    "Decoded",
    "EventLogResolver",
    "Payload",
    "Raw",
    "ResourceDescriptor",
    "SubscriptionKind",
    "TypeRegistry",
    "build_default_registry",
    "event_decoder",
    "lift",
    "model_decoder",
]
