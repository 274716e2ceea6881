"""Resolução polimórfica do log de um Event.

O formato de `log` depende de `subscription`, campo irmão no mesmo
payload. Subscriptions desconhecidas mantêm o log bruto: uma nova
subscription ainda não modelada não pode impedir a entrega dos demais
Events.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from app.domain.resource import Resource
from config.logging import log_fallback
from utils.errors import ParseError

from .subscriptions import LOG_TYPE_BY_SUBSCRIPTION, SubscriptionKind

if TYPE_CHECKING:
    from .type_registry import TypeRegistry

logger = logging.getLogger(__name__)


class EventLogResolver:
    """Escolhe e aplica o decodificador do log conforme a subscription."""

    def __init__(self, registry: TypeRegistry) -> None:
        self._registry = registry

    def log_type_for(self, subscription: object) -> str | None:
        kind = SubscriptionKind.from_value(subscription)
        if kind is None:
            return None
        return LOG_TYPE_BY_SUBSCRIPTION[kind]

    def resolve(self, subscription: object, log: Any) -> Any:
        """Decodifica `log` ou o devolve inalterado se a subscription não for mapeada.

        Raises:
            ParseError: Subscription mapeada com log ausente ou inválido
        """
        if isinstance(log, Resource):
            return log
        log_type = self.log_type_for(subscription)
        if log_type is None:
            log_fallback(
                logger,
                "event_log_resolver",
                reason="unmapped_subscription",
                subscription=str(subscription),
            )
            return log
        if not isinstance(log, Mapping):
            raise ParseError(f"invalid {log_type} payload: log is not an object")
        return self._registry.decode(log_type, log)

    def decode_event_payload(self, payload: Mapping[str, Any]) -> dict[str, Any]:
        """Cópia do payload do Event com `log` já resolvido."""
        data = dict(payload)
        data["log"] = self.resolve(data.get("subscription"), data.get("log"))
        return data
