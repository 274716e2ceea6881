"""Subscriptions de Webhook e o tipo de log que cada uma entrega."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType


class SubscriptionKind(str, Enum):
    """Serviços que disparam Events com log tipado."""

    PIX_KEY = "pix-key"
    PIX_CLAIM = "pix-claim"
    PIX_CHARGEBACK = "pix-chargeback"
    PIX_INFRACTION = "pix-infraction"
    PIX_REQUEST_IN = "pix-request.in"
    PIX_REQUEST_OUT = "pix-request.out"
    PIX_REVERSAL_IN = "pix-reversal.in"
    PIX_REVERSAL_OUT = "pix-reversal.out"
    ISSUING_CARD = "issuing-card"
    ISSUING_INVOICE = "issuing-invoice"
    ISSUING_PURCHASE = "issuing-purchase"
    CREDIT_NOTE = "credit-note"

    @classmethod
    def from_value(cls, value: object) -> SubscriptionKind | None:
        """Retorna o membro correspondente ou None para valores desconhecidos."""
        try:
            return cls(value)
        except ValueError:
            return None


LOG_TYPE_BY_SUBSCRIPTION: MappingProxyType[SubscriptionKind, str] = MappingProxyType(
    {
        SubscriptionKind.PIX_KEY: "PixKeyLog",
        SubscriptionKind.PIX_CLAIM: "PixClaimLog",
        SubscriptionKind.PIX_CHARGEBACK: "PixChargebackLog",
        SubscriptionKind.PIX_INFRACTION: "PixInfractionLog",
        SubscriptionKind.PIX_REQUEST_IN: "PixRequestLog",
        SubscriptionKind.PIX_REQUEST_OUT: "PixRequestLog",
        SubscriptionKind.PIX_REVERSAL_IN: "PixReversalLog",
        SubscriptionKind.PIX_REVERSAL_OUT: "PixReversalLog",
        SubscriptionKind.ISSUING_CARD: "IssuingCardLog",
        SubscriptionKind.ISSUING_INVOICE: "IssuingInvoiceLog",
        SubscriptionKind.ISSUING_PURCHASE: "IssuingPurchaseLog",
        SubscriptionKind.CREDIT_NOTE: "CreditNoteLog",
    }
)
