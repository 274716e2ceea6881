"""Modelos de domínio da API Stark Infra.

Todos imutáveis e criados apenas pela decodificação de payloads da API
(camelCase ou snake_case).
"""

from .event import Event
from .logs import (
    CreditNoteLog,
    IssuingCardLog,
    IssuingInvoiceLog,
    IssuingPurchaseLog,
    Log,
    PixChargebackLog,
    PixClaimLog,
    PixInfractionLog,
    PixKeyLog,
    PixRequestLog,
    PixReversalLog,
)
from .pix import Certificate, PixDomain, PixRequest, PixReversal
from .resource import Resource
from .webhook import Webhook

__all__ = [
    "Certificate",
    "CreditNoteLog",
    "Event",
    "IssuingCardLog",
    "IssuingInvoiceLog",
    "IssuingPurchaseLog",
    "Log",
    "PixChargebackLog",
    "PixClaimLog",
    "PixDomain",
    "PixInfractionLog",
    "PixKeyLog",
    "PixRequest",
    "PixRequestLog",
    "PixReversal",
    "PixReversalLog",
    "Resource",
    "Webhook",
]
