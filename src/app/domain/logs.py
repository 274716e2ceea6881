"""Logs de entidades notificados via Event.

Cada subscription suportada tem exatamente um tipo de log. O sujeito
do log é tipado para PixRequest/PixReversal; nos demais fica como
mapping bruto.
"""

from __future__ import annotations

from datetime import datetime  # noqa: TC003 - usado em runtime pelo schema do Pydantic
from typing import Any

from pydantic import Field

from .pix import PixRequest, PixReversal
from .resource import Resource


class Log(Resource):
    """Campos comuns a todo log de entidade."""

    id: str
    created: datetime
    type: str
    errors: list[Any] = Field(default_factory=list)


class PixRequestLog(Log):
    request: PixRequest


class PixReversalLog(Log):
    reversal: PixReversal


class PixKeyLog(Log):
    key: dict[str, Any]


class PixClaimLog(Log):
    claim: dict[str, Any]


class PixChargebackLog(Log):
    chargeback: dict[str, Any]


class PixInfractionLog(Log):
    infraction: dict[str, Any]


class IssuingCardLog(Log):
    card: dict[str, Any]


class IssuingInvoiceLog(Log):
    invoice: dict[str, Any]


class IssuingPurchaseLog(Log):
    purchase: dict[str, Any]
    issuing_transaction_id: str | None = None


class CreditNoteLog(Log):
    note: dict[str, Any]
