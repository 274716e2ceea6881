"""Entidades Pix decodificadas pelo cliente.

Apenas as entidades necessárias para os logs tipados; o restante do
catálogo segue como payload bruto dentro dos logs.
"""

from __future__ import annotations

from datetime import datetime  # noqa: TC003 - usado em runtime pelo schema do Pydantic

from pydantic import Field

from .resource import Resource


class PixRequest(Resource):
    """Transação Pix recebida (flow "in") ou enviada (flow "out")."""

    amount: int
    external_id: str
    sender_name: str
    sender_tax_id: str
    sender_branch_code: str
    sender_account_number: str
    sender_account_type: str
    receiver_name: str
    receiver_tax_id: str
    receiver_bank_code: str
    receiver_account_number: str
    receiver_branch_code: str
    receiver_account_type: str
    end_to_end_id: str
    cashier_type: str | None = None
    cashier_bank_code: str | None = None
    cash_amount: int | None = None
    receiver_key_id: str | None = None
    description: str | None = None
    reconciliation_id: str | None = None
    initiator_tax_id: str | None = None
    tags: list[str] = Field(default_factory=list)
    method: str | None = None
    id: str | None = None
    fee: int | None = None
    status: str | None = None
    flow: str | None = None
    sender_bank_code: str | None = None
    created: datetime | None = None
    updated: datetime | None = None


class PixReversal(Resource):
    """Devolução de uma PixRequest."""

    amount: int
    external_id: str
    end_to_end_id: str
    reason: str
    tags: list[str] = Field(default_factory=list)
    id: str | None = None
    return_id: str | None = None
    bank_code: str | None = None
    fee: int | None = None
    status: str | None = None
    flow: str | None = None
    created: datetime | None = None
    updated: datetime | None = None


class Certificate(Resource):
    """Certificado de um domínio Pix."""

    content: str | None = None


class PixDomain(Resource):
    """Domínio Pix de um participante e seus certificados."""

    name: str | None = None
    certificates: list[Certificate] = Field(default_factory=list)
