"""Assinatura de Webhook: URL notificada e serviços inscritos."""

from __future__ import annotations

from .resource import Resource


class Webhook(Resource):
    """Webhook usado para receber Events em um endpoint do usuário."""

    url: str
    subscriptions: list[str]
    id: str | None = None
