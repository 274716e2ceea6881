"""Event: notificação entregue pelo Webhook."""

from __future__ import annotations

from datetime import datetime  # noqa: TC003 - usado em runtime pelo schema do Pydantic
from typing import Any

from .resource import Resource


class Event(Resource):
    """Notificação de atualização de uma entidade.

    `log` é o log tipado correspondente à `subscription` quando ela é
    conhecida; para subscriptions ainda não modeladas, o payload bruto
    é mantido sem alteração.
    """

    id: str
    log: Any
    created: datetime
    is_delivered: bool
    subscription: str
    workspace_id: str | None = None
