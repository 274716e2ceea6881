"""Fachada de Webhooks."""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from .base import ResourceFacade

if TYPE_CHECKING:
    from collections.abc import Iterator

    from app.domain import Webhook


class WebhookResource(ResourceFacade):
    type_name = "Webhook"

    def create(self, webhook: Webhook) -> Webhook:
        return cast("Webhook", self._rest.post_single(self.type_name, webhook))

    def get(self, id: str) -> Webhook:
        return cast("Webhook", self._rest.get_id(self.type_name, id))

    def query(self, limit: int | None = None) -> Iterator[Webhook]:
        return cast("Iterator[Webhook]", self._fetcher.stream(self.type_name, None, limit))

    def page(
        self,
        cursor: str | None = None,
        limit: int | None = None,
    ) -> tuple[list[Webhook], str | None]:
        webhooks, next_cursor = self._fetcher.page(self.type_name, None, cursor, limit)
        return cast("list[Webhook]", webhooks), next_cursor

    def delete(self, id: str) -> Webhook:
        return cast("Webhook", self._rest.delete_id(self.type_name, id))
