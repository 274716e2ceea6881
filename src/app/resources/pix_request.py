"""Fachada de PixRequests."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, cast

from .base import ResourceFacade, check_date

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence
    from datetime import date, datetime

    from app.domain import PixRequest
    from config.settings import Environment


def _filters(
    after: date | datetime | str | None,
    before: date | datetime | str | None,
    status: Sequence[str] | str | None,
    tags: Sequence[str] | None,
    ids: Sequence[str] | None,
    end_to_end_ids: Sequence[str] | None,
    external_ids: Sequence[str] | None,
) -> dict[str, Any]:
    return {
        "after": check_date(after),
        "before": check_date(before),
        "status": status,
        "tags": tags,
        "ids": ids,
        "end_to_end_ids": end_to_end_ids,
        "external_ids": external_ids,
    }


class PixRequestResource(ResourceFacade):
    type_name = "PixRequest"

    def create(self, requests: Sequence[PixRequest]) -> list[PixRequest]:
        return cast("list[PixRequest]", self._rest.post(self.type_name, requests))

    def get(self, id: str) -> PixRequest:
        return cast("PixRequest", self._rest.get_id(self.type_name, id))

    def query(
        self,
        limit: int | None = None,
        after: date | datetime | str | None = None,
        before: date | datetime | str | None = None,
        status: Sequence[str] | str | None = None,
        tags: Sequence[str] | None = None,
        ids: Sequence[str] | None = None,
        end_to_end_ids: Sequence[str] | None = None,
        external_ids: Sequence[str] | None = None,
    ) -> Iterator[PixRequest]:
        query = _filters(after, before, status, tags, ids, end_to_end_ids, external_ids)
        return cast("Iterator[PixRequest]", self._fetcher.stream(self.type_name, query, limit))

    def page(
        self,
        cursor: str | None = None,
        limit: int | None = None,
        after: date | datetime | str | None = None,
        before: date | datetime | str | None = None,
        status: Sequence[str] | str | None = None,
        tags: Sequence[str] | None = None,
        ids: Sequence[str] | None = None,
        end_to_end_ids: Sequence[str] | None = None,
        external_ids: Sequence[str] | None = None,
    ) -> tuple[list[PixRequest], str | None]:
        query = _filters(after, before, status, tags, ids, end_to_end_ids, external_ids)
        requests, next_cursor = self._fetcher.page(self.type_name, query, cursor, limit)
        return cast("list[PixRequest]", requests), next_cursor

    def parse(
        self,
        content: bytes | str,
        signature: str,
        environment: Environment | str | None = None,
    ) -> PixRequest:
        """PixRequest recebida no endpoint de autorização (documento inteiro)."""
        return cast(
            "PixRequest",
            self._verifier.parse_and_verify(
                content,
                signature,
                self.type_name,
                environment or self._environment,
            ),
        )

    @staticmethod
    def response(status: str, reason: str | None = None) -> str:
        """Corpo JSON da resposta de autorização a uma PixRequest recebida.

        Args:
            status: "approved" ou "denied"
            reason: Motivo da recusa (ex: "invalidAccountNumber", "taxIdMismatch")

        Returns:
            JSON a ser devolvido à Stark Infra no corpo da resposta HTTP
        """
        return json.dumps({"authorization": {"status": status, "reason": reason}})
