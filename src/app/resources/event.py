"""Fachada de Events (notificações de Webhook)."""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from .base import ResourceFacade, check_date

if TYPE_CHECKING:
    from collections.abc import Iterator
    from datetime import date, datetime

    from app.domain import Event
    from config.settings import Environment


class EventResource(ResourceFacade):
    """Consulta, atualização e parse de Events."""

    type_name = "Event"

    def get(self, id: str) -> Event:
        return cast("Event", self._rest.get_id(self.type_name, id))

    def query(
        self,
        limit: int | None = None,
        after: date | datetime | str | None = None,
        before: date | datetime | str | None = None,
        is_delivered: bool | None = None,
    ) -> Iterator[Event]:
        """Sequência lazy de Events (sem limit, até o fim da coleção)."""
        query = {
            "after": check_date(after),
            "before": check_date(before),
            "is_delivered": is_delivered,
        }
        return cast("Iterator[Event]", self._fetcher.stream(self.type_name, query, limit))

    def page(
        self,
        cursor: str | None = None,
        limit: int | None = None,
        after: date | datetime | str | None = None,
        before: date | datetime | str | None = None,
        is_delivered: bool | None = None,
    ) -> tuple[list[Event], str | None]:
        """Uma página de até 100 Events e o cursor da próxima."""
        query = {
            "after": check_date(after),
            "before": check_date(before),
            "is_delivered": is_delivered,
        }
        events, next_cursor = self._fetcher.page(self.type_name, query, cursor, limit)
        return cast("list[Event]", events), next_cursor

    def delete(self, id: str) -> Event:
        return cast("Event", self._rest.delete_id(self.type_name, id))

    def update(self, id: str, is_delivered: bool) -> Event:
        """Marca o Event como entregue (deixa de aparecer em is_delivered=False)."""
        return cast("Event", self._rest.patch_id(self.type_name, id, is_delivered=is_delivered))

    def parse(
        self,
        content: bytes | str,
        signature: str,
        environment: Environment | str | None = None,
    ) -> Event:
        """Cria o Event recebido no endpoint do usuário, validando a assinatura.

        Args:
            content: Corpo bruto recebido (sem parse)
            signature: Header Digital-Signature
            environment: Ambiente da chave; padrão é o do cliente

        Raises:
            ParseError: Corpo não é JSON ou não tem "event"
            InvalidSignatureError: Assinatura não confere
        """
        return cast(
            "Event",
            self._verifier.parse_and_verify(
                content,
                signature,
                self.type_name,
                environment or self._environment,
                key="event",
            ),
        )
