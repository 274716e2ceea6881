"""Base das fachadas de recursos."""

from __future__ import annotations

from datetime import date, datetime
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from app.services import PaginatedFetcher, RestService, SignatureVerifier
    from config.settings import Environment


def check_date(value: date | datetime | str | None) -> date | None:
    """Normaliza filtro de data (date, datetime ou 'YYYY-MM-DD').

    Raises:
        ValueError: String em formato inválido
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return datetime.fromisoformat(value).date()
    except ValueError as exc:
        raise ValueError(f"invalid datetime string {value}") from exc


class ResourceFacade:
    """Liga um tipo registrado aos serviços compartilhados do cliente."""

    type_name: ClassVar[str]

    def __init__(
        self,
        fetcher: PaginatedFetcher,
        rest: RestService,
        verifier: SignatureVerifier,
        environment: Environment,
    ) -> None:
        self._fetcher = fetcher
        self._rest = rest
        self._verifier = verifier
        self._environment = environment
