"""Fachada de PixDomains."""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from .base import ResourceFacade

if TYPE_CHECKING:
    from collections.abc import Iterator

    from app.domain import PixDomain


class PixDomainResource(ResourceFacade):
    type_name = "PixDomain"

    def query(self) -> Iterator[PixDomain]:
        """Todos os domínios Pix dos participantes com seus certificados."""
        return cast("Iterator[PixDomain]", self._fetcher.stream(self.type_name))
