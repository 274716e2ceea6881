"""Paginação por cursor sobre endpoints de listagem.

`stream` transforma requisições sucessivas em uma sequência lazy e
limitada de objetos decodificados; `page` faz uma única requisição e
devolve o cursor para continuação manual.

Nenhuma página é buscada antes de o consumidor esgotar a anterior, e
nada além da página que contém o último item pedido é requisitado.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import TYPE_CHECKING, Any

from app.registry import Raw, ResourceDescriptor
from config.settings.starkinfra import MAX_PAGE_SIZE

from ._response_helpers import extract_list

if TYPE_CHECKING:
    from app.domain.resource import Resource
    from app.protocols.http_client import StarkInfraHttpClientProtocol
    from app.registry import TypeRegistry

logger = logging.getLogger(__name__)

_COMPONENT = "paginated_fetcher"


class PaginatedFetcher:
    """Busca coleções paginadas e decodifica os itens pelo TypeRegistry."""

    def __init__(
        self,
        http_client: StarkInfraHttpClientProtocol,
        registry: TypeRegistry,
        max_page_size: int = MAX_PAGE_SIZE,
    ) -> None:
        if max_page_size < 1:
            raise ValueError("max_page_size deve ser >= 1")
        self._http_client = http_client
        self._registry = registry
        self._max_page_size = max_page_size

    def page(
        self,
        resource: ResourceDescriptor | str,
        query: Mapping[str, Any] | None = None,
        cursor: str | None = None,
        limit: int | None = None,
    ) -> tuple[list[Resource], str | None]:
        """Busca uma única página.

        Args:
            resource: Descritor ou nome do tipo registrado
            query: Filtros (ids, tags, after, before, status...)
            cursor: Cursor devolvido pela página anterior (None = início)
            limit: Máximo de itens (limitado ao tamanho máximo de página)

        Returns:
            (itens decodificados na ordem do servidor, próximo cursor ou None)

        Raises:
            ValueError: limit < 1
            RequestError: Falha HTTP
        """
        descriptor = self._descriptor(resource)
        if limit is not None and limit < 1:
            raise ValueError("limit deve ser >= 1")
        page_size = None if limit is None else min(limit, self._max_page_size)
        return self._fetch_page(descriptor, query or {}, cursor, page_size)

    def stream(
        self,
        resource: ResourceDescriptor | str,
        query: Mapping[str, Any] | None = None,
        limit: int | None = None,
    ) -> Iterator[Resource]:
        """Sequência lazy de objetos atravessando páginas.

        Termina quando o servidor não devolve cursor ou quando `limit`
        itens foram entregues. Sem limit, segue até o fim da coleção.

        Raises:
            ValueError: limit negativo (imediatamente)
            RequestError: Falha HTTP (durante a iteração; itens já
                entregues continuam válidos)
        """
        descriptor = self._descriptor(resource)
        if limit is not None and limit < 0:
            raise ValueError("limit deve ser >= 0")
        return self._stream(descriptor, dict(query or {}), limit)

    def _stream(
        self,
        descriptor: ResourceDescriptor,
        query: dict[str, Any],
        limit: int | None,
    ) -> Iterator[Resource]:
        cursor: str | None = None
        yielded = 0
        while limit is None or yielded < limit:
            remaining = self._max_page_size if limit is None else limit - yielded
            entities, cursor = self._fetch_page(
                descriptor,
                query,
                cursor,
                min(remaining, self._max_page_size),
            )
            for entity in entities:
                if limit is not None and yielded >= limit:
                    return
                yield entity
                yielded += 1
            if not cursor:
                return

    def _fetch_page(
        self,
        descriptor: ResourceDescriptor,
        query: Mapping[str, Any],
        cursor: str | None,
        page_size: int | None,
    ) -> tuple[list[Resource], str | None]:
        params = {**query, "cursor": cursor or None, "limit": page_size}
        data = self._http_client.fetch("GET", descriptor.endpoint, query=params).json()
        items = extract_list(data, descriptor.list_key)
        entities = self._registry.decode_many(
            descriptor.type_name,
            [Raw(item) for item in items],
        )
        next_cursor = data.get("cursor") or None

        logger.debug(
            "page_fetched",
            extra={
                "component": _COMPONENT,
                "endpoint": descriptor.endpoint,
                "had_cursor": cursor is not None,
                "items": len(entities),
                "has_next": next_cursor is not None,
            },
        )
        return entities, next_cursor

    def _descriptor(self, resource: ResourceDescriptor | str) -> ResourceDescriptor:
        if isinstance(resource, ResourceDescriptor):
            return resource
        return self._registry.descriptor(resource)
