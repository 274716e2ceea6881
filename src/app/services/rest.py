"""Operações REST de objeto único (get/create/update/delete).

Complementa PaginatedFetcher para as fachadas de recursos.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic.alias_generators import to_camel

from app.registry import ResourceDescriptor

from ._response_helpers import extract_list, extract_object

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.domain.resource import Resource
    from app.protocols.http_client import StarkInfraHttpClientProtocol
    from app.registry import TypeRegistry


class RestService:
    """CRUD por id sobre o cliente HTTP autenticado."""

    def __init__(
        self,
        http_client: StarkInfraHttpClientProtocol,
        registry: TypeRegistry,
    ) -> None:
        self._http_client = http_client
        self._registry = registry

    def get_id(self, resource: ResourceDescriptor | str, id: str, **query: Any) -> Resource:
        descriptor = self._descriptor(resource)
        data = self._http_client.fetch(
            "GET", f"{descriptor.endpoint}/{id}", query=query or None
        ).json()
        return self._registry.decode(descriptor.type_name, extract_object(data, descriptor.object_key))

    def post(
        self,
        resource: ResourceDescriptor | str,
        entities: Sequence[Resource],
        **query: Any,
    ) -> list[Resource]:
        """Cria vários objetos em uma requisição, preservando a ordem."""
        descriptor = self._descriptor(resource)
        payload = {descriptor.list_key: [entity.to_api_json() for entity in entities]}
        data = self._http_client.fetch(
            "POST", descriptor.endpoint, payload=payload, query=query or None
        ).json()
        return [
            self._registry.decode(descriptor.type_name, item)
            for item in extract_list(data, descriptor.list_key)
        ]

    def post_single(self, resource: ResourceDescriptor | str, entity: Resource) -> Resource:
        descriptor = self._descriptor(resource)
        data = self._http_client.fetch(
            "POST", descriptor.endpoint, payload=entity.to_api_json()
        ).json()
        return self._registry.decode(descriptor.type_name, extract_object(data, descriptor.object_key))

    def delete_id(self, resource: ResourceDescriptor | str, id: str) -> Resource:
        descriptor = self._descriptor(resource)
        data = self._http_client.fetch("DELETE", f"{descriptor.endpoint}/{id}").json()
        return self._registry.decode(descriptor.type_name, extract_object(data, descriptor.object_key))

    def patch_id(self, resource: ResourceDescriptor | str, id: str, **fields: Any) -> Resource:
        """Atualiza campos (snake_case) de um objeto; None é omitido."""
        descriptor = self._descriptor(resource)
        payload = {to_camel(name): value for name, value in fields.items() if value is not None}
        data = self._http_client.fetch(
            "PATCH", f"{descriptor.endpoint}/{id}", payload=payload
        ).json()
        return self._registry.decode(descriptor.type_name, extract_object(data, descriptor.object_key))

    def _descriptor(self, resource: ResourceDescriptor | str) -> ResourceDescriptor:
        if isinstance(resource, ResourceDescriptor):
            return resource
        return self._registry.descriptor(resource)
