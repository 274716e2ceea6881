"""Registro de tipos: nome do recurso -> função de decodificação."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from app.domain.resource import Resource
from utils.errors import ConfigurationError

from . import naming
from .payload import Decoded, Payload, Raw, lift

logger = logging.getLogger(__name__)

DecodeFn = Callable[[Mapping[str, Any]], Resource]


@dataclass(frozen=True, slots=True)
class ResourceDescriptor:
    """Tipo de recurso: nome e decodificador."""

    type_name: str
    decode: DecodeFn

    @property
    def endpoint(self) -> str:
        return naming.endpoint(self.type_name)

    @property
    def list_key(self) -> str:
        return naming.last_name_plural(self.type_name)

    @property
    def object_key(self) -> str:
        return naming.last_name(self.type_name)


class TypeRegistry:
    """Mapeia nomes de tipo para ResourceDescriptor.

    Registros acontecem na inicialização; depois disso o registro é
    somente leitura e pode ser compartilhado entre threads.
    """

    def __init__(self) -> None:
        self._descriptors: dict[str, ResourceDescriptor] = {}

    def register(self, type_name: str, decode: DecodeFn) -> ResourceDescriptor:
        """Associa um decodificador ao nome do tipo.

        Raises:
            ConfigurationError: Se o nome já estiver registrado
        """
        if type_name in self._descriptors:
            raise ConfigurationError(f"resource type already registered: {type_name}")
        descriptor = ResourceDescriptor(type_name=type_name, decode=decode)
        self._descriptors[type_name] = descriptor
        logger.debug("resource_type_registered", extra={"type_name": type_name})
        return descriptor

    def descriptor(self, type_name: str) -> ResourceDescriptor:
        """Retorna o descritor registrado.

        Raises:
            ConfigurationError: Se o tipo não estiver registrado
        """
        try:
            return self._descriptors[type_name]
        except KeyError:
            raise ConfigurationError(f"unregistered resource type: {type_name}") from None

    def __contains__(self, type_name: object) -> bool:
        return type_name in self._descriptors

    def type_names(self) -> list[str]:
        return sorted(self._descriptors)

    def decode(self, type_name: str, raw_payload: Mapping[str, Any]) -> Resource:
        """Decodifica um payload bruto.

        Raises:
            ConfigurationError: Tipo não registrado
            ParseError: Payload sem campos obrigatórios
        """
        return self.descriptor(type_name).decode(raw_payload)

    def decode_many(
        self,
        type_name: str,
        payloads: Iterable[Payload | Mapping[str, Any] | Resource],
    ) -> list[Resource]:
        """Decodifica em ordem; objetos já decodificados passam inalterados.

        Itens sem rótulo (mapping ou Resource) são rotulados com `lift`.

        Raises:
            ConfigurationError: Tipo não registrado
            ParseError: Payload sem campos obrigatórios
            TypeError: Item que não é mapping nem Resource
        """
        descriptor = self.descriptor(type_name)
        decoded: list[Resource] = []
        for item in map(lift, payloads):
            match item:
                case Decoded(value=value):
                    decoded.append(value)
                case Raw(payload=payload):
                    decoded.append(descriptor.decode(payload))
        return decoded
