"""União rotulada de payloads: bruto (da API) ou já decodificado."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, TypeAlias

from app.domain.resource import Resource


@dataclass(frozen=True, slots=True)
class Raw:
    """Payload JSON ainda não decodificado."""

    payload: Mapping[str, Any]


@dataclass(frozen=True, slots=True)
class Decoded:
    """Objeto de domínio já decodificado."""

    value: Resource


Payload: TypeAlias = Raw | Decoded


def lift(value: Mapping[str, Any] | Resource | Payload) -> Payload:
    """Rotula um valor vindo de fora (mapping ou objeto de domínio).

    Raises:
        TypeError: Se o valor não for mapping nem Resource
    """
    if isinstance(value, (Raw, Decoded)):
        return value
    if isinstance(value, Resource):
        return Decoded(value)
    if isinstance(value, Mapping):
        return Raw(value)
    raise TypeError(f"cannot decode value of type {type(value).__name__}")
