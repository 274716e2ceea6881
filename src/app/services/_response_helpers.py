"""Helpers para extrair objetos de respostas da API."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from utils.errors import ParseError


def extract_object(data: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    """Retorna `data[key]` garantindo que é objeto JSON.

    Raises:
        ParseError: Chave ausente ou valor que não é objeto
    """
    value = data.get(key)
    if not isinstance(value, Mapping):
        raise ParseError(f"missing object key: {key}")
    return value


def extract_list(data: Mapping[str, Any], key: str) -> list[Any]:
    """Retorna `data[key]` garantindo que é lista JSON.

    Raises:
        ParseError: Chave ausente ou valor que não é lista
    """
    value = data.get(key)
    if not isinstance(value, list):
        raise ParseError(f"missing list key: {key}")
    return value
