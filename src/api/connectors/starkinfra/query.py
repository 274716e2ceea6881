"""Codificação de parâmetros de query para a API.

- None é descartado
- chaves snake_case viram camelCase
- listas viram valores separados por vírgula
- bool vira "true"/"false"
- date/datetime viram data ISO (YYYY-MM-DD)
"""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from typing import Any


def snake_to_camel(name: str) -> str:
    """Converte `is_delivered` em `isDelivered`."""
    head, *tail = name.split("_")
    return head + "".join(word.capitalize() for word in tail)


def _encode_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (list, tuple, set, frozenset)):
        return ",".join(_encode_value(item) for item in value)
    return str(value)


def encode_query(query: dict[str, Any] | None) -> dict[str, str]:
    """Converte filtros Python para o formato de query string da API."""
    if not query:
        return {}
    return {
        snake_to_camel(key): _encode_value(value)
        for key, value in query.items()
        if value is not None
    }
