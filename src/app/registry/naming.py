"""Derivação de endpoints e chaves JSON a partir do nome do tipo.

Exemplos:
    Event          -> endpoint "event",           lista "events"
    PixRequest     -> endpoint "pix-request",     lista "requests"
    PixRequestLog  -> endpoint "pix-request/log", lista "logs"
    PixDomain      -> endpoint "pix-domain",      lista "domains"
"""

from __future__ import annotations

import re

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def camel_to_kebab(name: str) -> str:
    return _CAMEL_BOUNDARY.sub("-", name).lower()


def endpoint(type_name: str) -> str:
    """Caminho REST da coleção."""
    kebab = camel_to_kebab(type_name)
    if kebab.endswith("-log"):
        return kebab[: -len("-log")] + "/log"
    return kebab


def last_name(type_name: str) -> str:
    """Chave JSON de um objeto único (`PixRequest` -> `request`)."""
    return camel_to_kebab(type_name).split("-")[-1]


def last_name_plural(type_name: str) -> str:
    """Chave JSON da lista de objetos (`PixRequest` -> `requests`)."""
    base = last_name(type_name)
    if base.endswith("s"):
        return base
    if base.endswith("y") and not base.endswith("ey"):
        return base[:-1] + "ies"
    return base + "s"
