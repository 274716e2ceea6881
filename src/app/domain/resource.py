"""Base dos objetos de domínio."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Resource(BaseModel):
    """Objeto imutável decodificado de um payload da API.

    Aceita chaves camelCase (formato da API) e snake_case; campos
    desconhecidos são ignorados para tolerar evolução da API.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_api_json(self) -> dict[str, Any]:
        """Serializa para o formato de envio (camelCase, sem nulos)."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
