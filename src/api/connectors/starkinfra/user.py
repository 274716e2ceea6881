"""Credenciais de acesso à API (Project ou Organization).

Cada usuário carrega o ambiente, o identificador de acesso e a chave
privada usada para assinar as requisições.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from app.infra.crypto import load_private_key
from config.settings.base.core import Environment, parse_environment

if TYPE_CHECKING:
    from cryptography.hazmat.primitives.asymmetric import ec


@dataclass(frozen=True)
class User:
    """Base para credenciais; use Project ou Organization."""

    environment: Environment
    id: str
    private_key: str = field(repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "environment", parse_environment(self.environment))
        if not self.id:
            raise ValueError("id é obrigatório")
        # valida o PEM já na construção
        load_private_key(self.private_key)

    @property
    def access_id(self) -> str:
        raise NotImplementedError

    def signing_key(self) -> ec.EllipticCurvePrivateKey:
        """Chave privada carregada para assinatura."""
        return load_private_key(self.private_key)


@dataclass(frozen=True)
class Project(User):
    """Credencial de Project."""

    @property
    def access_id(self) -> str:
        return f"project/{self.id}"


@dataclass(frozen=True)
class Organization(User):
    """Credencial de Organization, opcionalmente restrita a um Workspace."""

    workspace_id: str | None = None

    @property
    def access_id(self) -> str:
        if self.workspace_id:
            return f"organization/{self.id}/workspace/{self.workspace_id}"
        return f"organization/{self.id}"

    def replace(self, workspace_id: str | None) -> Organization:
        """Nova credencial da mesma Organization para outro Workspace."""
        return Organization(
            environment=self.environment,
            id=self.id,
            private_key=self.private_key,
            workspace_id=workspace_id,
        )
