"""Verificação de autenticidade de webhooks.

A assinatura é calculada sobre os bytes exatos recebidos; nunca sobre o
JSON re-serializado. Se a chave em cache não confere, a chave é buscada
novamente uma única vez (a Stark Infra pode ter rotacionado a chave) e a
verificação é repetida. Falhando de novo, o conteúdo é tratado como
forjado.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from app.infra.crypto import decode_signature, verify_signature
from app.registry import ResourceDescriptor
from config.settings.base.core import Environment, parse_environment
from utils.errors import InvalidSignatureError, ParseError

from ._response_helpers import extract_object

if TYPE_CHECKING:
    from app.domain.resource import Resource
    from app.protocols.public_key import PublicKeyProviderProtocol
    from app.registry import TypeRegistry

logger = logging.getLogger(__name__)

_COMPONENT = "signature_verifier"


def _as_bytes(content: bytes | str) -> bytes:
    return content.encode("utf-8") if isinstance(content, str) else content


class SignatureVerifier:
    """Valida assinaturas ECDSA da Stark Infra e decodifica o conteúdo."""

    def __init__(self, keys: PublicKeyProviderProtocol, registry: TypeRegistry) -> None:
        self._keys = keys
        self._registry = registry

    def verify(
        self,
        content: bytes | str,
        signature: str,
        environment: Environment | str,
    ) -> bool:
        """Retorna True se a assinatura confere (com até um refresh de chave)."""
        try:
            self.assert_valid(content, signature, environment)
        except InvalidSignatureError:
            return False
        return True

    def assert_valid(
        self,
        content: bytes | str,
        signature: str,
        environment: Environment | str,
    ) -> None:
        """Valida a assinatura ou levanta InvalidSignatureError.

        Raises:
            InvalidSignatureError: Assinatura malformada, ou que não confere
                nem com a chave em cache nem com a chave renovada
        """
        signature_der = decode_signature(signature)
        raw = _as_bytes(content)
        env = parse_environment(environment)

        if verify_signature(raw, signature_der, self._keys.get(env)):
            return

        logger.info(
            "signature_mismatch_refreshing_key",
            extra={"component": _COMPONENT, "environment": env.value},
        )
        if verify_signature(raw, signature_der, self._keys.refresh(env)):
            return

        logger.warning(
            "signature_invalid",
            extra={"component": _COMPONENT, "environment": env.value},
        )
        raise InvalidSignatureError(
            "The provided signature and content do not match the Stark Infra public key"
        )

    def parse_and_verify(
        self,
        content: bytes | str,
        signature: str,
        resource: ResourceDescriptor | str,
        environment: Environment | str,
        key: str | None = None,
    ) -> Resource:
        """Interpreta, autentica e decodifica o conteúdo recebido.

        Args:
            content: Corpo bruto exatamente como recebido
            signature: Header Digital-Signature (base64)
            resource: Descritor ou nome do tipo a decodificar
            environment: Ambiente cuja chave assina o conteúdo
            key: Objeto de primeiro nível a extrair (ex: "event"); None usa o
                documento inteiro

        Raises:
            ParseError: Conteúdo não é JSON, não é objeto ou não tem `key`
            InvalidSignatureError: Assinatura inválida
        """
        raw = _as_bytes(content)
        payload = self._extract(self._load_json(raw), key)
        self.assert_valid(raw, signature, environment)

        type_name = resource.type_name if isinstance(resource, ResourceDescriptor) else resource
        return self._registry.decode(type_name, payload)

    @staticmethod
    def _load_json(raw: bytes) -> Mapping[str, Any]:
        try:
            data = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise ParseError("invalid_json") from exc
        if not isinstance(data, dict):
            raise ParseError("payload_not_object")
        return data

    @staticmethod
    def _extract(data: Mapping[str, Any], key: str | None) -> Mapping[str, Any]:
        if key is None:
            return data
        return extract_object(data, key)
