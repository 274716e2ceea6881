"""Cache de chaves públicas da Stark Infra, por ambiente.

Vive pelo tempo do processo (ou do cliente que o possui): começa vazio,
é preenchido sob demanda e substituído por inteiro a cada refresh.
Thread-safe para uso concorrente.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from cryptography.exceptions import UnsupportedAlgorithm

from app.infra.crypto import load_public_key
from config.settings.base.core import Environment, parse_environment
from utils.errors import ParseError

if TYPE_CHECKING:
    from cryptography.hazmat.primitives.asymmetric import ec

    from app.protocols.public_key import PublicKeyFetcherProtocol

logger = logging.getLogger(__name__)

_COMPONENT = "public_key_cache"


class PublicKeyCache:
    """Cache lazy da chave pública vigente em cada ambiente.

    A busca de rede acontece fora do lock; leitores nunca veem uma
    entrada parcial porque cada entrada é um objeto de chave completo.
    Em corrida de `get`, a primeira chave gravada prevalece; em `refresh`,
    a última.
    """

    def __init__(self, fetcher: PublicKeyFetcherProtocol) -> None:
        self._fetcher = fetcher
        self._keys: dict[Environment, ec.EllipticCurvePublicKey] = {}
        self._lock = threading.Lock()

    def get(self, environment: Environment | str) -> ec.EllipticCurvePublicKey:
        """Retorna a chave em cache, buscando na primeira chamada do ambiente."""
        env = parse_environment(environment)
        with self._lock:
            cached = self._keys.get(env)
        if cached is not None:
            return cached

        logger.info(
            "public_key_cache_miss",
            extra={"component": _COMPONENT, "action": "get", "environment": env.value},
        )
        key = self._load(env)
        with self._lock:
            return self._keys.setdefault(env, key)

    def refresh(self, environment: Environment | str) -> ec.EllipticCurvePublicKey:
        """Busca novamente e substitui a entrada do ambiente."""
        env = parse_environment(environment)
        logger.info(
            "public_key_cache_refresh",
            extra={"component": _COMPONENT, "action": "refresh", "environment": env.value},
        )
        key = self._load(env)
        with self._lock:
            self._keys[env] = key
        return key

    def clear(self) -> None:
        """Esvazia o cache (todas as entradas)."""
        with self._lock:
            self._keys.clear()

    def __contains__(self, environment: object) -> bool:
        with self._lock:
            return environment in self._keys

    def _load(self, environment: Environment) -> ec.EllipticCurvePublicKey:
        pem = self._fetcher(environment)
        try:
            return load_public_key(pem)
        except (ValueError, UnsupportedAlgorithm) as exc:
            raise ParseError("public key content is not a secp256k1 PEM") from exc
