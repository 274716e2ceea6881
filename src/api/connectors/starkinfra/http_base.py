"""Cliente HTTP base síncrono para o conector Stark Infra."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field

import httpx

from utils.errors import TransportError

logger = logging.getLogger(__name__)

# Métodos seguros para repetir sem risco de efeito duplicado
RETRYABLE_METHODS = frozenset({"GET"})


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 15.0
    max_retries: int = 3
    backoff_base_seconds: float = 1.0
    backoff_max_seconds: float = 30.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True


def is_retryable_status(status_code: int) -> bool:
    """429 e 5xx são transitórios."""
    return status_code == 429 or status_code >= 500


class HttpClient:
    """Cliente HTTP com retry/backoff apenas para métodos idempotentes.

    Um único httpx.Client é mantido por instância; pode ser compartilhado
    entre threads.
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._client = httpx.Client(
            verify=self._config.verify_ssl,
            timeout=self._config.timeout_seconds,
            transport=transport,
        )

    def request(
        self,
        method: str,
        url: str,
        *,
        content: bytes | None = None,
        params: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Executa requisição e devolve a resposta (qualquer status).

        Raises:
            TransportError: Timeout/conexão após esgotar as tentativas
        """
        merged_headers = {**self._config.default_headers, **(headers or {})}
        max_retries = self._config.max_retries if method in RETRYABLE_METHODS else 0

        for attempt in range(max_retries + 1):
            try:
                response = self._client.request(
                    method,
                    url,
                    content=content,
                    params=params,
                    headers=merged_headers,
                )
            except (httpx.TimeoutException, httpx.TransportError) as exc:
                if attempt >= max_retries:
                    raise TransportError("http_connection_error") from exc
                self._backoff_sleep(attempt)
                continue

            if is_retryable_status(response.status_code) and attempt < max_retries:
                logger.info(
                    "http_retryable_status",
                    extra={"status_code": response.status_code, "attempt": attempt},
                )
                self._backoff_sleep(attempt)
                continue
            return response

        raise TransportError("http_retry_exhausted")

    def close(self) -> None:
        """Fecha conexões abertas."""
        self._client.close()

    def _backoff_sleep(self, attempt: int) -> None:
        backoff = min(
            (2**attempt) * self._config.backoff_base_seconds,
            self._config.backoff_max_seconds,
        )
        logger.info("http_backoff", extra={"backoff_seconds": backoff})
        time.sleep(backoff)
