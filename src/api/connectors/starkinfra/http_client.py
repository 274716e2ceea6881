"""Cliente HTTP autenticado para a API Stark Infra.

Estende HttpClient genérico com o protocolo de acesso da Stark Infra:
- URL base por ambiente (sandbox/production) + versão da API
- Assinatura ECDSA de cada requisição (Access-Id/Access-Time/Access-Signature)
- Classificação de status (400 InputErrors, 500 InternalServerError, demais UnknownError)
- Logging estruturado sem chaves, assinaturas ou corpos
"""

from __future__ import annotations

import json
import logging
import platform
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from app.infra.crypto import sign_message
from utils.errors import ParseError

from .api_errors import error_for_status
from .api_logging import log_api_error, log_success
from .http_base import HttpClient, HttpClientConfig
from .query import encode_query

if TYPE_CHECKING:
    import httpx

    from config.settings import Environment, StarkInfraSettings

    from .user import User

logger: logging.Logger = logging.getLogger(__name__)

SDK_VERSION = "0.1.0"
ALLOWED_METHODS = frozenset({"GET", "POST", "PATCH", "PUT", "DELETE"})


@dataclass(frozen=True, slots=True)
class ApiResponse:
    """Resposta 2xx da API com conteúdo bruto preservado."""

    status: int
    content: str

    def json(self) -> dict[str, Any]:
        """Decodifica o corpo como objeto JSON.

        Raises:
            ParseError: Se o corpo não for um objeto JSON
        """
        try:
            data = json.loads(self.content or "{}")
        except json.JSONDecodeError as exc:
            raise ParseError("invalid_json_response") from exc
        if not isinstance(data, dict):
            raise ParseError("response_not_object")
        return data


class StarkInfraHttpClient(HttpClient):
    """Cliente HTTP especializado para a API Stark Infra."""

    def __init__(
        self,
        settings: StarkInfraSettings,
        user: User,
        config: HttpClientConfig | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Inicializa cliente.

        Args:
            settings: Hosts, versão, idioma e timeouts
            user: Credencial (Project ou Organization) que assina as requisições
            config: Configuração HTTP base (derivada de settings se None)
            transport: Transport httpx opcional (testes)
        """
        super().__init__(
            config
            or HttpClientConfig(
                timeout_seconds=settings.request_timeout_seconds,
                max_retries=settings.max_retries,
            ),
            transport=transport,
        )
        self._settings = settings
        self.user = user
        self._signing_key = user.signing_key()

    @property
    def settings(self) -> StarkInfraSettings:
        return self._settings

    @property
    def environment(self) -> Environment:
        """Ambiente da credencial em uso."""
        return self.user.environment

    def fetch(
        self,
        method: str,
        path: str,
        payload: dict[str, Any] | None = None,
        query: dict[str, Any] | None = None,
        environment: Environment | None = None,
    ) -> ApiResponse:
        """Executa requisição assinada.

        Args:
            method: GET, POST, PATCH, PUT ou DELETE
            path: Caminho relativo à versão (ex: "event", "pix-request/log")
            payload: Corpo JSON (POST/PATCH/PUT)
            query: Filtros da query string (snake_case)
            environment: Sobrescreve o ambiente do usuário

        Returns:
            ApiResponse com status 2xx

        Raises:
            ValueError: Método HTTP desconhecido
            RequestError: Status não-2xx ou falha de transporte
        """
        method = method.upper()
        if method not in ALLOWED_METHODS:
            raise ValueError(f"unknown HTTP method {method}")

        url = f"{self._settings.base_url_for(environment or self.environment)}/{path}"
        body = "" if payload is None else json.dumps(payload)
        headers = self._build_headers(body)

        response = self.request(
            method,
            url,
            content=body.encode("utf-8") if body else None,
            params=encode_query(query),
            headers=headers,
        )
        return self._process_response(response, method, path)

    def _build_headers(self, body: str) -> dict[str, str]:
        access_time = str(int(time.time()))
        message = f"{self.user.access_id}:{access_time}:{body}"
        return {
            "Access-Id": self.user.access_id,
            "Access-Time": access_time,
            "Access-Signature": sign_message(message.encode("utf-8"), self._signing_key),
            "Content-Type": "application/json",
            "User-Agent": f"Python-{platform.python_version()}-SDK-infra-{SDK_VERSION}",
            "Accept-Language": self._settings.language,
        }

    def _process_response(
        self,
        response: httpx.Response,
        method: str,
        path: str,
    ) -> ApiResponse:
        content = response.text
        error = error_for_status(response.status_code, content)
        if error is not None:
            log_api_error(error, method, path)
            raise error

        log_success(method, path, response.status_code)
        return ApiResponse(status=response.status_code, content=content)


def create_starkinfra_http_client(
    user: User,
    settings: StarkInfraSettings | None = None,
    transport: httpx.BaseTransport | None = None,
) -> StarkInfraHttpClient:
    """Factory para criar cliente com settings do ambiente.

    Args:
        user: Credencial que assina as requisições
        settings: StarkInfraSettings opcional. Se None, carrega do ambiente.
        transport: Transport httpx opcional

    Returns:
        Cliente HTTP configurado.
    """
    # Import local para evitar dependência circular
    from config.settings import get_starkinfra_settings

    return StarkInfraHttpClient(
        settings=settings or get_starkinfra_settings(),
        user=user,
        transport=transport,
    )
