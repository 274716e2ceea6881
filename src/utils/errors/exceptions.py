"""Taxonomia de erros do cliente Stark Infra.

Quatro famílias chegam ao chamador sem tradução:
- ConfigurationError: defeito de programação (registro/configuração).
- ParseError: conteúdo recebido não é JSON válido ou não tem o formato esperado.
- InvalidSignatureError: assinatura digital não confere, mesmo após refresh da chave.
- RequestError: resposta não-2xx ou falha de transporte em chamada de saída.
"""

from __future__ import annotations

from dataclasses import dataclass


class StarkInfraError(Exception):
    """Base para todos os erros do cliente."""


class ConfigurationError(StarkInfraError):
    """Registro ou configuração inconsistente (sempre um defeito)."""


class ParseError(StarkInfraError, ValueError):
    """Conteúdo não pôde ser interpretado como o objeto esperado."""


class InvalidSignatureError(StarkInfraError):
    """Assinatura digital malformada ou que não confere com a chave pública."""


class RequestError(StarkInfraError):
    """Falha em requisição de saída (status não-2xx ou transporte)."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: str = "",
        is_retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body
        self.is_retryable = is_retryable


class TransportError(RequestError):
    """Timeout ou falha de conexão antes de obter resposta."""

    def __init__(self, message: str = "http_transport_error") -> None:
        super().__init__(message, status_code=None, body="", is_retryable=True)


class InternalServerError(RequestError):
    """HTTP 500 retornado pela API."""

    def __init__(self, body: str = "") -> None:
        super().__init__(
            "Houston, we have a problem.",
            status_code=500,
            body=body,
            is_retryable=True,
        )


class UnknownError(RequestError):
    """Status inesperado (nem 200, nem 400, nem 500)."""


@dataclass(frozen=True, slots=True)
class InputError:
    """Erro individual de validação retornado pela API."""

    code: str
    message: str


class InputErrors(RequestError):
    """HTTP 400: a API rejeitou os parâmetros enviados."""

    def __init__(self, errors: list[InputError], body: str = "") -> None:
        summary = "; ".join(f"{error.code}: {error.message}" for error in errors)
        super().__init__(summary or "input_errors", status_code=400, body=body)
        self.errors = errors
