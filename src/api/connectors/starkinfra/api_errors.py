"""Classificação de respostas de erro da API Stark Infra."""

from __future__ import annotations

import json

from utils.errors import (
    InputError,
    InputErrors,
    InternalServerError,
    RequestError,
    UnknownError,
)


def parse_input_errors(content: str) -> list[InputError]:
    """Extrai a lista `errors` de um corpo HTTP 400.

    Corpos fora do formato esperado viram um único erro genérico.
    """
    try:
        data = json.loads(content or "{}")
    except json.JSONDecodeError:
        return [InputError(code="unknownError", message=content)]

    raw_errors = data.get("errors") if isinstance(data, dict) else None
    if not isinstance(raw_errors, list):
        return [InputError(code="unknownError", message=content)]

    return [
        InputError(
            code=str(error.get("code", "unknownError")),
            message=str(error.get("message", "")),
        )
        for error in raw_errors
        if isinstance(error, dict)
    ]


def error_for_status(status_code: int, content: str) -> RequestError | None:
    """Retorna o erro correspondente ao status, ou None se 2xx.

    Mapeamento:
        2xx -> None
        400 -> InputErrors
        500 -> InternalServerError
        outro -> UnknownError
    """
    if 200 <= status_code < 300:
        return None
    if status_code == 400:
        return InputErrors(parse_input_errors(content), body=content)
    if status_code == 500:
        return InternalServerError(body=content)
    return UnknownError(
        f"unexpected_status_{status_code}",
        status_code=status_code,
        body=content,
        is_retryable=status_code == 429 or status_code >= 500,
    )
