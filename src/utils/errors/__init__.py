"""Exceções compartilhadas do cliente Stark Infra."""

from .exceptions import (
    ConfigurationError,
    InputError,
    InputErrors,
    InternalServerError,
    InvalidSignatureError,
    ParseError,
    RequestError,
    StarkInfraError,
    TransportError,
    UnknownError,
)

__all__ = [
    "ConfigurationError",
    "InputError",
    "InputErrors",
    "InternalServerError",
    "InvalidSignatureError",
    "ParseError",
    "RequestError",
    "StarkInfraError",
    "TransportError",
    "UnknownError",
]
