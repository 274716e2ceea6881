"""Conector Stark Infra - adapter de borda para a API.

Este módulo é o único ponto de IO de rede do cliente.
Responsabilidades:
- HTTP client autenticado (assinatura ECDSA por requisição)
- Credenciais (Project / Organization)
- Codificação de query e classificação de erros da API
- Recebimento de webhooks (header Digital-Signature)
"""

from .api_errors import error_for_status, parse_input_errors
from .http_base import HttpClient, HttpClientConfig
from .http_client import (
    SDK_VERSION,
    ApiResponse,
    StarkInfraHttpClient,
    create_starkinfra_http_client,
)
from .query import encode_query, snake_to_camel
from .user import Organization, Project, User

__all__ = [
    "SDK_VERSION",
    "ApiResponse",
    "HttpClient",
    "HttpClientConfig",
    "Organization",
    "Project",
    "StarkInfraHttpClient",
    "User",
    "create_starkinfra_http_client",
    "encode_query",
    "error_for_status",
    "parse_input_errors",
    "snake_to_camel",
]
