"""Connectors — adapters de borda para APIs externas.

Estrutura:
- starkinfra/: API Stark Infra (HTTP autenticado e webhooks)
"""

__all__: list[str] = []
