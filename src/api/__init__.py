"""API — camada de borda.

Responsabilidades:
- Falar HTTP com a Stark Infra (assinatura de requisições, erros de status)
- Receber webhooks e extrair a assinatura
- Codificar filtros no formato da API

Subpastas:
- connectors/: adapters HTTP por provedor

NÃO PODE conter: decodificação de domínio, paginação, cache de chaves.
"""
