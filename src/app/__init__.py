"""App — núcleo do cliente: domínio, decodificação, paginação e autenticidade.

Subpastas:
- bootstrap/: composition root (StarkInfraClient e factories)
- domain/: modelos imutáveis decodificados da API
- registry/: registro de tipos e resolução polimórfica
- services/: paginação, verificação de assinatura e REST por id
- resources/: fachadas finas por recurso
- infra/: criptografia e cache de chaves públicas
- protocols/: contratos/interfaces
"""
