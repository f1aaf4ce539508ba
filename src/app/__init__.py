"""App: infraestrutura e contratos compartilhados pelo SDK.

Subpastas:
- infra/: implementações concretas (HMAC de webhook, retry com backoff)
- protocols/: contratos/interfaces (cliente HTTP, request de webhook, verificador)
- observability/: correlation_id para logs estruturados

Padrão: app fornece primitivas; api adapta; config configura; utils apoia.
"""
