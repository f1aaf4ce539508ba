"""API: camada de borda do SDK XRPL.Sale.

Responsabilidades:
- Chamar a API REST XRPL.Sale (cliente HTTP + serviços)
- Receber webhooks e validar assinaturas e payloads
- Expor rotas opcionais para hosts FastAPI

Subpastas:
- connectors/: cliente, serviços e webhook da XRPL.Sale
- routes/: binding HTTP do webhook

NÃO PODE conter: regras de negócio do host que consome os eventos.
"""
