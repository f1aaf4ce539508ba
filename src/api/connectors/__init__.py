"""Connectors: adapters de borda para APIs externas.

Estrutura:
- xrpl_sale/: API REST e webhooks da plataforma XRPL.Sale
"""

__all__: list[str] = []
