"""Rotas de webhook XRPL.Sale (binding FastAPI)."""

from api.routes.xrpl_sale.webhook import create_webhook_dependency, create_webhook_router

__all__ = ["create_webhook_dependency", "create_webhook_router"]
