"""Rotas HTTP opcionais para hosts FastAPI.

O core do SDK é independente de framework; este pacote traduz as
decisões do middleware de webhook em respostas HTTP.
"""

from __future__ import annotations

from api.routes.router import WEBHOOK_PREFIX, create_api_router

__all__ = ["WEBHOOK_PREFIX", "create_api_router"]
