"""Agregador de rotas do host que embute o SDK.

Uso:
    from api.routes import create_api_router

    client = XrplSaleClient(settings)
    app = FastAPI()
    app.include_router(create_api_router(client.webhooks.middleware(), handle_event))
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fastapi import APIRouter

from api.routes.xrpl_sale import create_webhook_router

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from api.connectors.xrpl_sale.webhook import WebhookDispatchMiddleware, WebhookEvent

WEBHOOK_PREFIX = "/webhook/xrpl-sale"


def create_api_router(
    middleware: WebhookDispatchMiddleware,
    handler: Callable[[WebhookEvent], Awaitable[Any]],
    *,
    prefix: str = WEBHOOK_PREFIX,
) -> APIRouter:
    """Cria router principal com o endpoint de webhook registrado."""
    api_router = APIRouter()
    api_router.include_router(
        create_webhook_router(middleware, handler),
        prefix=prefix,
        tags=["xrpl-sale"],
    )
    return api_router
