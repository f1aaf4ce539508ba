"""Binding FastAPI para o middleware de webhook XRPL.Sale.

Endpoints:
- POST /: recebe eventos, valida assinatura e entrega ao handler

O middleware decide; esta camada apenas traduz a decisão em HTTP:
- rejeição -> status da decisão + {"error": reason}
- aceite -> evento anexado em request.state.webhook_event
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from fastapi import APIRouter, Depends, HTTPException, Request

from api.connectors.xrpl_sale.webhook import WebhookEvent  # noqa: TC001 - resolvido em runtime pelo FastAPI
from app.observability import CORRELATION_HEADER, correlation_scope
from app.protocols import RawWebhookRequest

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from api.connectors.xrpl_sale.webhook import WebhookDispatchMiddleware

logger = logging.getLogger(__name__)


def create_webhook_dependency(
    middleware: WebhookDispatchMiddleware,
    *,
    secret: str | None = None,
) -> Callable[[Request], Awaitable[WebhookEvent]]:
    """Cria dependência FastAPI que exige um webhook válido.

    Args:
        middleware: Middleware com verificador configurado
        secret: Secret opcional que sobrescreve o padrão do verificador

    Returns:
        Dependência assíncrona que retorna o WebhookEvent
    """

    async def _require_webhook_event(request: Request) -> WebhookEvent:
        # Corpo bruto: a assinatura cobre os bytes exatos recebidos
        raw_body = await request.body()
        inbound = RawWebhookRequest(raw_body=raw_body, headers=dict(request.headers))

        with correlation_scope(request.headers.get(CORRELATION_HEADER)) as correlation_id:
            decision = middleware.handle(inbound, secret)

        request.state.correlation_id = correlation_id
        if not decision.accepted:
            raise HTTPException(
                status_code=decision.status_code,
                detail={"error": decision.reason},
            )

        request.state.webhook_event = decision.event
        return decision.event  # type: ignore[return-value]

    return _require_webhook_event


def create_webhook_router(
    middleware: WebhookDispatchMiddleware,
    handler: Callable[[WebhookEvent], Awaitable[Any]],
    *,
    secret: str | None = None,
) -> APIRouter:
    """Cria router com POST / que entrega eventos válidos ao handler.

    Args:
        middleware: Middleware de verificação e parsing
        handler: Função de negócio chamada com o evento aceito
        secret: Secret opcional que sobrescreve o padrão

    Returns:
        APIRouter pronto para `include_router`.
    """
    router = APIRouter()
    require_event = create_webhook_dependency(middleware, secret=secret)

    @router.post("/")
    async def receive_webhook(
        request: Request,
        event: WebhookEvent = Depends(require_event),  # noqa: B008
    ) -> dict[str, Any]:
        await handler(event)
        logger.info(
            "webhook_handled",
            extra={
                "event_id": event.id,
                "event_type": event.type,
                "correlation_id": request.state.correlation_id,
            },
        )
        return {
            "status": "received",
            "event_id": event.id,
            "correlation_id": request.state.correlation_id,
        }

    return router
