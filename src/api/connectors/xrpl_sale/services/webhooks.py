"""Serviço de webhooks: gestão de endpoints e verificação de eventos.

A verificação delega ao SignatureVerifier/WebhookDispatchMiddleware;
os demais métodos são chamadas REST em /webhooks.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.connectors.xrpl_sale.webhook import WebhookDispatchMiddleware, parse_webhook_event

if TYPE_CHECKING:
    from api.connectors.xrpl_sale.webhook import WebhookEvent
    from app.infra.crypto import SignatureVerifier
    from app.protocols import XrplSaleHttpClientProtocol


class WebhooksService:
    """Endpoints /webhooks e helpers de verificação.

    Args:
        http: Cliente HTTP da API
        verifier: Verificador com o webhook secret padrão injetado
        verify_signature: Padrão do middleware criado por `middleware()`
    """

    def __init__(
        self,
        http: XrplSaleHttpClientProtocol,
        verifier: SignatureVerifier,
        *,
        verify_signature: bool = True,
    ) -> None:
        self._http = http
        self._verifier = verifier
        self._verify_signature = verify_signature

    def verify_signature(
        self,
        payload: bytes | str,
        signature: str,
        secret: str | None = None,
    ) -> bool:
        return self._verifier.verify(payload, signature, secret)

    def parse_webhook(self, payload: bytes | str) -> WebhookEvent:
        return parse_webhook_event(payload)

    def middleware(self, *, verify_signature: bool | None = None) -> WebhookDispatchMiddleware:
        """Cria o middleware de dispatch com o verificador deste serviço."""
        enabled = self._verify_signature if verify_signature is None else verify_signature
        return WebhookDispatchMiddleware(self._verifier, verify_signature=enabled)

    async def register(
        self,
        *,
        url: str,
        events: list[str],
        secret: str | None = None,
        active: bool | None = None,
    ) -> dict[str, Any]:
        payload: dict[str, Any] = {"url": url, "events": events}
        if secret is not None:
            payload["secret"] = secret
        if active is not None:
            payload["active"] = active
        return await self._http.post("/webhooks", json=payload)

    async def list(self) -> list[dict[str, Any]]:
        return await self._http.get("/webhooks")

    async def update(self, webhook_id: str, updates: dict[str, Any]) -> dict[str, Any]:
        return await self._http.patch(f"/webhooks/{webhook_id}", json=updates)

    async def delete(self, webhook_id: str) -> dict[str, Any]:
        return await self._http.delete(f"/webhooks/{webhook_id}")

    async def test(self, webhook_id: str) -> dict[str, Any]:
        """Dispara uma entrega de teste para o endpoint."""
        return await self._http.post(f"/webhooks/{webhook_id}/test")

    async def get_deliveries(
        self,
        webhook_id: str,
        *,
        page: int | None = None,
        limit: int | None = None,
        status: str | None = None,
    ) -> dict[str, Any]:
        params = {"page": page, "limit": limit, "status": status}
        return await self._http.get(f"/webhooks/{webhook_id}/deliveries", params=params)
