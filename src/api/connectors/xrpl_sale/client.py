"""Cliente principal do SDK XRPL.Sale.

Uso:
    settings = XrplSaleSettings(api_key="sk_live_...", environment="testnet")
    async with XrplSaleClient(settings) as client:
        projects = await client.projects.get_active(limit=10)
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from app.infra.crypto import SignatureVerifier
from config.settings import XrplSaleSettings, get_xrpl_sale_settings

from .http_client import XrplSaleHttpClient, is_transient_error
from .services import (
    AnalyticsService,
    AuthService,
    InvestmentsService,
    ProjectsService,
    WebhooksService,
)

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    import httpx

logger = logging.getLogger(__name__)


class XrplSaleClient:
    """Ponto de entrada do SDK: agrega os serviços sobre um único cliente HTTP.

    Args:
        settings: Configuração explícita (api_key, ambiente, webhook secret, retry)
        http_client: httpx.AsyncClient injetado (transporte)
        sleep: Função de espera usada no backoff de retry

    Raises:
        ConfigurationError: api_key ausente ou ambiente desconhecido
    """

    def __init__(
        self,
        settings: XrplSaleSettings,
        *,
        http_client: httpx.AsyncClient | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self.settings = settings
        retry_policy = settings.retry_policy() if settings.max_retries > 0 else None
        self.http = XrplSaleHttpClient(
            settings,
            http_client=http_client,
            retry_policy=retry_policy,
            should_retry=is_transient_error,
            sleep=sleep,
        )
        self.verifier = SignatureVerifier(settings.webhook_secret or None)

        self.projects = ProjectsService(self.http)
        self.investments = InvestmentsService(self.http)
        self.analytics = AnalyticsService(self.http)
        self.auth = AuthService(self.http)
        self.webhooks = WebhooksService(
            self.http,
            self.verifier,
            verify_signature=settings.verify_webhook_signature,
        )

        logger.debug(
            "xrpl_sale_client_created",
            extra={
                "environment": settings.environment,
                "max_retries": settings.max_retries,
            },
        )

    @classmethod
    def from_env(cls, **kwargs: Any) -> XrplSaleClient:
        """Cria o cliente a partir das variáveis XRPL_SALE_*."""
        return cls(get_xrpl_sale_settings(), **kwargs)

    async def __aenter__(self) -> XrplSaleClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.http.aclose()

    async def ping(self) -> dict[str, Any]:
        """Testa a conexão com a API."""
        return await self.http.get("/ping")

    async def get_status(self) -> dict[str, Any]:
        """Status, versão e uptime da API."""
        return await self.http.get("/status")
