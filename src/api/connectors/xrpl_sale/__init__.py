"""Conector da API XRPL.Sale: cliente, serviços e webhooks."""

from .client import XrplSaleClient
from .http_client import XrplSaleHttpClient, is_transient_error, map_error_response
from .services import (
    AnalyticsService,
    AuthService,
    InvestmentsService,
    ProjectsService,
    WebhooksService,
)
from .webhook import (
    SIGNATURE_HEADER,
    WebhookDecision,
    WebhookDispatchMiddleware,
    WebhookEvent,
    WebhookEventType,
    parse_webhook_event,
)

__all__ = [
    "SIGNATURE_HEADER",
    "AnalyticsService",
    "AuthService",
    "InvestmentsService",
    "ProjectsService",
    "WebhookDecision",
    "WebhookDispatchMiddleware",
    "WebhookEvent",
    "WebhookEventType",
    "WebhooksService",
    "XrplSaleClient",
    "XrplSaleHttpClient",
    "is_transient_error",
    "map_error_response",
    "parse_webhook_event",
]
