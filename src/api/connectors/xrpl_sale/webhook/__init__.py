"""Webhook XRPL.Sale: assinatura, parsing seguro e decisão de dispatch."""

from utils.errors import (
    InvalidSignatureError,
    MalformedPayloadError,
    MissingSignatureError,
    WebhookError,
)

from .middleware import SIGNATURE_HEADER, WebhookDecision, WebhookDispatchMiddleware
from .models import WebhookEvent, WebhookEventType
from .parser import parse_webhook_event

__all__ = [
    "SIGNATURE_HEADER",
    "InvalidSignatureError",
    "MalformedPayloadError",
    "MissingSignatureError",
    "WebhookDecision",
    "WebhookDispatchMiddleware",
    "WebhookError",
    "WebhookEvent",
    "WebhookEventType",
    "parse_webhook_event",
]
