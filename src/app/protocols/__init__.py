"""Protocolos e contratos do core da aplicação."""

from .crypto import SignatureVerifierProtocol
from .http_client import XrplSaleHttpClientProtocol
from .webhook_request import RawWebhookRequest, WebhookRequestProtocol

__all__ = [
    "RawWebhookRequest",
    "SignatureVerifierProtocol",
    "WebhookRequestProtocol",
    "XrplSaleHttpClientProtocol",
]
