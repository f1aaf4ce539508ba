"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    InvalidSignatureError,
    MalformedPayloadError,
    MissingSignatureError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    ValidationError,
    WebhookError,
    XrplSaleError,
)

__all__ = [
    "AuthenticationError",
    "AuthorizationError",
    "ConfigurationError",
    "InvalidSignatureError",
    "MalformedPayloadError",
    "MissingSignatureError",
    "NetworkError",
    "NotFoundError",
    "RateLimitError",
    "ValidationError",
    "WebhookError",
    "XrplSaleError",
]
