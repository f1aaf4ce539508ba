"""Hierarquia de exceções do SDK XRPL.Sale.

Toda exceção pública deriva de XrplSaleError, que carrega status HTTP
(quando houver) e detalhes do corpo de resposta, sem dados sensíveis.
"""

from __future__ import annotations

from typing import Any


class XrplSaleError(Exception):
    """Erro base do SDK.

    Attributes:
        message: Mensagem legível (sem PII, sem segredos)
        status_code: Status HTTP associado, quando aplicável
        details: Corpo/detalhes retornados pela API, quando houver
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details


class ConfigurationError(XrplSaleError):
    """Configuração ausente ou inválida (ex: webhook secret, api_key).

    Não é retentável: indica erro de quem configurou o SDK.
    """


class NetworkError(XrplSaleError):
    """Falha de transporte: nenhuma resposta recebida."""


class ValidationError(XrplSaleError):
    """Requisição rejeitada pela API (400)."""

    def __init__(self, message: str, details: Any = None) -> None:
        super().__init__(message, 400, details)


class AuthenticationError(XrplSaleError):
    """Credencial ausente ou inválida (401)."""

    def __init__(self, message: str = "Authentication failed", details: Any = None) -> None:
        super().__init__(message, 401, details)


class AuthorizationError(XrplSaleError):
    """Permissões insuficientes (403)."""

    def __init__(
        self, message: str = "Insufficient permissions", details: Any = None
    ) -> None:
        super().__init__(message, 403, details)


class NotFoundError(XrplSaleError):
    """Recurso inexistente (404)."""

    def __init__(self, resource: str, details: Any = None) -> None:
        super().__init__(f"{resource} not found", 404, details)
        self.resource = resource


class RateLimitError(XrplSaleError):
    """Limite de requisições excedido (429)."""

    def __init__(self, message: str = "Rate limit exceeded", details: Any = None) -> None:
        super().__init__(message, 429, details)


class WebhookError(XrplSaleError):
    """Erro base de webhook inbound.

    `reason` é um código curto e estável (ex: "invalid_signature"),
    adequado para resposta machine-readable.
    """

    default_reason = "webhook_error"
    default_status = 400

    def __init__(self, reason: str | None = None) -> None:
        self.reason = reason or self.default_reason
        super().__init__(self.reason, self.default_status)


class MissingSignatureError(WebhookError):
    """Header de assinatura ausente."""

    default_reason = "missing_signature"
    default_status = 401


class InvalidSignatureError(WebhookError):
    """Assinatura não confere com o corpo recebido."""

    default_reason = "invalid_signature"
    default_status = 401


class MalformedPayloadError(WebhookError):
    """Corpo do webhook não decodifica para um evento válido."""

    default_reason = "malformed_payload"
    default_status = 400
