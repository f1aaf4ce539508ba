"""Middleware de webhook: verifica assinatura e decodifica o evento.

Independente de framework. O host fornece o corpo bruto e um lookup de
headers, e recebe uma decisão (aceito + evento, ou rejeitado + motivo).
A tradução em resposta HTTP é responsabilidade do host.

Fluxo:
1. Header ausente (com verificação ativa) -> MissingSignatureError (401)
2. Assinatura não confere -> InvalidSignatureError (401)
3. Corpo não decodifica -> MalformedPayloadError (400)
4. Sucesso -> WebhookEvent anexado à decisão
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from utils.errors import (
    ConfigurationError,
    InvalidSignatureError,
    MissingSignatureError,
    WebhookError,
)

from .parser import parse_webhook_event

if TYPE_CHECKING:
    from app.protocols import SignatureVerifierProtocol, WebhookRequestProtocol

    from .models import WebhookEvent

logger = logging.getLogger(__name__)

SIGNATURE_HEADER = "x-xrpl-sale-signature"


@dataclass(frozen=True)
class WebhookDecision:
    """Decisão do middleware para o host.

    Attributes:
        accepted: True se o host deve prosseguir com o evento
        status_code: Status HTTP sugerido (200, 400, 401 ou 500)
        reason: Código machine-readable do resultado
        event: Evento decodificado (apenas se aceito)
        error: Erro que causou a rejeição (apenas se rejeitado)
    """

    accepted: bool
    status_code: int
    reason: str
    event: WebhookEvent | None = None
    error: Exception | None = None

    @classmethod
    def accept(cls, event: WebhookEvent) -> WebhookDecision:
        return cls(accepted=True, status_code=200, reason="accepted", event=event)

    @classmethod
    def reject(cls, error: WebhookError) -> WebhookDecision:
        return cls(
            accepted=False,
            status_code=error.status_code or 400,
            reason=error.reason,
            error=error,
        )


class WebhookDispatchMiddleware:
    """Compõe verificação de assinatura e parsing numa única decisão.

    Args:
        verifier: Verificador com o secret padrão já injetado
        verify_signature: Desliga a verificação quando False (ex: testes locais)
        signature_header: Nome do header de assinatura
    """

    def __init__(
        self,
        verifier: SignatureVerifierProtocol,
        *,
        verify_signature: bool = True,
        signature_header: str = SIGNATURE_HEADER,
    ) -> None:
        self._verifier = verifier
        self._verify_signature = verify_signature
        self._signature_header = signature_header

    def verify_and_parse(
        self,
        request: WebhookRequestProtocol,
        secret: str | None = None,
    ) -> WebhookEvent:
        """Verifica e decodifica o request, falhando rápido.

        Raises:
            MissingSignatureError: Header ausente
            InvalidSignatureError: Assinatura inválida
            MalformedPayloadError: Corpo inválido
            ConfigurationError: Nenhum secret disponível
        """
        raw_body = request.raw_body

        if self._verify_signature:
            signature = request.get_header(self._signature_header)
            if not signature:
                raise MissingSignatureError()
            if not self._verifier.verify(raw_body, signature, secret):
                raise InvalidSignatureError()

        return parse_webhook_event(raw_body)

    def handle(
        self,
        request: WebhookRequestProtocol,
        secret: str | None = None,
    ) -> WebhookDecision:
        """Produz a decisão para o host, sem lançar erros de webhook."""
        try:
            event = self.verify_and_parse(request, secret)
        except WebhookError as exc:
            logger.warning(
                "webhook_rejected",
                extra={
                    "reason": exc.reason,
                    "status_code": exc.status_code,
                    "payload_size": len(request.raw_body),
                },
            )
            return WebhookDecision.reject(exc)
        except ConfigurationError as exc:
            logger.error("webhook_secret_not_configured")
            return WebhookDecision(
                accepted=False,
                status_code=500,
                reason="webhook_secret_not_configured",
                error=exc,
            )

        logger.info(
            "webhook_accepted",
            extra={
                "event_id": event.id,
                "event_type": event.type,
                "event_recognized": event.is_recognized,
            },
        )
        return WebhookDecision.accept(event)
