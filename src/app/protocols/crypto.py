"""Protocolo de verificação de assinatura consumido pelo middleware."""

from __future__ import annotations

from typing import Protocol


class SignatureVerifierProtocol(Protocol):
    """Interface mínima esperada para verificação de webhooks."""

    def verify(
        self,
        payload: bytes | str,
        signature: str,
        secret: str | None = None,
    ) -> bool: ...
