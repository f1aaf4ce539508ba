"""Contrato do request inbound consumido pelo middleware de webhook.

Qualquer framework (FastAPI, Flask, Django, ...) adapta seu request
para este formato: corpo bruto + lookup de header case-insensitive.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Mapping


class WebhookRequestProtocol(Protocol):
    """Request inbound mínimo."""

    @property
    def raw_body(self) -> bytes: ...

    def get_header(self, name: str) -> str | None: ...


@dataclass(frozen=True)
class RawWebhookRequest:
    """Implementação simples a partir de bytes e um mapping de headers.

    Os nomes de header são normalizados para minúsculas na construção.
    """

    raw_body: bytes
    headers: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        normalized = {str(k).lower(): v for k, v in self.headers.items()}
        object.__setattr__(self, "headers", normalized)

    def get_header(self, name: str) -> str | None:
        return self.headers.get(name.lower())
