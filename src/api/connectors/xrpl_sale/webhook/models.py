"""Modelos de evento de webhook XRPL.Sale."""

from __future__ import annotations

from datetime import datetime  # noqa: TC003 - usado em runtime pelo schema do Pydantic
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class WebhookEventType(str, Enum):
    """Tipos de evento reconhecidos pela plataforma."""

    PROJECT_CREATED = "project.created"
    PROJECT_UPDATED = "project.updated"
    PROJECT_LAUNCHED = "project.launched"
    PROJECT_COMPLETED = "project.completed"
    INVESTMENT_CREATED = "investment.created"
    INVESTMENT_CONFIRMED = "investment.confirmed"
    INVESTMENT_FAILED = "investment.failed"
    TIER_COMPLETED = "tier.completed"
    TOKENS_DISTRIBUTED = "tokens.distributed"


_KNOWN_TYPES = frozenset(item.value for item in WebhookEventType)


class WebhookEvent(BaseModel):
    """Evento inbound já verificado e decodificado.

    `type` preserva o valor bruto recebido; tipos desconhecidos não são
    rejeitados, apenas sinalizados via `is_recognized`. `data` é opaco:
    o consumidor decodifica conforme o tipo.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: str = Field(..., description="Identificador opaco do evento.")
    type: str = Field(..., description="Tipo do evento (ex: investment.confirmed).")
    data: Any = Field(..., description="Payload específico do tipo.")
    timestamp: datetime = Field(..., description="Instante do evento.")
    version: str = Field(..., description="Versão do schema do evento.")

    @property
    def is_recognized(self) -> bool:
        return self.type in _KNOWN_TYPES

    @property
    def event_type(self) -> WebhookEventType | None:
        """Tipo como enum, ou None se não reconhecido."""
        if not self.is_recognized:
            return None
        return WebhookEventType(self.type)


__all__ = ["WebhookEvent", "WebhookEventType"]
