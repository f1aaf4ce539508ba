"""Decodificação do corpo bruto de webhook em WebhookEvent."""

from __future__ import annotations

import json

from pydantic import ValidationError as PydanticValidationError

from utils.errors import MalformedPayloadError

from .models import WebhookEvent


def parse_webhook_event(payload: bytes | str) -> WebhookEvent:
    """Decodifica payload (UTF-8 + JSON) no formato de WebhookEvent.

    Apenas a forma estrutural é garantida; a semântica de `type`
    fica a cargo do consumidor.

    Args:
        payload: Corpo bruto ou texto já decodificado

    Raises:
        MalformedPayloadError: Encoding, JSON ou campos obrigatórios inválidos

    Returns:
        WebhookEvent
    """
    if isinstance(payload, (bytes, bytearray)):
        try:
            text = bytes(payload).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise MalformedPayloadError("invalid_encoding") from exc
    else:
        text = payload

    try:
        document = json.loads(text)
    except (json.JSONDecodeError, RecursionError) as exc:
        # RecursionError: aninhamento além do limite do decoder
        raise MalformedPayloadError("invalid_json") from exc

    if not isinstance(document, dict):
        raise MalformedPayloadError("payload_not_object")

    try:
        return WebhookEvent.model_validate(document)
    except PydanticValidationError as exc:
        raise MalformedPayloadError("invalid_event_shape") from exc
