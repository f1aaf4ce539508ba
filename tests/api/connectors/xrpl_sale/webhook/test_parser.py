"""Testes para o parser de eventos de webhook."""

from __future__ import annotations

import json
from datetime import UTC, datetime

import pytest

from api.connectors.xrpl_sale.webhook import (
    MalformedPayloadError,
    WebhookEventType,
    parse_webhook_event,
)


def _event(**overrides: object) -> dict[str, object]:
    event: dict[str, object] = {
        "id": "evt_1",
        "type": "investment.confirmed",
        "data": {"investmentId": "inv_9", "amountXRP": "100"},
        "timestamp": "2025-01-01T00:00:00Z",
        "version": "1",
    }
    event.update(overrides)
    return event


def test_parse_bytes_ok() -> None:
    event = parse_webhook_event(json.dumps(_event()).encode("utf-8"))

    assert event.id == "evt_1"
    assert event.type == "investment.confirmed"
    assert event.event_type is WebhookEventType.INVESTMENT_CONFIRMED
    assert event.is_recognized is True
    assert event.data == {"investmentId": "inv_9", "amountXRP": "100"}
    assert event.timestamp == datetime(2025, 1, 1, tzinfo=UTC)
    assert event.version == "1"


def test_parse_text_ok() -> None:
    event = parse_webhook_event(json.dumps(_event(type="tier.completed")))
    assert event.event_type is WebhookEventType.TIER_COMPLETED


def test_unknown_type_is_preserved_but_flagged() -> None:
    event = parse_webhook_event(json.dumps(_event(type="project.archived")))

    assert event.type == "project.archived"
    assert event.is_recognized is False
    assert event.event_type is None


def test_extra_fields_are_ignored() -> None:
    event = parse_webhook_event(json.dumps(_event(extra="x")))
    assert event.id == "evt_1"


def test_data_can_be_any_json_value() -> None:
    event = parse_webhook_event(json.dumps(_event(data=[1, 2, 3])))
    assert event.data == [1, 2, 3]


@pytest.mark.parametrize(
    ("payload", "reason"),
    [
        (b"not-json", "invalid_json"),
        (b"\xff\xfe\xfa", "invalid_encoding"),
        (b"[1, 2]", "payload_not_object"),
        (b'"text"', "payload_not_object"),
        (b"", "invalid_json"),
    ],
)
def test_malformed_payloads(payload: bytes, reason: str) -> None:
    with pytest.raises(MalformedPayloadError) as exc_info:
        parse_webhook_event(payload)

    assert exc_info.value.reason == reason
    assert exc_info.value.status_code == 400


@pytest.mark.parametrize("missing", ["id", "type", "data", "timestamp", "version"])
def test_missing_required_field(missing: str) -> None:
    event = _event()
    del event[missing]

    with pytest.raises(MalformedPayloadError) as exc_info:
        parse_webhook_event(json.dumps(event))

    assert exc_info.value.reason == "invalid_event_shape"


def test_invalid_timestamp_is_malformed() -> None:
    with pytest.raises(MalformedPayloadError):
        parse_webhook_event(json.dumps(_event(timestamp="yesterday")))


def test_every_documented_event_type_is_recognized() -> None:
    for event_type in (
        "project.created",
        "project.updated",
        "project.launched",
        "project.completed",
        "investment.created",
        "investment.confirmed",
        "investment.failed",
        "tier.completed",
        "tokens.distributed",
    ):
        event = parse_webhook_event(json.dumps(_event(type=event_type)))
        assert event.event_type is not None
        assert event.event_type.value == event_type


def test_deeply_nested_json_is_malformed() -> None:
    depth = 100_000
    payload = b"[" * depth + b"]" * depth

    with pytest.raises(MalformedPayloadError) as exc_info:
        parse_webhook_event(payload)

    assert exc_info.value.reason == "invalid_json"
