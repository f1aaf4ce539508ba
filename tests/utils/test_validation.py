"""Testes para utils.validation."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from utils.validation import (
    is_future_date,
    is_positive_number,
    is_valid_email,
    is_valid_url,
)


@pytest.mark.parametrize(
    ("email", "expected"),
    [
        ("investor@xrpl.sale", True),
        ("a.b+c@mail.example.org", True),
        ("no-at-sign.com", False),
        ("two@@example.com", False),
        ("spaces in@example.com", False),
        ("user@nodot", False),
        ("user@example.com\n", False),
    ],
)
def test_is_valid_email(email: str, expected: bool) -> None:
    assert is_valid_email(email) is expected


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("https://xrpl.sale/api", True),
        ("http://localhost:8000/webhook", True),
        ("mailto:team@xrpl.sale", True),
        ("xrpl.sale", False),
        ("https://", False),
        ("", False),
        (" https://xrpl.sale", False),
        ("http://[::1", False),
    ],
)
def test_is_valid_url(url: str, expected: bool) -> None:
    assert is_valid_url(url) is expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (1, True),
        ("0.5", True),
        (0, False),
        ("-3", False),
        ("abc", False),
        ("nan", False),
        ("inf", False),
    ],
)
def test_is_positive_number(value: str | int, expected: bool) -> None:
    assert is_positive_number(value) is expected


def test_is_future_date() -> None:
    now = datetime.now(UTC)
    assert is_future_date(now + timedelta(days=1)) is True
    assert is_future_date(now - timedelta(days=1)) is False
    assert is_future_date((now + timedelta(hours=1)).isoformat()) is True
    assert is_future_date("2000-01-01T00:00:00") is False
    assert is_future_date("not a date") is False
