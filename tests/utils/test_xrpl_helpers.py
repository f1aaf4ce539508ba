"""Testes para utils.xrpl."""

from __future__ import annotations

import pytest

from utils.xrpl import drops_to_xrp, is_valid_address, is_valid_token_symbol, xrp_to_drops


@pytest.mark.parametrize(
    ("drops", "expected"),
    [("1000000", "1"), (1_500_000, "1.5"), ("10000000", "10"), ("1", "0.000001"), (0, "0")],
)
def test_drops_to_xrp(drops: str | int, expected: str) -> None:
    assert drops_to_xrp(drops) == expected


@pytest.mark.parametrize(
    ("xrp", "expected"),
    [("1", "1000000"), ("1.5", "1500000"), (2, "2000000"), ("0.0000015", "1")],
)
def test_xrp_to_drops(xrp: str | int, expected: str) -> None:
    assert xrp_to_drops(xrp) == expected


def test_invalid_number() -> None:
    with pytest.raises(ValueError, match="Valor numérico inválido"):
        xrp_to_drops("abc")


def test_is_valid_address() -> None:
    assert is_valid_address("rHb9CJAWyB4rj91VRWn96DkukG4bwdtyTh") is True
    assert is_valid_address("xHb9CJAWyB4rj91VRWn96DkukG4bwdtyTh") is False
    assert is_valid_address("r0OIl") is False


def test_trailing_newline_is_rejected() -> None:
    assert is_valid_address("rHb9CJAWyB4rj91VRWn96DkukG4bwdtyTh\n") is False
    assert is_valid_token_symbol("ABC\n") is False


def test_is_valid_token_symbol() -> None:
    assert is_valid_token_symbol("DEMO") is True
    assert is_valid_token_symbol("XRP2") is True
    assert is_valid_token_symbol("de") is False
    assert is_valid_token_symbol("TOOLONGSYMBOL") is False
