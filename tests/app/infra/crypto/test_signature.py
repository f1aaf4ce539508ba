"""Testes para assinatura HMAC de webhooks."""

from __future__ import annotations

import hashlib
import hmac

import pytest

from app.infra.crypto import SignatureVerifier, compute_signature, constant_time_equals
from utils.errors import ConfigurationError

PAYLOAD = (
    b'{"id":"evt_1","type":"investment.confirmed","data":{},'
    b'"timestamp":"2025-01-01T00:00:00Z","version":"1"}'
)
SECRET = "whsec_test"


def _reference_signature(payload: bytes, secret: str) -> str:
    digest = hmac.new(secret.encode("utf-8"), payload, hashlib.sha256).hexdigest()
    return f"sha256={digest}"


def _flip(value: bytes, index: int) -> bytes:
    mutable = bytearray(value)
    mutable[index] ^= 0x01
    return bytes(mutable)


def test_compute_signature_matches_hmac_sha256() -> None:
    assert compute_signature(PAYLOAD, SECRET) == _reference_signature(PAYLOAD, SECRET)


def test_compute_signature_accepts_text() -> None:
    assert compute_signature(PAYLOAD.decode("utf-8"), SECRET) == compute_signature(
        PAYLOAD, SECRET
    )


def test_verify_roundtrip_is_deterministic() -> None:
    verifier = SignatureVerifier(SECRET)
    signature = verifier.sign(PAYLOAD)

    assert verifier.verify(PAYLOAD, signature) is True
    assert verifier.verify(PAYLOAD, signature) is True


@pytest.mark.parametrize("index", [0, len(PAYLOAD) // 2, len(PAYLOAD) - 1])
def test_verify_rejects_tampered_payload(index: int) -> None:
    verifier = SignatureVerifier(SECRET)
    signature = verifier.sign(PAYLOAD)

    assert verifier.verify(_flip(PAYLOAD, index), signature) is False


@pytest.mark.parametrize("index", [0, 7, 30, -1])
def test_verify_rejects_tampered_signature(index: int) -> None:
    verifier = SignatureVerifier(SECRET)
    signature = verifier.sign(PAYLOAD)
    chars = list(signature)
    chars[index] = "0" if chars[index] != "0" else "1"

    assert verifier.verify(PAYLOAD, "".join(chars)) is False


@pytest.mark.parametrize(
    "signature",
    ["", "sha256=", "sha256=deadbeef", _reference_signature(PAYLOAD, SECRET) + "0"],
)
def test_verify_rejects_length_mismatch(signature: str) -> None:
    assert SignatureVerifier(SECRET).verify(PAYLOAD, signature) is False


def test_verify_rejects_signature_without_prefix() -> None:
    digest_only = _reference_signature(PAYLOAD, SECRET).removeprefix("sha256=")
    assert SignatureVerifier(SECRET).verify(PAYLOAD, digest_only) is False


def test_verify_per_call_secret_overrides_default() -> None:
    verifier = SignatureVerifier("other-secret")
    signature = _reference_signature(PAYLOAD, SECRET)

    assert verifier.verify(PAYLOAD, signature) is False
    assert verifier.verify(PAYLOAD, signature, secret=SECRET) is True


def test_verify_without_any_secret_raises_configuration_error() -> None:
    verifier = SignatureVerifier()

    assert verifier.has_secret is False
    with pytest.raises(ConfigurationError):
        verifier.verify(PAYLOAD, "sha256=abc")


def test_empty_default_secret_is_treated_as_missing() -> None:
    with pytest.raises(ConfigurationError):
        SignatureVerifier("").sign(PAYLOAD)


class TestConstantTimeEquals:
    """Testes para a comparação XOR-acumulada."""

    def test_equal_strings(self) -> None:
        assert constant_time_equals("sha256=abc", "sha256=abc") is True

    def test_different_last_char(self) -> None:
        assert constant_time_equals("sha256=abc", "sha256=abd") is False

    def test_different_first_char(self) -> None:
        assert constant_time_equals("sha256=abc", "xha256=abc") is False

    def test_different_lengths(self) -> None:
        assert constant_time_equals("abc", "abcd") is False
        assert constant_time_equals("", "a") is False

    def test_empty_strings(self) -> None:
        assert constant_time_equals("", "") is True
