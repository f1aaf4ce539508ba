"""Validações genéricas de entrada (e-mail, URL, números, datas)."""

from __future__ import annotations

import math
import re
from datetime import UTC, datetime
from urllib.parse import urlsplit

_EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
_SCHEME_RE = re.compile(r"[A-Za-z][A-Za-z0-9+.\-]*")

# Esquemas que exigem host (ex: "http://" sozinho é inválido)
_HOST_SCHEMES = frozenset({"http", "https", "ws", "wss", "ftp"})


def is_valid_email(email: str) -> bool:
    return _EMAIL_RE.fullmatch(email) is not None


def is_valid_url(url: str) -> bool:
    """URL absoluta: esquema obrigatório e host para esquemas de rede."""
    if not url or url != url.strip():
        return False
    try:
        parts = urlsplit(url)
    except ValueError:
        return False
    if not parts.scheme or _SCHEME_RE.fullmatch(parts.scheme) is None:
        return False
    if parts.scheme.lower() in _HOST_SCHEMES:
        return bool(parts.hostname)
    return bool(parts.netloc or parts.path)


def is_positive_number(value: str | int | float) -> bool:
    """True para números finitos > 0; strings não numéricas são False."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return False
    return math.isfinite(number) and number > 0


def is_future_date(value: datetime | str) -> bool:
    """True se o instante é posterior a agora.

    Strings são lidas como ISO 8601; datas sem fuso são tratadas como UTC.
    Strings inválidas retornam False.
    """
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value)
        except ValueError:
            return False
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value > datetime.now(UTC)
