"""Helpers de unidades e validação XRPL.

1 XRP = 1.000.000 drops. Conversões usam Decimal para evitar erro de
ponto flutuante.
"""

from __future__ import annotations

import re
from decimal import ROUND_FLOOR, Decimal, InvalidOperation

DROPS_PER_XRP = Decimal(1_000_000)

_ADDRESS_RE = re.compile(r"r[1-9A-HJ-NP-Za-km-z]{25,34}")
_TOKEN_SYMBOL_RE = re.compile(r"[A-Z][A-Z0-9]{2,9}")


def _to_decimal(value: str | int | float | Decimal) -> Decimal:
    try:
        return Decimal(str(value))
    except InvalidOperation as exc:
        raise ValueError(f"Valor numérico inválido: {value!r}") from exc


def drops_to_xrp(drops: str | int) -> str:
    """Converte drops para XRP (string sem zeros à direita)."""
    xrp = _to_decimal(drops) / DROPS_PER_XRP
    return format(xrp.normalize(), "f")


def xrp_to_drops(xrp: str | int | float | Decimal) -> str:
    """Converte XRP para drops, truncando frações de drop."""
    drops = (_to_decimal(xrp) * DROPS_PER_XRP).to_integral_value(rounding=ROUND_FLOOR)
    return str(int(drops))


def is_valid_address(address: str) -> bool:
    """Validação básica de endereço clássico (prefixo r, base58)."""
    return _ADDRESS_RE.fullmatch(address) is not None


def is_valid_token_symbol(symbol: str) -> bool:
    """Símbolo de token: maiúsculo, 3-10 caracteres alfanuméricos."""
    return _TOKEN_SYMBOL_RE.fullmatch(symbol) is not None
