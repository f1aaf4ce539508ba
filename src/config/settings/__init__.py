"""Agregador de settings do SDK XRPL.Sale.

Re-exporta todas as settings e funções de cada módulo.
"""

from __future__ import annotations

from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.xrpl_sale import (
    BASE_URLS,
    SDK_VERSION,
    USER_AGENT,
    ApiEnvironment,
    XrplSaleSettings,
    get_xrpl_sale_settings,
)

__all__ = [
    # Constants
    "BASE_URLS",
    "SDK_VERSION",
    "USER_AGENT",
    # Base
    "ApiEnvironment",
    "BaseSettings",
    "Environment",
    # XRPL.Sale
    "XrplSaleSettings",
    "get_base_settings",
    "get_xrpl_sale_settings",
]
