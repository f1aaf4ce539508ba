"""Primitivas criptográficas do SDK.

Localizado em app/infra/ para manter boundaries corretas:
- app/ não importa de api/
- api/connectors consome o verificador via injeção
"""

from .signature import (
    SIGNATURE_PREFIX,
    SignatureVerifier,
    compute_signature,
    constant_time_equals,
)

__all__ = [
    "SIGNATURE_PREFIX",
    "SignatureVerifier",
    "compute_signature",
    "constant_time_equals",
]
