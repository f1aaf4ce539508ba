"""Formatter JSON dos logs do SDK.

Campos obrigatórios: asctime, level, logger, message, correlation_id, service.
Valores sensíveis aninhados em `extra` (ex: `details={"api_key": ...}`)
são mascarados na serialização; o SecretRedactionFilter cobre apenas
atributos de primeiro nível do record.
"""

from __future__ import annotations

from typing import Any

from pythonjsonlogger.json import JsonFormatter

from config.logging.filters import REDACTED, SENSITIVE_FIELDS

REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def _redact(value: Any, fields: frozenset[str]) -> Any:
    if isinstance(value, dict):
        return {
            key: REDACTED if str(key).lower() in fields and item else _redact(item, fields)
            for key, item in value.items()
        }
    if isinstance(value, (list, tuple)):
        return [_redact(item, fields) for item in value]
    return value


class RedactingJsonFormatter(JsonFormatter):
    """JsonFormatter que mascara chaves sensíveis em qualquer nível."""

    def __init__(
        self,
        *args: Any,
        sensitive_fields: frozenset[str] = SENSITIVE_FIELDS,
        **kwargs: Any,
    ) -> None:
        super().__init__(*args, **kwargs)
        self._sensitive_fields = sensitive_fields

    def process_log_record(self, log_data: dict[str, Any]) -> dict[str, Any]:
        return _redact(super().process_log_record(log_data), self._sensitive_fields)


def create_json_formatter() -> RedactingJsonFormatter:
    """Cria o formatter com campos padronizados e mascaramento.

    Exemplo de output:
        {
            "asctime": "2026-10-19 10:30:00,123",
            "level": "WARNING",
            "logger": "api.connectors.xrpl_sale.http_client",
            "message": "xrpl_sale_api_error",
            "correlation_id": "abc-123",
            "service": "xrpl-sale-sdk",
            "status_code": 401
        }
    """
    format_string = " ".join(f"%({name})s" for name in REQUIRED_LOG_FIELDS)
    return RedactingJsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)
