"""Configuração de logging estruturado.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="xrpl-sale-sdk")
    logger = get_logger(__name__)

Campos obrigatórios em todo log:
- correlation_id
- service
- level
- logger
- message
- asctime

Nunca logar payloads brutos, assinaturas ou secrets.
"""

from config.logging.config import (
    configure_logging,
    configure_logging_from_settings,
    get_logger,
)
from config.logging.filters import (
    REDACTED,
    SENSITIVE_FIELDS,
    CorrelationIdFilter,
    SecretRedactionFilter,
)
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    RedactingJsonFormatter,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REDACTED",
    "REQUIRED_LOG_FIELDS",
    "SENSITIVE_FIELDS",
    "CorrelationIdFilter",
    "RedactingJsonFormatter",
    "SecretRedactionFilter",
    "configure_logging",
    "configure_logging_from_settings",
    "create_json_formatter",
    "get_logger",
]
