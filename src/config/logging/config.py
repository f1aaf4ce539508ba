"""Instalação do logging JSON no root logger.

O SDK apenas emite logs via `logging.getLogger(__name__)`. Quem embute o
SDK escolhe entre `configure_logging` / `configure_logging_from_settings`
ou a própria configuração.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import CorrelationIdFilter, SecretRedactionFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

    from config.settings.base import BaseSettings

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "xrpl-sale-sdk"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> logging.Handler:
    """Instala um único StreamHandler JSON no root logger.

    Args:
        level: DEBUG, INFO, WARNING, ERROR ou CRITICAL (case insensitive)
        service_name: Valor do campo `service`
        correlation_id_getter: Origem do correlation_id; padrão é o
            ContextVar de app.observability

    Raises:
        ValueError: Nível desconhecido.

    Returns:
        O handler instalado.
    """
    level_name = level.upper()
    if level_name not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    if correlation_id_getter is None:
        from app.observability import get_correlation_id

        correlation_id_getter = get_correlation_id

    handler = logging.StreamHandler()
    handler.setLevel(level_name)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))
    handler.addFilter(SecretRedactionFilter())

    root = logging.getLogger()
    root.setLevel(level_name)
    root.handlers = [handler]
    return handler


def configure_logging_from_settings(settings: BaseSettings) -> logging.Handler:
    """Atalho: nível efetivo e service_name vindos de BaseSettings."""
    return configure_logging(
        level=settings.effective_log_level,
        service_name=settings.service_name,
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
