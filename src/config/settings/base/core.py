"""Settings do processo host que embute o SDK.

Apenas o que o host precisa para configurar logging: ambiente, nome do
serviço e nível de log. Credenciais da API ficam em XrplSaleSettings.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

Environment = Literal["development", "staging", "production"]

_ENVIRONMENT_ALIASES: dict[str, Environment] = {
    "prod": "production",
    "production": "production",
    "stage": "staging",
    "staging": "staging",
}

_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


@dataclass(frozen=True)
class BaseSettings:
    """Configurações do host.

    Attributes:
        environment: development|staging|production
        service_name: Valor do campo `service` nos logs
        debug: Força nível DEBUG independente de log_level
        log_level: Nível de log configurado
    """

    environment: Environment = "development"
    service_name: str = "xrpl-sale-sdk"
    debug: bool = False
    log_level: str = "INFO"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def effective_log_level(self) -> str:
        """Nível efetivo: DEBUG quando debug está ativo."""
        return "DEBUG" if self.debug else self.log_level.upper()

    def validate(self) -> list[str]:
        """Returns: lista de erros (vazia = OK)."""
        errors: list[str] = []

        if not self.service_name:
            errors.append("SERVICE_NAME não pode ser vazio")

        if self.log_level.upper() not in _LOG_LEVELS:
            errors.append(f"LOG_LEVEL inválido: {self.log_level}")

        if self.is_production and self.debug:
            errors.append("DEBUG não deve estar ativo em produção")

        return errors


@lru_cache(maxsize=1)
def get_base_settings() -> BaseSettings:
    """Carrega (uma vez) ENVIRONMENT, SERVICE_NAME, DEBUG e LOG_LEVEL."""
    raw_env = os.getenv("ENVIRONMENT", "development").lower()
    return BaseSettings(
        environment=_ENVIRONMENT_ALIASES.get(raw_env, "development"),
        service_name=os.getenv("SERVICE_NAME", "xrpl-sale-sdk"),
        debug=os.getenv("DEBUG", "").lower() in ("true", "1", "yes"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
