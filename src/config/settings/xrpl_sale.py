"""Settings do cliente XRPL.Sale.

Credenciais, seleção de ambiente, webhook e política de retry.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

from app.infra.http import RetryPolicy

ApiEnvironment = Literal["production", "testnet"]

SDK_VERSION: str = "1.0.0"
USER_AGENT: str = f"xrpl-sale-python-sdk/{SDK_VERSION}"

BASE_URLS: dict[str, str] = {
    "production": "https://xrpl.sale/api",
    "testnet": "https://testnet.xrpl.sale/api",
}


@dataclass(frozen=True)
class XrplSaleSettings:
    """Configurações do cliente XRPL.Sale.

    Attributes:
        api_key: Chave da API (Bearer)
        environment: production ou testnet (define a base URL)
        timeout_seconds: Timeout por requisição HTTP
        debug: Loga método e path de cada requisição
        webhook_secret: Secret padrão para verificação HMAC de webhooks
        verify_webhook_signature: Exige assinatura em webhooks inbound
        max_retries: Retries após a primeira tentativa (0 = sem retry)
        retry_base_delay_seconds: Espera antes do primeiro retry
        retry_backoff_multiplier: Fator de backoff exponencial
    """

    api_key: str = ""
    environment: str = "production"
    timeout_seconds: float = 30.0
    debug: bool = False

    # Webhooks
    webhook_secret: str = ""
    verify_webhook_signature: bool = True

    # Retry
    max_retries: int = 3
    retry_base_delay_seconds: float = 1.0
    retry_backoff_multiplier: float = 2.0

    @property
    def base_url(self) -> str:
        """URL base da API para o ambiente configurado.

        Raises:
            ValueError: Se o ambiente não for conhecido.
        """
        try:
            return BASE_URLS[self.environment]
        except KeyError:
            raise ValueError(f"Unknown environment: {self.environment}") from None

    def retry_policy(self) -> RetryPolicy:
        """Política de retry derivada das settings."""
        return RetryPolicy(
            max_retries=self.max_retries,
            base_delay_seconds=self.retry_base_delay_seconds,
            backoff_multiplier=self.retry_backoff_multiplier,
        )

    def validate(self) -> list[str]:
        """Valida configurações mínimas.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.api_key:
            errors.append("XRPL_SALE_API_KEY não configurado")

        if self.environment not in BASE_URLS:
            errors.append("XRPL_SALE_ENVIRONMENT deve ser 'production' ou 'testnet'")

        if self.timeout_seconds <= 0:
            errors.append("XRPL_SALE_TIMEOUT_SECONDS deve ser > 0")

        if self.max_retries < 0:
            errors.append("XRPL_SALE_MAX_RETRIES deve ser >= 0")

        if self.retry_base_delay_seconds < 0:
            errors.append("XRPL_SALE_RETRY_BASE_DELAY_SECONDS deve ser >= 0")

        if self.retry_backoff_multiplier < 1:
            errors.append("XRPL_SALE_RETRY_BACKOFF_MULTIPLIER deve ser >= 1")

        return errors


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


def _load_from_env() -> XrplSaleSettings:
    """Carrega XrplSaleSettings a partir de variáveis de ambiente."""
    return XrplSaleSettings(
        api_key=os.getenv("XRPL_SALE_API_KEY", ""),
        environment=os.getenv("XRPL_SALE_ENVIRONMENT", "production").lower(),
        timeout_seconds=float(os.getenv("XRPL_SALE_TIMEOUT_SECONDS", "30")),
        debug=_env_bool("XRPL_SALE_DEBUG", "false"),
        webhook_secret=os.getenv("XRPL_SALE_WEBHOOK_SECRET", ""),
        verify_webhook_signature=_env_bool("XRPL_SALE_VERIFY_WEBHOOK_SIGNATURE", "true"),
        max_retries=int(os.getenv("XRPL_SALE_MAX_RETRIES", "3")),
        retry_base_delay_seconds=float(
            os.getenv("XRPL_SALE_RETRY_BASE_DELAY_SECONDS", "1.0")
        ),
        retry_backoff_multiplier=float(
            os.getenv("XRPL_SALE_RETRY_BACKOFF_MULTIPLIER", "2.0")
        ),
    )


@lru_cache(maxsize=1)
def get_xrpl_sale_settings() -> XrplSaleSettings:
    """Retorna instância cacheada de XrplSaleSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
