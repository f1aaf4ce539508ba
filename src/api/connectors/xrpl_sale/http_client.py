"""Cliente HTTP da API XRPL.Sale sobre httpx.

Responsabilidades:
- Headers padrão (Authorization Bearer, Content-Type, User-Agent)
- Timeout por requisição
- Mapeamento de status de erro para a hierarquia de exceções do SDK
- Retry opcional via RetryPolicy (app.infra.http)
- Logging estruturado sem tokens nem payloads
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

import httpx

from app.infra.http import RetryPolicy, with_retry
from config.settings import USER_AGENT
from utils.errors import (
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    ValidationError,
    XrplSaleError,
)

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from config.settings import XrplSaleSettings

logger = logging.getLogger(__name__)

RETRYABLE_STATUS_CODES = frozenset({429, 500, 502, 503, 504})


def is_transient_error(exc: Exception) -> bool:
    """Classifica erro como transitório (rede, 429, 5xx).

    Usado como `should_retry` do cliente; erros 4xx de validação e
    autenticação não são retentados.
    """
    if isinstance(exc, NetworkError):
        return True
    if isinstance(exc, XrplSaleError) and exc.status_code is not None:
        return exc.status_code in RETRYABLE_STATUS_CODES
    return False


def map_error_response(status_code: int, body: Any, path: str) -> XrplSaleError:
    """Converte uma resposta de erro em exceção do SDK."""
    message = "API request failed"
    if isinstance(body, dict) and body.get("message"):
        message = str(body["message"])

    if status_code == 400:
        return ValidationError(message, details=body)
    if status_code == 401:
        return AuthenticationError(message, details=body)
    if status_code == 403:
        return AuthorizationError(message, details=body)
    if status_code == 404:
        return NotFoundError(path, details=body)
    if status_code == 429:
        return RateLimitError(message, details=body)
    return XrplSaleError(message, status_code, body)


def _clean_params(params: dict[str, Any] | None) -> dict[str, Any]:
    """Remove parâmetros vazios (None, "", 0, False)."""
    if not params:
        return {}
    return {key: value for key, value in params.items() if value}


def _decode_body(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        # JSON inválido ou bytes fora do encoding declarado
        return response.text


class XrplSaleHttpClient:
    """Cliente HTTP assíncrono para a API XRPL.Sale.

    Args:
        settings: Settings com api_key, ambiente, timeout e debug
        http_client: AsyncClient injetado (ex: com MockTransport em testes)
        retry_policy: Política de retry; None desativa retries
        should_retry: Classificador de erros retentáveis
        sleep: Função de espera usada no backoff
    """

    def __init__(
        self,
        settings: XrplSaleSettings,
        *,
        http_client: httpx.AsyncClient | None = None,
        retry_policy: RetryPolicy | None = None,
        should_retry: Callable[[Exception], bool] | None = is_transient_error,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        if not settings.api_key or not settings.api_key.strip():
            raise ConfigurationError("API key is required")
        try:
            self._base_url = settings.base_url
        except ValueError as exc:
            raise ConfigurationError(str(exc)) from exc

        self._settings = settings
        self._retry_policy = retry_policy
        self._should_retry = should_retry
        self._sleep = sleep
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=settings.timeout_seconds)
        self._headers = {
            "Authorization": f"Bearer {settings.api_key}",
            "Content-Type": "application/json",
            "User-Agent": USER_AGENT,
        }

    @property
    def base_url(self) -> str:
        return self._base_url

    async def __aenter__(self) -> XrplSaleHttpClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Fecha o AsyncClient se foi criado por este cliente."""
        if self._owns_client:
            await self._client.aclose()

    async def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return await self.request("GET", path, params=params)

    async def post(self, path: str, json: Any = None) -> Any:
        return await self.request("POST", path, json=json)

    async def patch(self, path: str, json: Any = None) -> Any:
        return await self.request("PATCH", path, json=json)

    async def delete(self, path: str) -> Any:
        return await self.request("DELETE", path)

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> Any:
        """Executa a requisição (com retry, se configurado).

        Raises:
            XrplSaleError: Subclasse conforme o status de erro
            NetworkError: Se nenhuma resposta foi recebida
        """

        async def _attempt() -> Any:
            return await self._send_once(method, path, params=params, json=json)

        if self._retry_policy is None:
            return await _attempt()
        return await with_retry(
            _attempt,
            self._retry_policy,
            should_retry=self._should_retry,
            sleep=self._sleep,
        )

    async def _send_once(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None,
        json: Any,
    ) -> Any:
        if self._settings.debug:
            logger.info("xrpl_sale_request", extra={"method": method, "path": path})

        try:
            response = await self._client.request(
                method,
                f"{self._base_url}{path}",
                params=_clean_params(params),
                json=json,
                headers=self._headers,
                timeout=self._settings.timeout_seconds,
            )
        except httpx.RequestError as exc:
            logger.warning(
                "xrpl_sale_network_error",
                extra={"method": method, "path": path, "error_type": type(exc).__name__},
            )
            raise NetworkError("Network error - no response received") from exc

        body = _decode_body(response)
        if response.status_code >= 400:
            logger.warning(
                "xrpl_sale_api_error",
                extra={"method": method, "path": path, "status_code": response.status_code},
            )
            raise map_error_response(response.status_code, body, path)

        logger.debug(
            "xrpl_sale_response",
            extra={"method": method, "path": path, "status_code": response.status_code},
        )
        return body
