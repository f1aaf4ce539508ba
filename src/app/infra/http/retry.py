"""Execução com retry e backoff exponencial para operações assíncronas.

Não conhece HTTP: recebe qualquer callable assíncrono sem argumentos.
Por padrão toda falha é retentada da mesma forma (sem classificação);
`should_retry` permite ao chamador marcar erros como terminais.

Uso:
    policy = RetryPolicy(max_retries=3, base_delay_seconds=1.0)
    data = await with_retry(lambda: client.get("/ping"), policy)
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class RetryPolicy:
    """Política de retry imutável.

    Attributes:
        max_retries: Retries após a primeira tentativa (total = max_retries + 1)
        base_delay_seconds: Espera antes do primeiro retry
        backoff_multiplier: Fator aplicado a cada retry subsequente
    """

    max_retries: int = 3
    base_delay_seconds: float = 1.0
    backoff_multiplier: float = 2.0

    def __post_init__(self) -> None:
        if self.max_retries < 0:
            raise ValueError("max_retries deve ser >= 0")
        if self.base_delay_seconds < 0:
            raise ValueError("base_delay_seconds deve ser >= 0")
        if self.backoff_multiplier < 1:
            raise ValueError("backoff_multiplier deve ser >= 1")

    @property
    def max_attempts(self) -> int:
        """Total de tentativas permitidas."""
        return self.max_retries + 1

    def delay_for(self, retry_index: int) -> float:
        """Espera antes do retry `retry_index` (0-indexed)."""
        return self.base_delay_seconds * (self.backoff_multiplier**retry_index)


@dataclass
class RetryOutcome(Generic[T]):
    """Resultado de uma execução com retry: valor ou erro terminal."""

    value: T | None = None
    error: BaseException | None = None
    attempts: int = 0
    delays: list[float] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Retorna o valor ou relança o último erro sem encapsular."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]


async def execute_with_retry(
    operation: Callable[[], Awaitable[T]],
    policy: RetryPolicy | None = None,
    *,
    should_retry: Callable[[Exception], bool] | None = None,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> RetryOutcome[T]:
    """Executa `operation` até sucesso ou esgotar as tentativas.

    Args:
        operation: Callable assíncrono sem argumentos (reexecutado a cada tentativa)
        policy: Política de retry (padrão: 3 retries, 1s, x2)
        should_retry: Classificador opcional; False torna o erro terminal
        sleep: Função de espera assíncrona (injetável em testes)

    Returns:
        RetryOutcome com valor ou erro final
    """
    policy = policy or RetryPolicy()
    outcome: RetryOutcome[T] = RetryOutcome()

    for attempt in range(policy.max_attempts):
        outcome.attempts = attempt + 1
        try:
            outcome.value = await operation()
            outcome.error = None
            return outcome
        except Exception as exc:
            outcome.error = exc

        is_last = attempt == policy.max_attempts - 1
        if is_last or (should_retry is not None and not should_retry(outcome.error)):
            break

        delay = policy.delay_for(attempt)
        outcome.delays.append(delay)
        logger.info(
            "retry_backoff",
            extra={
                "attempt": outcome.attempts,
                "max_attempts": policy.max_attempts,
                "backoff_seconds": delay,
                "error_type": type(outcome.error).__name__,
            },
        )
        await sleep(delay)

    logger.warning(
        "retry_terminal_failure",
        extra={
            "attempts": outcome.attempts,
            "error_type": type(outcome.error).__name__,
        },
    )
    return outcome


async def with_retry(
    operation: Callable[[], Awaitable[T]],
    policy: RetryPolicy | None = None,
    *,
    should_retry: Callable[[Exception], bool] | None = None,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> T:
    """Executa com retry e retorna o valor; relança o último erro inalterado."""
    outcome = await execute_with_retry(
        operation,
        policy,
        should_retry=should_retry,
        sleep=sleep,
    )
    return outcome.unwrap()
