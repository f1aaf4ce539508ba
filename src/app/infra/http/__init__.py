"""Infra de invocação resiliente (retry com backoff exponencial)."""

from .retry import RetryOutcome, RetryPolicy, execute_with_retry, with_retry

__all__ = [
    "RetryOutcome",
    "RetryPolicy",
    "execute_with_retry",
    "with_retry",
]
