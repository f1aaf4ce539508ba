"""Testes para o executor de retry com backoff exponencial."""

from __future__ import annotations

import pytest

from app.infra.http import RetryOutcome, RetryPolicy, execute_with_retry, with_retry


class FakeSleep:
    """Registra as esperas sem dormir."""

    def __init__(self) -> None:
        self.delays: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


class FlakyOperation:
    """Falha nas primeiras `failures` chamadas e depois retorna `value`."""

    def __init__(self, failures: int, value: object = "ok", error: Exception | None = None) -> None:
        self.failures = failures
        self.value = value
        self.error = error or ConnectionError("transient")
        self.calls = 0

    async def __call__(self) -> object:
        self.calls += 1
        if self.calls <= self.failures:
            raise self.error
        return self.value


class TestRetryPolicy:
    """Testes para RetryPolicy."""

    def test_defaults(self) -> None:
        policy = RetryPolicy()
        assert policy.max_retries == 3
        assert policy.max_attempts == 4
        assert policy.base_delay_seconds == 1.0
        assert policy.backoff_multiplier == 2.0

    def test_backoff_law(self) -> None:
        policy = RetryPolicy(max_retries=5, base_delay_seconds=1.0, backoff_multiplier=2.0)
        assert [policy.delay_for(i) for i in range(4)] == [1.0, 2.0, 4.0, 8.0]

    def test_multiplier_one_is_constant(self) -> None:
        policy = RetryPolicy(base_delay_seconds=0.5, backoff_multiplier=1.0)
        assert [policy.delay_for(i) for i in range(3)] == [0.5, 0.5, 0.5]

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"max_retries": -1},
            {"base_delay_seconds": -0.1},
            {"backoff_multiplier": 0.5},
        ],
    )
    def test_invalid_values(self, kwargs: dict[str, float]) -> None:
        with pytest.raises(ValueError):
            RetryPolicy(**kwargs)

    def test_is_immutable(self) -> None:
        policy = RetryPolicy()
        with pytest.raises(AttributeError):
            policy.max_retries = 10  # type: ignore[misc]


@pytest.mark.asyncio
async def test_success_first_attempt_does_not_sleep() -> None:
    sleep = FakeSleep()
    operation = FlakyOperation(failures=0, value=42)

    result = await with_retry(operation, RetryPolicy(), sleep=sleep)

    assert result == 42
    assert operation.calls == 1
    assert sleep.delays == []


@pytest.mark.asyncio
async def test_exhaustion_invokes_retries_plus_one_and_reraises_original() -> None:
    sleep = FakeSleep()
    original = ValueError("permanent")
    operation = FlakyOperation(failures=100, error=original)

    with pytest.raises(ValueError) as exc_info:
        await with_retry(operation, RetryPolicy(max_retries=3), sleep=sleep)

    assert exc_info.value is original
    assert operation.calls == 4
    assert sleep.delays == [1.0, 2.0, 4.0]


@pytest.mark.asyncio
async def test_success_on_third_attempt_waits_twice() -> None:
    sleep = FakeSleep()
    operation = FlakyOperation(failures=2, value="done")

    result = await with_retry(operation, RetryPolicy(max_retries=3), sleep=sleep)

    assert result == "done"
    assert operation.calls == 3
    assert sleep.delays == [1.0, 2.0]


@pytest.mark.asyncio
async def test_backoff_uses_policy_delays() -> None:
    sleep = FakeSleep()
    operation = FlakyOperation(failures=100)
    policy = RetryPolicy(max_retries=4, base_delay_seconds=0.25, backoff_multiplier=3.0)

    with pytest.raises(ConnectionError):
        await with_retry(operation, policy, sleep=sleep)

    assert sleep.delays == [0.25, 0.75, 2.25, 6.75]


@pytest.mark.asyncio
async def test_zero_retries_is_single_attempt() -> None:
    sleep = FakeSleep()
    operation = FlakyOperation(failures=1)

    with pytest.raises(ConnectionError):
        await with_retry(operation, RetryPolicy(max_retries=0), sleep=sleep)

    assert operation.calls == 1
    assert sleep.delays == []


@pytest.mark.asyncio
async def test_all_errors_retried_without_classifier() -> None:
    sleep = FakeSleep()
    operation = FlakyOperation(failures=1, error=ValueError("looks permanent"))

    result = await with_retry(operation, RetryPolicy(max_retries=1), sleep=sleep)

    assert result == "ok"
    assert operation.calls == 2


@pytest.mark.asyncio
async def test_classifier_can_stop_retrying() -> None:
    sleep = FakeSleep()
    operation = FlakyOperation(failures=100, error=ValueError("bad request"))

    with pytest.raises(ValueError):
        await with_retry(
            operation,
            RetryPolicy(max_retries=3),
            should_retry=lambda exc: not isinstance(exc, ValueError),
            sleep=sleep,
        )

    assert operation.calls == 1
    assert sleep.delays == []


@pytest.mark.asyncio
async def test_execute_with_retry_returns_outcome() -> None:
    sleep = FakeSleep()
    operation = FlakyOperation(failures=1, value="v")

    outcome = await execute_with_retry(operation, RetryPolicy(max_retries=2), sleep=sleep)

    assert isinstance(outcome, RetryOutcome)
    assert outcome.succeeded is True
    assert outcome.value == "v"
    assert outcome.attempts == 2
    assert outcome.delays == [1.0]


@pytest.mark.asyncio
async def test_execute_with_retry_failure_outcome_keeps_last_error() -> None:
    sleep = FakeSleep()
    errors = [ConnectionError("first"), TimeoutError("last")]

    async def _operation() -> None:
        raise errors.pop(0)

    outcome = await execute_with_retry(_operation, RetryPolicy(max_retries=1), sleep=sleep)

    assert outcome.succeeded is False
    assert isinstance(outcome.error, TimeoutError)
    assert outcome.attempts == 2
    with pytest.raises(TimeoutError):
        outcome.unwrap()


@pytest.mark.asyncio
async def test_operation_reexecuted_each_attempt() -> None:
    sleep = FakeSleep()
    results: list[int] = []

    async def _operation() -> int:
        results.append(len(results))
        if len(results) < 3:
            raise ConnectionError("retry me")
        return results[-1]

    assert await with_retry(_operation, RetryPolicy(max_retries=5), sleep=sleep) == 2
    assert results == [0, 1, 2]
