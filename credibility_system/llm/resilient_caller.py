"""Retry/timeout wrapper for external analyzer calls.

Every attempt runs under its own deadline. An attempt that overruns is
cancelled (its task receives CancelledError), so no request outlives its
deadline. Between attempts the caller waits min(base * 2**i, max) seconds.
Once all attempts are spent the last failure is re-raised unchanged.
"""

import asyncio
from typing import Any, Awaitable, Callable, Optional, TypeVar

from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception_type,
    stop_after_attempt,
)

from credibility_system.config.logging import get_logger
from credibility_system.config.settings import settings
from credibility_system.errors import UpstreamTimeout

T = TypeVar("T")


def backoff_delay(attempt_index: int, base: float = 1.0, maximum: float = 5.0) -> float:
    """
    Delay in seconds before the attempt after ``attempt_index`` (0-based).

    Args:
        attempt_index: Index of the attempt that just failed
        base: Delay after the first failure
        maximum: Ceiling for any single delay

    Returns:
        min(base * 2**attempt_index, maximum)
    """
    return min(base * (2 ** attempt_index), maximum)


class ResilientCaller:
    """
    Generic retry/timeout discipline for a zero-argument coroutine factory.

    Usage:
        caller = ResilientCaller(name="classifier")
        response = await caller.call(lambda: client.post(url, json=body))

    Attributes:
        name: Service name used in logs and timeout errors
        max_attempts: Attempts before the last failure is surfaced
        timeout: Per-attempt deadline in seconds
        backoff_base: First backoff delay in seconds
        backoff_max: Ceiling for a backoff delay in seconds
        sleep: Coroutine function awaited between attempts
    """

    def __init__(
        self,
        name: str = "external",
        max_attempts: Optional[int] = None,
        timeout: Optional[float] = None,
        backoff_base: Optional[float] = None,
        backoff_max: Optional[float] = None,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ):
        self.name = name
        self.max_attempts = max_attempts if max_attempts is not None else settings.max_attempts
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self.backoff_base = backoff_base if backoff_base is not None else settings.backoff_base
        self.backoff_max = backoff_max if backoff_max is not None else settings.backoff_max
        self.sleep = sleep
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.logger = get_logger(f"resilient_caller.{name}")

    async def call(
        self,
        operation: Callable[[], Awaitable[T]],
        max_attempts: Optional[int] = None,
        timeout: Optional[float] = None,
    ) -> T:
        """
        Run ``operation`` with per-attempt timeouts and exponential backoff.

        Args:
            operation: Factory returning a fresh awaitable for every attempt
            max_attempts: Override for this call only
            timeout: Override for this call only (seconds)

        Returns:
            The first successful result

        Raises:
            UpstreamTimeout: If the final attempt timed out
            Exception: Whatever the final attempt raised otherwise
        """
        attempts = max_attempts if max_attempts is not None else self.max_attempts
        deadline = timeout if timeout is not None else self.timeout

        retrying = AsyncRetrying(
            stop=stop_after_attempt(attempts),
            wait=self._wait,
            sleep=self.sleep,
            retry=retry_if_exception_type(Exception),
            before_sleep=self._log_retry,
            reraise=True,
        )

        async for attempt in retrying:
            with attempt:
                number = attempt.retry_state.attempt_number
                result = await self._attempt(operation, deadline, number)
                self._safe_log("debug", "attempt_succeeded", attempt=number)
                return result

        raise RuntimeError(f"Unexpected retry loop exit in {self.name}")

    async def _attempt(
        self,
        operation: Callable[[], Awaitable[T]],
        deadline: float,
        number: int,
    ) -> T:
        """Run one attempt; a deadline overrun cancels it and raises UpstreamTimeout."""
        self._safe_log("debug", "attempt_started", attempt=number, timeout=deadline)
        try:
            return await asyncio.wait_for(operation(), timeout=deadline)
        except asyncio.TimeoutError as e:
            self._safe_log(
                "warning",
                "attempt_failed",
                attempt=number,
                error=f"timed out after {deadline:g}s",
                error_type="UpstreamTimeout",
            )
            raise UpstreamTimeout(
                f"{self.name} did not respond within {deadline:g}s",
                service=self.name,
            ) from e
        except Exception as e:
            self._safe_log(
                "warning",
                "attempt_failed",
                attempt=number,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise

    def _wait(self, retry_state: RetryCallState) -> float:
        return backoff_delay(
            retry_state.attempt_number - 1, self.backoff_base, self.backoff_max
        )

    def _log_retry(self, retry_state: RetryCallState) -> None:
        exc = retry_state.outcome.exception() if retry_state.outcome else None
        delay = retry_state.next_action.sleep if retry_state.next_action else 0.0
        self._safe_log(
            "warning",
            "attempt_retrying",
            attempt=retry_state.attempt_number,
            delay=delay,
            error=str(exc) if exc else None,
        )

    def _safe_log(self, level: str, event: str, **fields: Any) -> None:
        # Log sink errors must not change the call's outcome
        try:
            getattr(self.logger, level)(f"{self.name}: {event}", **fields)
        except Exception:
            pass
