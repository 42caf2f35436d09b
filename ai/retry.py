"""
RETRY ORCHESTRATOR
==================

Runs an async operation with bounded exponential backoff, adapting the
retry budget and delays to the session's network status, and races the
whole sequence against a timeout.

Example:
  reply = await orchestrator.with_retry(lambda: client.call(text))
"""

import asyncio
import logging
import random
from typing import Awaitable, Callable, TypeVar

import config
from domain.constants import (
    ErrorKind,
    MAX_BACKOFF_SECONDS,
    MAX_JITTER_SECONDS,
    NETWORK_OFFLINE,
    NETWORK_SLOW,
    NetworkStatus,
    SLOW_NETWORK_DELAY_FACTOR,
    SLOW_NETWORK_EXTRA_RETRIES,
    SLOW_NETWORK_RETRY_CAP,
)
from domain.errors import AIServiceException, classify_error, should_retry_error
from network.monitor import NetworkMonitor
from network.rate_limiter import RateLimiter

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RetryOrchestrator:
    """Retry policy shared by every AI call of one session"""

    def __init__(
        self,
        network_monitor: NetworkMonitor,
        rate_limiter: RateLimiter | None = None,
        max_retries: int | None = None,
        base_delay: float | None = None,
        timeout: float | None = None,
        max_jitter: float = MAX_JITTER_SECONDS,
        max_delay: float = MAX_BACKOFF_SECONDS,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self.network_monitor = network_monitor
        self.rate_limiter = rate_limiter
        self.max_retries = config.AI_MAX_RETRIES if max_retries is None else max_retries
        self.base_delay = config.AI_RETRY_DELAY if base_delay is None else base_delay
        self.timeout = config.AI_TIMEOUT if timeout is None else timeout
        self.max_jitter = max_jitter
        self.max_delay = max_delay
        self._sleep = sleep

    @staticmethod
    def adapted_retries(max_retries: int, status: NetworkStatus) -> int:
        """Retry budget for the current network status"""
        if status == NETWORK_OFFLINE:
            return 0
        if status == NETWORK_SLOW:
            return min(max_retries + SLOW_NETWORK_EXTRA_RETRIES, SLOW_NETWORK_RETRY_CAP)
        return max_retries

    def backoff_delay(self, attempt: int, base_delay: float, status: NetworkStatus) -> float:
        """base * 2^attempt plus jitter, stretched on slow networks, capped"""
        delay = base_delay * (2 ** attempt) + random.uniform(0, self.max_jitter)
        if status == NETWORK_SLOW:
            delay *= SLOW_NETWORK_DELAY_FACTOR
        return min(delay, self.max_delay)

    def timeout_for(self, status: NetworkStatus) -> float:
        return self.timeout * 2 if status == NETWORK_SLOW else self.timeout

    async def with_retry(
        self,
        operation: Callable[[], Awaitable[T]],
        max_retries: int | None = None,
        base_delay: float | None = None,
    ) -> T:
        """
        Execute operation(), retrying transient failures.

        Raises the last failure once the budget is spent, a non-retryable
        error occurs, or the network goes offline. A timeout of the whole
        sequence surfaces as a TIMEOUT_ERROR AIServiceException.
        """
        max_retries = self.max_retries if max_retries is None else max_retries
        base_delay = self.base_delay if base_delay is None else base_delay
        status = self.network_monitor.get_status()

        if status == NETWORK_OFFLINE:
            raise AIServiceException(
                ErrorKind.NETWORK_ERROR,
                "Network error - you appear to be offline",
            )

        retries = self.adapted_retries(max_retries, status)
        try:
            return await asyncio.wait_for(
                self._attempts(operation, retries, base_delay),
                timeout=self.timeout_for(status),
            )
        except asyncio.TimeoutError as e:
            raise AIServiceException(ErrorKind.TIMEOUT_ERROR, "Request timeout") from e

    async def _attempts(
        self,
        operation: Callable[[], Awaitable[T]],
        retries: int,
        base_delay: float,
    ) -> T:
        last_error: Exception | None = None

        for attempt in range(retries + 1):
            try:
                result = await operation()
                if self.rate_limiter is not None:
                    self.rate_limiter.record_success()
                return result
            except Exception as e:
                last_error = e
                if self.rate_limiter is not None:
                    self.rate_limiter.record_failure()

                if attempt == retries:
                    break

                kind = classify_error(e)
                if not should_retry_error(kind):
                    logger.info("Not retrying %s: %s", kind.value, e)
                    break

                current_status = await self.network_monitor.probe()
                if current_status == NETWORK_OFFLINE:
                    logger.warning("Network went offline, abandoning retries")
                    break

                delay = self.backoff_delay(attempt, base_delay, current_status)
                logger.warning(
                    "Attempt %s/%s failed (%s). Retrying in %.2fs: %s",
                    attempt + 1,
                    retries + 1,
                    kind.value,
                    delay,
                    e,
                )
                await self._sleep(delay)

        assert last_error is not None
        raise last_error
