"""Sliding-window request gate with a failure-driven cooldown"""
import time
from typing import Callable

from domain.constants import (
    FAILURE_COOLDOWN_SECONDS,
    FAILURE_THRESHOLD,
    RATE_LIMIT_MAX_REQUESTS,
    RATE_LIMIT_WINDOW_SECONDS,
)


class RateLimiter:
    """In-memory sliding window limiter owned by a single chat session"""

    def __init__(
        self,
        max_requests: int = RATE_LIMIT_MAX_REQUESTS,
        window_seconds: float = RATE_LIMIT_WINDOW_SECONDS,
        failure_threshold: int = FAILURE_THRESHOLD,
        cooldown_seconds: float = FAILURE_COOLDOWN_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """
        Initialize rate limiter with configurable limits.

        Args:
            max_requests: Requests allowed inside one window
            window_seconds: Length of the sliding window in seconds
            failure_threshold: Failures tolerated before the cooldown kicks in
            cooldown_seconds: Lockout measured from the last recorded failure
            clock: Monotonic time source, injectable for tests
        """
        self.MAX_REQUESTS = max_requests
        self.WINDOW_SECONDS = window_seconds
        self.FAILURE_THRESHOLD = failure_threshold
        self.COOLDOWN_SECONDS = cooldown_seconds
        self._clock = clock

        self.timestamps: list[float] = []
        self.failure_count = 0
        self.last_failure_time: float | None = None

    def _in_cooldown(self, now: float) -> bool:
        return (
            self.failure_count > self.FAILURE_THRESHOLD
            and self.last_failure_time is not None
            and now - self.last_failure_time < self.COOLDOWN_SECONDS
        )

    def _prune(self, now: float) -> None:
        cutoff = now - self.WINDOW_SECONDS
        self.timestamps = [ts for ts in self.timestamps if ts > cutoff]

    def can_make_request(self) -> bool:
        """
        Check whether a request may go out now, and record it if so.

        The failure cooldown is checked first and refuses regardless of
        window occupancy.
        """
        now = self._clock()

        if self._in_cooldown(now):
            return False

        self._prune(now)

        if len(self.timestamps) >= self.MAX_REQUESTS:
            return False

        self.timestamps.append(now)
        return True

    def record_failure(self) -> None:
        self.failure_count += 1
        self.last_failure_time = self._clock()

    def record_success(self) -> None:
        """Forgive one failure; a single success does not wipe a failure streak"""
        self.failure_count = max(0, self.failure_count - 1)

    def time_until_reset(self) -> float:
        """Seconds until a request would be allowed again (0 when allowed now)"""
        now = self._clock()

        if self._in_cooldown(now):
            return self.COOLDOWN_SECONDS - (now - self.last_failure_time)

        self._prune(now)
        if len(self.timestamps) < self.MAX_REQUESTS:
            return 0.0

        oldest = min(self.timestamps)
        return max(0.0, self.WINDOW_SECONDS - (now - oldest))

    def get_stats(self) -> dict:
        """Current limiter state (for logging and monitoring)"""
        now = self._clock()
        self._prune(now)
        return {
            "requests_in_window": len(self.timestamps),
            "limit": self.MAX_REQUESTS,
            "failure_count": self.failure_count,
            "in_cooldown": self._in_cooldown(now),
        }
