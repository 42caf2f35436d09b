"""Connectivity tracking for a chat session"""
import logging
import time
from typing import Callable

import httpx

from domain.constants import (
    NETWORK_OFFLINE,
    NETWORK_ONLINE,
    NETWORK_SLOW,
    NetworkStatus,
    PROBE_INTERVAL_SECONDS,
    SLOW_RESPONSE_THRESHOLD_SECONDS,
)

logger = logging.getLogger(__name__)

StatusListener = Callable[[NetworkStatus], None]


class NetworkMonitor:
    """Tracks online/offline/slow status

    ``offline`` only ever comes from the connectivity signal (set_online).
    A failed probe means the probe asset may be unreachable while the network
    is fine, so it downgrades to ``slow`` and never to ``offline``.
    """

    def __init__(
        self,
        probe_url: str | None = None,
        http_client: httpx.AsyncClient | None = None,
        slow_threshold: float = SLOW_RESPONSE_THRESHOLD_SECONDS,
        probe_interval: float = PROBE_INTERVAL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.probe_url = probe_url
        self._http_client = http_client
        self.slow_threshold = slow_threshold
        self.probe_interval = probe_interval
        self._clock = clock

        self.is_online = True
        self.is_slow = False
        self._last_probe: float | None = None
        self._listeners: list[StatusListener] = []

    def get_status(self) -> NetworkStatus:
        if not self.is_online:
            return NETWORK_OFFLINE
        return NETWORK_SLOW if self.is_slow else NETWORK_ONLINE

    def subscribe(self, listener: StatusListener) -> Callable[[], None]:
        """Register a status-change listener; returns an unsubscribe callable"""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, previous: NetworkStatus) -> None:
        current = self.get_status()
        if current == previous:
            return
        logger.info("Network status changed: %s -> %s", previous, current)
        for listener in list(self._listeners):
            try:
                listener(current)
            except Exception:
                logger.exception("Network status listener failed")

    def set_online(self, online: bool) -> None:
        """Apply a connectivity event from the client"""
        previous = self.get_status()
        self.is_online = online
        # Coming back online clears any stale slow verdict
        self.is_slow = False
        self._notify(previous)

    async def probe(self) -> NetworkStatus:
        """Measure a round trip to the probe asset, at most once per interval"""
        if not self.is_online:
            return NETWORK_OFFLINE

        if not self.probe_url:
            return self.get_status()

        now = self._clock()
        if self._last_probe is not None and now - self._last_probe < self.probe_interval:
            return self.get_status()
        self._last_probe = now

        previous = self.get_status()
        try:
            started = self._clock()
            response = await self._head(self.probe_url)
            elapsed = self._clock() - started
            if response.is_success:
                self.is_slow = elapsed > self.slow_threshold
        except httpx.HTTPError as e:
            logger.warning("Network probe to %s failed: %s", self.probe_url, e)
            self.is_slow = True

        self._notify(previous)
        return self.get_status()

    async def _head(self, url: str) -> httpx.Response:
        headers = {"Cache-Control": "no-cache"}
        if self._http_client is not None:
            return await self._http_client.head(url, headers=headers)
        async with httpx.AsyncClient(timeout=10.0) as client:
            return await client.head(url, headers=headers)
