"""
Rate-limit bookkeeping for Helix.

Helix reports the caller's token bucket on every response:

- Ratelimit-Limit: bucket size (points per minute)
- Ratelimit-Remaining: points left in the current window
- Ratelimit-Reset: UNIX timestamp at which the bucket refills

RateLimiter keeps the latest snapshot of those headers, shared by every
request issued through one client. The snapshot is advisory: it only decides
whether the next request should wait for the bucket to refill.
"""

import asyncio
import logging
import threading
import time
from dataclasses import dataclass
from typing import Awaitable
from typing import Callable
from typing import Mapping
from typing import Optional

logger = logging.getLogger("twitch_sdk.ratelimit")

LIMIT_HEADER = "Ratelimit-Limit"
REMAINING_HEADER = "Ratelimit-Remaining"
RESET_HEADER = "Ratelimit-Reset"
RETRY_AFTER_HEADER = "Retry-After"

# Wait used on 429 when upstream gives no hint at all
DEFAULT_RETRY_DELAY = 1.0


def _parse_number(raw: Optional[str]) -> Optional[float]:
    if raw is None:
        return None
    try:
        return float(raw.strip())
    except ValueError:
        return None


@dataclass(frozen=True)
class RateLimitState:
    limit: Optional[int] = None
    remaining: Optional[int] = None
    reset: Optional[float] = None

    @classmethod
    def from_headers(cls, headers: Mapping[str, str]) -> Optional["RateLimitState"]:
        """Snapshot from response headers, or None when Helix sent none."""
        limit = _parse_number(headers.get(LIMIT_HEADER))
        remaining = _parse_number(headers.get(REMAINING_HEADER))
        reset = _parse_number(headers.get(RESET_HEADER))
        if limit is None and remaining is None and reset is None:
            return None
        return cls(
            limit=int(limit) if limit is not None else None,
            remaining=int(remaining) if remaining is not None else None,
            reset=reset,
        )

    def is_exhausted(self, now: float) -> bool:
        return (
            self.remaining is not None
            and self.remaining <= 0
            and self.reset is not None
            and self.reset > now
        )

    def seconds_until_reset(self, now: float) -> float:
        if self.reset is None:
            return 0.0
        return max(self.reset - now, 0.0)


class RateLimiter:
    """
    Thread-safe holder of the shared RateLimitState.

    Updates are read-modify-write under a lock: when responses from the same
    window arrive out of order, the lowest `remaining` wins, so a late, stale
    response cannot make the bucket look fuller than it is.

    Args:
        max_wait (float): Upper bound for any single wait, in seconds.
        clock (Callable[[], float]): Source of UNIX time (patched in tests).
        sleep (Callable[[float], Awaitable]): Async sleep (patched in tests).
    """

    def __init__(
        self,
        max_wait: float = 60.0,
        clock: Callable[[], float] = time.time,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.max_wait = max_wait
        self._clock = clock
        self._sleep = sleep
        self._lock = threading.Lock()
        self._state = RateLimitState()

    @property
    def state(self) -> RateLimitState:
        with self._lock:
            return self._state

    def update(self, headers: Mapping[str, str]) -> RateLimitState:
        incoming = RateLimitState.from_headers(headers)
        with self._lock:
            if incoming is None:
                return self._state
            current = self._state
            if (
                incoming.reset is not None
                and current.reset is not None
                and incoming.reset < current.reset
            ):
                # Response from an older window; keep the newer snapshot
                return current
            if (
                incoming.reset == current.reset
                and incoming.remaining is not None
                and current.remaining is not None
            ):
                incoming = RateLimitState(
                    limit=incoming.limit,
                    remaining=min(incoming.remaining, current.remaining),
                    reset=incoming.reset,
                )
            self._state = incoming
            return incoming

    def _bounded(self, delay: float) -> float:
        return min(max(delay, 0.0), self.max_wait)

    async def wait_if_exhausted(self) -> float:
        """Sleep until the bucket refills if the last snapshot says it is empty."""
        state = self.state
        now = self._clock()
        if not state.is_exhausted(now):
            return 0.0
        delay = self._bounded(state.seconds_until_reset(now))
        logger.warning(f"Rate limit exhausted, waiting {delay:.2f}s for bucket reset")
        await self._sleep(delay)
        return delay

    def retry_delay(self, headers: Mapping[str, str]) -> float:
        """How long to wait before retrying a 429 response."""
        retry_after = _parse_number(headers.get(RETRY_AFTER_HEADER))
        if retry_after is not None:
            return self._bounded(retry_after)
        reset = _parse_number(headers.get(RESET_HEADER))
        if reset is not None:
            return self._bounded(reset - self._clock())
        return self._bounded(DEFAULT_RETRY_DELAY)

    async def sleep(self, delay: float) -> None:
        await self._sleep(delay)
