"""In-memory per-route request quota.

Notes:
- Counters live as long as the limiter instance; there is no window and no reset.
- Thread-safe: uses a lock around shared state.
"""

from __future__ import annotations

import logging
import threading

from gateway.adapters.rate_limit.base import AbstractRateLimiter, RateLimitResult
from gateway.core.errors import ValidationAppError

logger = logging.getLogger(__name__)


class InMemoryRouteRateLimiter(AbstractRateLimiter):
    """Rate limiter allowing a fixed number of requests per route.

    The counter for a route is created on its first request with value 1 and
    bumped on every allowed request. Once it is greater than
    ``max_allowed_requests`` every further request is rejected and the counter
    stays where it is.

    Example:
        >>> limiter = InMemoryRouteRateLimiter(max_allowed_requests=2)
        >>> [limiter.allow("/app/status") for _ in range(3)]
        [True, True, False]
    """

    def __init__(self, *, max_allowed_requests: int = 2) -> None:
        """Initialize the limiter.

        Args:
            max_allowed_requests: Requests allowed per route.

        Raises:
            ValueError: If max_allowed_requests is negative.
        """
        if max_allowed_requests < 0:
            raise ValueError("max_allowed_requests must be >= 0")

        self._max_allowed = max_allowed_requests
        self._lock = threading.RLock()
        self._counters: dict[str, int] = {}

    @property
    def max_allowed_requests(self) -> int:
        return self._max_allowed

    def count(self, route: str) -> int:
        """Return how many requests were allowed for ``route`` so far."""
        with self._lock:
            return max(0, self._counters.get(route, 1) - 1)

    def consume(self, route: str) -> RateLimitResult:
        """Record a request for ``route``.

        Raises:
            ValidationAppError: If route is empty.
        """
        if not route:
            raise ValidationAppError(
                code="empty_route",
                message="route must be a non-empty string",
            )

        with self._lock:
            rate = self._counters.setdefault(route, 1)

            if rate > self._max_allowed:
                logger.debug(
                    "rate_limit.blocked",
                    extra={"route": route, "limit": self._max_allowed},
                )
                return RateLimitResult(allowed=False, limit=self._max_allowed, remaining=0)

            rate += 1
            self._counters[route] = rate

        return RateLimitResult(
            allowed=True,
            limit=self._max_allowed,
            remaining=max(0, self._max_allowed + 1 - rate),
        )
