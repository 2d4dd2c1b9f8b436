"""Rate limiter interfaces."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class RateLimitResult:
    """Result of a rate limit check/consume operation.

    Attributes:
        allowed: Whether the request is allowed to proceed.
        limit: Max requests per route.
        remaining: Requests still allowed for the route (0 when blocked).
    """

    allowed: bool
    limit: int
    remaining: int


class AbstractRateLimiter(ABC):
    """Interface for per-route rate limiters."""

    @abstractmethod
    def consume(self, route: str) -> RateLimitResult:
        """Record a request for ``route`` and decide whether it may proceed.

        Args:
            route: URL path used as the limiter key.

        Returns:
            RateLimitResult describing whether it was allowed.
        """
        raise NotImplementedError

    def allow(self, route: str) -> bool:
        """Shortcut for ``consume(route).allowed``."""
        return self.consume(route).allowed
