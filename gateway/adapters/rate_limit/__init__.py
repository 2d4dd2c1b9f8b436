"""Rate limiting adapters.

The forwarding server depends on the abstract limiter only, so the in-memory
per-route counter can be swapped for another store without touching it.
"""

from gateway.adapters.rate_limit.base import AbstractRateLimiter, RateLimitResult
from gateway.adapters.rate_limit.in_memory import InMemoryRouteRateLimiter

__all__ = ["AbstractRateLimiter", "InMemoryRouteRateLimiter", "RateLimitResult"]
