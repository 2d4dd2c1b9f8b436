"""Forwarding proxy that rate limits requests before they reach the application.

The proxy exposes the same interface as the server it wraps, so callers
cannot tell whether they talk to the proxy or to the application directly.
"""

from __future__ import annotations

import logging
import time

from gateway.adapters.rate_limit.base import AbstractRateLimiter
from gateway.adapters.rate_limit.in_memory import InMemoryRouteRateLimiter
from gateway.core.config import Settings
from gateway.core.errors import ValidationAppError
from gateway.core.logging import get_request_id, request_context
from gateway.servers.application import Application
from gateway.servers.base import AbstractServer, Response
from gateway.utils.response_cache import ResponseCache

logger = logging.getLogger(__name__)

NOT_ALLOWED = Response(403, "Not Allowed")

CACHEABLE_METHODS = frozenset({"GET"})


class ForwardingServer(AbstractServer):
    """Proxy in front of an application server.

    Args:
        application: Server requests are forwarded to.
        rate_limiter: Per-route quota consulted before forwarding. It is owned
            by this server and passed in by the caller.
        cache: Optional response cache for GET requests.
    """

    def __init__(
        self,
        application: AbstractServer,
        rate_limiter: AbstractRateLimiter,
        cache: ResponseCache | None = None,
    ) -> None:
        self._application = application
        self._rate_limiter = rate_limiter
        self._cache = cache

    @classmethod
    def from_settings(cls, settings: Settings) -> "ForwardingServer":
        """Build the default wiring: Application behind an in-memory limiter."""

        cfg = settings.proxy
        cache = None
        if cfg.cache_enabled:
            cache = ResponseCache(
                ttl_seconds=cfg.cache_ttl_seconds,
                max_entries=cfg.cache_max_entries,
            )
        return cls(
            application=Application(),
            rate_limiter=InMemoryRouteRateLimiter(
                max_allowed_requests=cfg.max_allowed_requests,
            ),
            cache=cache,
        )

    @property
    def rate_limiter(self) -> AbstractRateLimiter:
        return self._rate_limiter

    @property
    def cache(self) -> ResponseCache | None:
        return self._cache

    def handle_request(self, url: str, method: str) -> Response:
        """Rate limit ``url`` and forward the request when it is within quota.

        Returns:
            ``(403, "Not Allowed")`` once the route's quota is used up,
            otherwise the application's response unchanged.

        Raises:
            ValidationAppError: If url or method is empty.
        """
        if not url:
            raise ValidationAppError(code="empty_url", message="url must be a non-empty string")
        if not method:
            raise ValidationAppError(
                code="empty_method",
                message="method must be a non-empty string",
                details={"url": url},
            )

        with request_context(get_request_id()):
            start = time.perf_counter()
            result = self._rate_limiter.consume(url)

            if not result.allowed:
                logger.warning(
                    "rate_limit.exceeded",
                    extra={"url": url, "method": method, "limit": result.limit},
                )
                return NOT_ALLOWED

            logger.info(
                "rate_limit.allowed",
                extra={
                    "url": url,
                    "method": method,
                    "limit": result.limit,
                    "remaining": result.remaining,
                },
            )

            response = self._forward(url, method)
            logger.info(
                "proxy.forwarded",
                extra={
                    "url": url,
                    "method": method,
                    "status": response.status,
                    "duration_ms": round((time.perf_counter() - start) * 1000, 3),
                },
            )
            return response

    def _forward(self, url: str, method: str) -> Response:
        if self._cache is None or method not in CACHEABLE_METHODS:
            return self._application.handle_request(url, method)

        cached = self._cache.get(url, method)
        if cached is not None:
            return cached

        response = self._application.handle_request(url, method)
        self._cache.put(url, method, response)
        return response
