"""Response cache the proxy consults before calling the application."""

from __future__ import annotations

import logging
import time
from collections import OrderedDict
from typing import TYPE_CHECKING, Callable, NamedTuple

if TYPE_CHECKING:
    from gateway.servers.base import Response

logger = logging.getLogger(__name__)


def cache_key(url: str, method: str) -> str:
    return f"{method} {url}"


class _Entry(NamedTuple):
    response: Response
    expires_at: float


class ResponseCache:
    """Keeps application responses per ``(method, url)`` for ``ttl_seconds``.

    When more than ``max_entries`` responses are stored, the one read or
    written longest ago is dropped.
    """

    def __init__(
        self,
        *,
        ttl_seconds: int = 60,
        max_entries: int = 128,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if ttl_seconds < 1:
            raise ValueError("ttl_seconds must be >= 1")
        if max_entries < 1:
            raise ValueError("max_entries must be >= 1")

        self._ttl = ttl_seconds
        self._max_entries = max_entries
        self._clock = clock
        self._entries: OrderedDict[str, _Entry] = OrderedDict()
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, url: str, method: str) -> Response | None:
        key = cache_key(url, method)
        entry = self._entries.get(key)
        if entry is not None and entry.expires_at <= self._clock():
            del self._entries[key]
            entry = None

        if entry is None:
            self.misses += 1
            logger.debug("cache.miss", extra={"cache_key": key})
            return None

        self.hits += 1
        self._entries.move_to_end(key)
        logger.debug("cache.hit", extra={"cache_key": key})
        return entry.response

    def put(self, url: str, method: str, response: Response) -> None:
        key = cache_key(url, method)
        self._entries[key] = _Entry(response, self._clock() + self._ttl)
        self._entries.move_to_end(key)
        while len(self._entries) > self._max_entries:
            evicted, _ = self._entries.popitem(last=False)
            logger.debug("cache.evicted", extra={"cache_key": evicted})
