"""Application server answering a fixed routing table."""

from __future__ import annotations

import logging
from typing import Mapping

from gateway.servers.base import AbstractServer, Response

logger = logging.getLogger(__name__)

DEFAULT_ROUTES: dict[tuple[str, str], Response] = {
    ("/app/status", "GET"): Response(200, "Ok"),
    ("/create/user", "POST"): Response(201, "User Created"),
}

NOT_FOUND = Response(404, "Not Ok")


class Application(AbstractServer):
    """Inner server the proxy forwards to.

    Matches ``(url, method)`` exactly; anything not in the table is a 404.
    """

    def __init__(self, routes: Mapping[tuple[str, str], Response] | None = None) -> None:
        self._routes = dict(DEFAULT_ROUTES if routes is None else routes)

    def handle_request(self, url: str, method: str) -> Response:
        response = self._routes.get((url, method), NOT_FOUND)
        logger.debug(
            "application.handled",
            extra={"url": url, "method": method, "status": response.status},
        )
        return response
