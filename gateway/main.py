"""Demo entry point: drive a fixed request sequence through the proxy."""

from __future__ import annotations

import sys
from typing import TextIO

from gateway.core.config import settings
from gateway.core.logging import configure_logging
from gateway.servers.base import AbstractServer
from gateway.servers.forwarding import ForwardingServer

APP_STATUS = "/app/status"
CREATE_USER = "/create/user"

DEMO_REQUESTS: tuple[tuple[str, str], ...] = (
    (APP_STATUS, "GET"),
    (APP_STATUS, "GET"),
    (APP_STATUS, "GET"),
    (CREATE_USER, "POST"),
    (CREATE_USER, "GET"),
)


def run_demo(server: AbstractServer, stream: TextIO | None = None) -> list[tuple[int, str]]:
    """Send the demo requests to ``server`` and print each ``(status, body)``.

    Returns:
        The responses as tuples, in request order.
    """
    if stream is None:
        stream = sys.stdout
    results = []
    for url, method in DEMO_REQUESTS:
        response = server.handle_request(url, method)
        results.append(response.as_tuple())
        print(response.as_tuple(), file=stream)
    return results


def main() -> None:
    configure_logging(settings.log)
    run_demo(ForwardingServer.from_settings(settings))


if __name__ == "__main__":
    main()
