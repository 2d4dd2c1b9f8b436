"""Server interface shared by the application and the forwarding proxy."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import astuple, dataclass
from typing import Iterator


@dataclass(frozen=True)
class Response:
    """Status code and body returned for a single request."""

    status: int
    body: str

    def __iter__(self) -> Iterator[int | str]:
        # Allows ``status, body = server.handle_request(...)``
        return iter(astuple(self))

    def as_tuple(self) -> tuple[int, str]:
        return (self.status, self.body)


class AbstractServer(ABC):
    """Anything that can answer ``(url, method)`` requests."""

    @abstractmethod
    def handle_request(self, url: str, method: str) -> Response:
        """Handle one request and return the response."""
        raise NotImplementedError
