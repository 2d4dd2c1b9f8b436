"""Exceptions raised for invalid requests or configuration.

Quota exhaustion and unknown routes are not errors: the servers answer them
with 403 and 404 responses.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypedDict


class ErrorDetails(TypedDict, total=False):
    url: str


@dataclass
class AppError(Exception):
    """Base error carrying a stable ``code`` next to the message."""

    code: str
    message: str
    details: ErrorDetails | None = None

    def __post_init__(self) -> None:
        super().__init__(self.message)


class ValidationAppError(AppError):
    """Raised when a url, method or route is empty."""
