"""Pytest configuration and fixtures shared across all test modules.

Environment variables are set before any import of gateway.core.config so
that a developer's local .env files or shell settings cannot leak in.
"""

import os

# CRITICAL: Set these before any imports that might load settings
os.environ["APP_ENV"] = "testing"
os.environ["PROXY_MAX_ALLOWED_REQUESTS"] = "2"
os.environ["PROXY_CACHE_ENABLED"] = "false"
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest

from gateway.adapters.rate_limit.in_memory import InMemoryRouteRateLimiter
from gateway.servers.application import Application
from gateway.servers.forwarding import ForwardingServer


@pytest.fixture
def application() -> Application:
    return Application()


@pytest.fixture
def limiter() -> InMemoryRouteRateLimiter:
    return InMemoryRouteRateLimiter(max_allowed_requests=2)


@pytest.fixture
def server(application: Application, limiter: InMemoryRouteRateLimiter) -> ForwardingServer:
    return ForwardingServer(application=application, rate_limiter=limiter)
