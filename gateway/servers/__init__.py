"""Server implementations: the application and the proxy in front of it."""

from gateway.servers.application import Application
from gateway.servers.base import AbstractServer, Response
from gateway.servers.forwarding import ForwardingServer

__all__ = ["AbstractServer", "Application", "ForwardingServer", "Response"]
