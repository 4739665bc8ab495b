"""Factories wiring settings, channel, stub and client."""

from .auth_client_factory import AuthClientFactory

__all__ = [
    "AuthClientFactory",
]
