"""Auth application services."""

from .future_bridge import CallFuture, FutureBridge
from .auth_client import AuthClient

__all__ = [
    "CallFuture",
    "FutureBridge",
    "AuthClient",
]
