"""Auth protocol contracts."""

from .pending_call import PendingCall
from .auth_stub import AuthStub

__all__ = [
    "PendingCall",
    "AuthStub",
]
