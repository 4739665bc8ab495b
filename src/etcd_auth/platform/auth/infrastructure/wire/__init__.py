"""etcd v3 Auth wire schema."""

from . import auth_pb
from .auth_pb import AUTH_METHODS, AUTH_SERVICE, AuthMethod, WirePermissionType

__all__ = [
    "auth_pb",
    "AUTH_METHODS",
    "AUTH_SERVICE",
    "AuthMethod",
    "WirePermissionType",
]
