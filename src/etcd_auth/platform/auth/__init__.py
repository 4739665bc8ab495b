"""etcd Auth platform module.

Client-side management of cluster authentication, users, roles and
key-range permissions.

Usage:
    from etcd_auth.platform.auth import AuthClientFactory, ByteSequence

    client = AuthClientFactory().create_client()
    await client.user_add(ByteSequence.from_string("alice"), ByteSequence.from_string("s3cret"))
"""

from .core import (
    ByteSequence,
    PermissionKind,
    Permission,
    ResponseHeader,
    InvalidArgument,
    RpcFailure,
    TranslationFailure,
    PendingCall,
    AuthStub,
)
from .core.entities import *  # noqa: F401,F403
from .application.services import AuthClient, CallFuture, FutureBridge
from .infrastructure.adapters import GrpcAuthStub
from .infrastructure.factories import AuthClientFactory

__all__ = [
    "ByteSequence",
    "PermissionKind",
    "Permission",
    "ResponseHeader",
    "InvalidArgument",
    "RpcFailure",
    "TranslationFailure",
    "PendingCall",
    "AuthStub",
    "AuthClient",
    "CallFuture",
    "FutureBridge",
    "GrpcAuthStub",
    "AuthClientFactory",
]
