"""etcd-auth - asynchronous etcd v3 auth management client.

Enable or disable cluster authentication and manage users, roles and
key-range permissions. Every operation returns an ``asyncio.Future``
immediately; the network exchange happens on gRPC's threads.
"""

from .__version__ import __version__

from .config import EtcdAuthSettings, get_settings, setup_logging

from .core.exceptions import (
    EtcdAuthError,
    ConfigurationError,
    create_error_response,
)

from .platform.auth import (
    AuthClient,
    AuthClientFactory,
    ByteSequence,
    GrpcAuthStub,
    InvalidArgument,
    Permission,
    PermissionKind,
    RpcFailure,
    TranslationFailure,
)

__all__ = [
    "__version__",
    "EtcdAuthSettings",
    "get_settings",
    "setup_logging",
    "EtcdAuthError",
    "ConfigurationError",
    "create_error_response",
    "AuthClient",
    "AuthClientFactory",
    "ByteSequence",
    "GrpcAuthStub",
    "InvalidArgument",
    "Permission",
    "PermissionKind",
    "RpcFailure",
    "TranslationFailure",
]
