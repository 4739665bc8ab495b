"""Auth core: value objects, entities, exceptions and protocols."""

from .value_objects import ByteSequence, PermissionKind
from .entities import Permission, ResponseHeader
from .exceptions import InvalidArgument, RpcFailure, TranslationFailure
from .protocols import PendingCall, AuthStub

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
]
