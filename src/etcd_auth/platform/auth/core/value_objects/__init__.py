"""Auth value objects.

Immutable values exchanged with callers of the auth client.
"""

from .byte_sequence import ByteSequence
from .permission_kind import PermissionKind

__all__ = [
    "ByteSequence",
    "PermissionKind",
]
