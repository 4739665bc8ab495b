"""Access level attached to a key-range permission."""

from enum import Enum


class PermissionKind(Enum):
    """Permission kind granted to a role over a key range."""

    READ = "read"
    WRITE = "write"
    READWRITE = "readwrite"
