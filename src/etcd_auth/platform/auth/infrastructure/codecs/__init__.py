"""Codecs between domain values and wire values."""

from .byte_sequence_codec import to_wire_bytes, from_wire_bytes
from .permission_kind_translator import to_wire_permission_type, from_wire_permission_type

__all__ = [
    "to_wire_bytes",
    "from_wire_bytes",
    "to_wire_permission_type",
    "from_wire_permission_type",
]
