"""Conversion between ByteSequence and wire byte strings."""

from ...core.value_objects import ByteSequence


def to_wire_bytes(sequence: ByteSequence) -> bytes:
    """Convert a byte sequence to the wire ``bytes`` type."""
    return bytes(sequence.value)


def from_wire_bytes(data: bytes) -> ByteSequence:
    """Convert a wire ``bytes`` value to a byte sequence."""
    return ByteSequence(bytes(data))
