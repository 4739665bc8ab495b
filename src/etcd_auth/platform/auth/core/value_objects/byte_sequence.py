"""Byte sequence value object used for names, secrets and keys."""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class ByteSequence:
    """Immutable sequence of bytes.

    Identifies users and roles, carries passwords, and bounds key ranges.
    Empty sequences are valid; an empty ``range_end`` means a single key.
    """

    value: bytes = b""

    def __post_init__(self) -> None:
        """Normalize buffer types to ``bytes``."""
        if isinstance(self.value, (bytearray, memoryview)):
            object.__setattr__(self, 'value', bytes(self.value))

        if not isinstance(self.value, bytes):
            raise TypeError(
                f"ByteSequence value must be bytes, got {type(self.value).__name__}"
            )

    @classmethod
    def from_string(cls, text: str, encoding: str = "utf-8") -> 'ByteSequence':
        """Create a byte sequence from text.

        Args:
            text: Text to encode
            encoding: Codec used for encoding

        Returns:
            ByteSequence holding the encoded text
        """
        if not isinstance(text, str):
            raise TypeError("ByteSequence.from_string expects a str")
        return cls(text.encode(encoding))

    @classmethod
    def of(cls, data: Union[str, bytes, bytearray, memoryview]) -> 'ByteSequence':
        """Create a byte sequence from text or any bytes-like buffer."""
        if isinstance(data, str):
            return cls.from_string(data)
        return cls(data)

    @classmethod
    def empty(cls) -> 'ByteSequence':
        return cls(b"")

    def to_string(self, encoding: str = "utf-8") -> str:
        """Decode the sequence as text."""
        return self.value.decode(encoding)

    @property
    def is_empty(self) -> bool:
        return not self.value

    def mask_for_logging(self) -> str:
        """Return masked value safe for logging."""
        if len(self.value) <= 4:
            return "***"
        text = self.value.decode("utf-8", errors="replace")
        return f"{text[:2]}...{text[-2:]}"

    def __bytes__(self) -> bytes:
        return self.value

    def __len__(self) -> int:
        return len(self.value)

    def __str__(self) -> str:
        return self.value.decode("utf-8", errors="replace")
