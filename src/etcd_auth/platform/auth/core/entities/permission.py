"""Permission granted to a role over a key range."""

from dataclasses import dataclass

from ..value_objects import ByteSequence, PermissionKind


@dataclass(frozen=True)
class Permission:
    """Access grant over ``[key, range_end)``.

    An empty ``range_end`` restricts the grant to ``key`` alone; the range
    end ``b"\\x00"`` covers every key greater than or equal to ``key``.
    """

    key: ByteSequence
    range_end: ByteSequence
    kind: PermissionKind

    @property
    def is_single_key(self) -> bool:
        return self.range_end.is_empty

    def __str__(self) -> str:
        if self.is_single_key:
            return f"Permission({self.kind.name} {self.key})"
        return f"Permission({self.kind.name} [{self.key}, {self.range_end}))"
