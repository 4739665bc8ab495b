"""Translation between PermissionKind and the wire permission type."""

from typing import Any, Dict

from ...core.value_objects import PermissionKind
from ..wire import WirePermissionType

_TO_WIRE: Dict[PermissionKind, WirePermissionType] = {
    PermissionKind.READ: WirePermissionType.READ,
    PermissionKind.WRITE: WirePermissionType.WRITE,
    PermissionKind.READWRITE: WirePermissionType.READWRITE,
}

_FROM_WIRE: Dict[int, PermissionKind] = {
    int(wire): kind for kind, wire in _TO_WIRE.items()
}


def to_wire_permission_type(kind: Any) -> WirePermissionType:
    """Map a permission kind to its wire value.

    Kinds without a wire counterpart map to ``UNRECOGNIZED`` instead of
    raising, so newer domain values degrade on older protocol versions.
    """
    if isinstance(kind, PermissionKind):
        return _TO_WIRE.get(kind, WirePermissionType.UNRECOGNIZED)
    return WirePermissionType.UNRECOGNIZED


def from_wire_permission_type(value: int) -> PermissionKind:
    """Map a wire permission type to a permission kind.

    Raises:
        ValueError: If the wire value is unknown to this client
    """
    try:
        return _FROM_WIRE[int(value)]
    except KeyError:
        raise ValueError(f"Unknown wire permission type: {value}") from None
