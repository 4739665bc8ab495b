"""Domain responses returned by the auth client.

One frozen dataclass per operation. Every response carries the
``ResponseHeader`` of the etcd member that served the request.
"""

from dataclasses import dataclass, field
from typing import Tuple

from ..value_objects import ByteSequence
from .permission import Permission


@dataclass(frozen=True)
class ResponseHeader:
    """Cluster metadata attached to every etcd response."""

    cluster_id: int = 0
    member_id: int = 0
    revision: int = 0
    raft_term: int = 0


@dataclass(frozen=True)
class AuthResponse:
    """Base for auth responses."""

    header: ResponseHeader = field(default_factory=ResponseHeader)


@dataclass(frozen=True)
class AuthEnableResponse(AuthResponse):
    pass


@dataclass(frozen=True)
class AuthDisableResponse(AuthResponse):
    pass


@dataclass(frozen=True)
class AuthenticateResponse(AuthResponse):
    """Carries the simple token issued for the authenticated user."""

    token: str = ""

    def __repr__(self) -> str:
        return f"AuthenticateResponse(header={self.header!r}, token='***')"


@dataclass(frozen=True)
class AuthUserAddResponse(AuthResponse):
    pass


@dataclass(frozen=True)
class AuthUserDeleteResponse(AuthResponse):
    pass


@dataclass(frozen=True)
class AuthUserChangePasswordResponse(AuthResponse):
    pass


@dataclass(frozen=True)
class AuthUserGetResponse(AuthResponse):
    """Roles granted to the requested user."""

    roles: Tuple[ByteSequence, ...] = ()


@dataclass(frozen=True)
class AuthUserListResponse(AuthResponse):
    users: Tuple[ByteSequence, ...] = ()


@dataclass(frozen=True)
class AuthUserGrantRoleResponse(AuthResponse):
    pass


@dataclass(frozen=True)
class AuthUserRevokeRoleResponse(AuthResponse):
    pass


@dataclass(frozen=True)
class AuthRoleAddResponse(AuthResponse):
    pass


@dataclass(frozen=True)
class AuthRoleGrantPermissionResponse(AuthResponse):
    pass


@dataclass(frozen=True)
class AuthRoleGetResponse(AuthResponse):
    """Key-range permissions held by the requested role."""

    permissions: Tuple[Permission, ...] = ()


@dataclass(frozen=True)
class AuthRoleListResponse(AuthResponse):
    roles: Tuple[ByteSequence, ...] = ()


@dataclass(frozen=True)
class AuthRoleRevokePermissionResponse(AuthResponse):
    pass


@dataclass(frozen=True)
class AuthRoleDeleteResponse(AuthResponse):
    pass
