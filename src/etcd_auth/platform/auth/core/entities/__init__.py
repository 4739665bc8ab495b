"""Auth domain entities and responses."""

from .permission import Permission
from .responses import (
    ResponseHeader,
    AuthResponse,
    AuthEnableResponse,
    AuthDisableResponse,
    AuthenticateResponse,
    AuthUserAddResponse,
    AuthUserDeleteResponse,
    AuthUserChangePasswordResponse,
    AuthUserGetResponse,
    AuthUserListResponse,
    AuthUserGrantRoleResponse,
    AuthUserRevokeRoleResponse,
    AuthRoleAddResponse,
    AuthRoleGrantPermissionResponse,
    AuthRoleGetResponse,
    AuthRoleListResponse,
    AuthRoleRevokePermissionResponse,
    AuthRoleDeleteResponse,
)

__all__ = [
    "Permission",
    "ResponseHeader",
    "AuthResponse",
    "AuthEnableResponse",
    "AuthDisableResponse",
    "AuthenticateResponse",
    "AuthUserAddResponse",
    "AuthUserDeleteResponse",
    "AuthUserChangePasswordResponse",
    "AuthUserGetResponse",
    "AuthUserListResponse",
    "AuthUserGrantRoleResponse",
    "AuthUserRevokeRoleResponse",
    "AuthRoleAddResponse",
    "AuthRoleGrantPermissionResponse",
    "AuthRoleGetResponse",
    "AuthRoleListResponse",
    "AuthRoleRevokePermissionResponse",
    "AuthRoleDeleteResponse",
]
