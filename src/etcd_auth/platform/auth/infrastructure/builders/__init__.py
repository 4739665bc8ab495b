"""Wire request builders."""

from .request_builders import (
    build_auth_enable_request,
    build_auth_disable_request,
    build_authenticate_request,
    build_user_add_request,
    build_user_delete_request,
    build_user_change_password_request,
    build_user_get_request,
    build_user_list_request,
    build_user_grant_role_request,
    build_user_revoke_role_request,
    build_role_add_request,
    build_wire_permission,
    build_role_grant_permission_request,
    build_role_get_request,
    build_role_list_request,
    build_role_revoke_permission_request,
    build_role_delete_request,
)

__all__ = [
    "build_auth_enable_request",
    "build_auth_disable_request",
    "build_authenticate_request",
    "build_user_add_request",
    "build_user_delete_request",
    "build_user_change_password_request",
    "build_user_get_request",
    "build_user_list_request",
    "build_user_grant_role_request",
    "build_user_revoke_role_request",
    "build_role_add_request",
    "build_wire_permission",
    "build_role_grant_permission_request",
    "build_role_get_request",
    "build_role_list_request",
    "build_role_revoke_permission_request",
    "build_role_delete_request",
]
