"""Wire response translators."""

from .response_translators import (
    to_response_header,
    to_permission,
    to_auth_enable_response,
    to_auth_disable_response,
    to_authenticate_response,
    to_user_add_response,
    to_user_delete_response,
    to_user_change_password_response,
    to_user_get_response,
    to_user_list_response,
    to_user_grant_role_response,
    to_user_revoke_role_response,
    to_role_add_response,
    to_role_grant_permission_response,
    to_role_get_response,
    to_role_list_response,
    to_role_revoke_permission_response,
    to_role_delete_response,
)

__all__ = [
    "to_response_header",
    "to_permission",
    "to_auth_enable_response",
    "to_auth_disable_response",
    "to_authenticate_response",
    "to_user_add_response",
    "to_user_delete_response",
    "to_user_change_password_response",
    "to_user_get_response",
    "to_user_list_response",
    "to_user_grant_role_response",
    "to_user_revoke_role_response",
    "to_role_add_response",
    "to_role_grant_permission_response",
    "to_role_get_response",
    "to_role_list_response",
    "to_role_revoke_permission_response",
    "to_role_delete_response",
]
