"""Response translators for the etcd Auth service.

One pure function per operation, converting a wire response into the
matching domain response. Only called for successful calls.
"""

from typing import Iterable, Tuple

from ...core import entities
from ...core.value_objects import ByteSequence
from ..codecs import from_wire_bytes, from_wire_permission_type


def to_response_header(header) -> entities.ResponseHeader:
    return entities.ResponseHeader(
        cluster_id=header.cluster_id,
        member_id=header.member_id,
        revision=header.revision,
        raft_term=header.raft_term,
    )


def to_permission(perm) -> entities.Permission:
    """Translate an ``authpb.Permission``.

    Raises:
        ValueError: If the permission type is unknown to this client
    """
    return entities.Permission(
        key=from_wire_bytes(perm.key),
        range_end=from_wire_bytes(perm.range_end),
        kind=from_wire_permission_type(perm.permType),
    )


def _byte_sequences(values: Iterable[bytes]) -> Tuple[ByteSequence, ...]:
    return tuple(from_wire_bytes(value) for value in values)


def to_auth_enable_response(response) -> entities.AuthEnableResponse:
    return entities.AuthEnableResponse(header=to_response_header(response.header))


def to_auth_disable_response(response) -> entities.AuthDisableResponse:
    return entities.AuthDisableResponse(header=to_response_header(response.header))


def to_authenticate_response(response) -> entities.AuthenticateResponse:
    return entities.AuthenticateResponse(
        header=to_response_header(response.header),
        token=response.token,
    )


def to_user_add_response(response) -> entities.AuthUserAddResponse:
    return entities.AuthUserAddResponse(header=to_response_header(response.header))


def to_user_delete_response(response) -> entities.AuthUserDeleteResponse:
    return entities.AuthUserDeleteResponse(header=to_response_header(response.header))


def to_user_change_password_response(response) -> entities.AuthUserChangePasswordResponse:
    return entities.AuthUserChangePasswordResponse(header=to_response_header(response.header))


def to_user_get_response(response) -> entities.AuthUserGetResponse:
    return entities.AuthUserGetResponse(
        header=to_response_header(response.header),
        roles=_byte_sequences(response.roles),
    )


def to_user_list_response(response) -> entities.AuthUserListResponse:
    return entities.AuthUserListResponse(
        header=to_response_header(response.header),
        users=_byte_sequences(response.users),
    )


def to_user_grant_role_response(response) -> entities.AuthUserGrantRoleResponse:
    return entities.AuthUserGrantRoleResponse(header=to_response_header(response.header))


def to_user_revoke_role_response(response) -> entities.AuthUserRevokeRoleResponse:
    return entities.AuthUserRevokeRoleResponse(header=to_response_header(response.header))


def to_role_add_response(response) -> entities.AuthRoleAddResponse:
    return entities.AuthRoleAddResponse(header=to_response_header(response.header))


def to_role_grant_permission_response(response) -> entities.AuthRoleGrantPermissionResponse:
    return entities.AuthRoleGrantPermissionResponse(header=to_response_header(response.header))


def to_role_get_response(response) -> entities.AuthRoleGetResponse:
    return entities.AuthRoleGetResponse(
        header=to_response_header(response.header),
        permissions=tuple(to_permission(perm) for perm in response.perm),
    )


def to_role_list_response(response) -> entities.AuthRoleListResponse:
    return entities.AuthRoleListResponse(
        header=to_response_header(response.header),
        roles=_byte_sequences(response.roles),
    )


def to_role_revoke_permission_response(response) -> entities.AuthRoleRevokePermissionResponse:
    return entities.AuthRoleRevokePermissionResponse(header=to_response_header(response.header))


def to_role_delete_response(response) -> entities.AuthRoleDeleteResponse:
    return entities.AuthRoleDeleteResponse(header=to_response_header(response.header))
