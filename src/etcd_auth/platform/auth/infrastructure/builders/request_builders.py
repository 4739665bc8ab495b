"""Request builders for the etcd Auth service.

One pure function per operation. Inputs are already validated; each call
returns a fresh wire message and has no other effect.
"""

from ...core.entities import Permission
from ...core.value_objects import ByteSequence, PermissionKind
from ..codecs import to_wire_bytes, to_wire_permission_type
from ..wire import auth_pb


def build_auth_enable_request() -> auth_pb.AuthEnableRequest:
    return auth_pb.AuthEnableRequest()


def build_auth_disable_request() -> auth_pb.AuthDisableRequest:
    return auth_pb.AuthDisableRequest()


def build_authenticate_request(user: ByteSequence, password: ByteSequence) -> auth_pb.AuthenticateRequest:
    return auth_pb.AuthenticateRequest(
        name=to_wire_bytes(user),
        password=to_wire_bytes(password),
    )


def build_user_add_request(user: ByteSequence, password: ByteSequence) -> auth_pb.AuthUserAddRequest:
    return auth_pb.AuthUserAddRequest(
        name=to_wire_bytes(user),
        password=to_wire_bytes(password),
    )


def build_user_delete_request(user: ByteSequence) -> auth_pb.AuthUserDeleteRequest:
    return auth_pb.AuthUserDeleteRequest(name=to_wire_bytes(user))


def build_user_change_password_request(
    user: ByteSequence,
    password: ByteSequence
) -> auth_pb.AuthUserChangePasswordRequest:
    return auth_pb.AuthUserChangePasswordRequest(
        name=to_wire_bytes(user),
        password=to_wire_bytes(password),
    )


def build_user_get_request(user: ByteSequence) -> auth_pb.AuthUserGetRequest:
    return auth_pb.AuthUserGetRequest(name=to_wire_bytes(user))


def build_user_list_request() -> auth_pb.AuthUserListRequest:
    return auth_pb.AuthUserListRequest()


def build_user_grant_role_request(user: ByteSequence, role: ByteSequence) -> auth_pb.AuthUserGrantRoleRequest:
    return auth_pb.AuthUserGrantRoleRequest(
        user=to_wire_bytes(user),
        role=to_wire_bytes(role),
    )


def build_user_revoke_role_request(user: ByteSequence, role: ByteSequence) -> auth_pb.AuthUserRevokeRoleRequest:
    # etcd names the user field "name" here, unlike UserGrantRole
    return auth_pb.AuthUserRevokeRoleRequest(
        name=to_wire_bytes(user),
        role=to_wire_bytes(role),
    )


def build_role_add_request(role: ByteSequence) -> auth_pb.AuthRoleAddRequest:
    return auth_pb.AuthRoleAddRequest(name=to_wire_bytes(role))


def build_wire_permission(permission: Permission) -> auth_pb.Permission:
    """Build the nested ``authpb.Permission`` for a grant."""
    return auth_pb.Permission(
        key=to_wire_bytes(permission.key),
        range_end=to_wire_bytes(permission.range_end),
        permType=int(to_wire_permission_type(permission.kind)),
    )


def build_role_grant_permission_request(
    role: ByteSequence,
    key: ByteSequence,
    range_end: ByteSequence,
    kind: PermissionKind
) -> auth_pb.AuthRoleGrantPermissionRequest:
    perm = build_wire_permission(Permission(key=key, range_end=range_end, kind=kind))
    return auth_pb.AuthRoleGrantPermissionRequest(
        name=to_wire_bytes(role),
        perm=perm,
    )


def build_role_get_request(role: ByteSequence) -> auth_pb.AuthRoleGetRequest:
    return auth_pb.AuthRoleGetRequest(role=to_wire_bytes(role))


def build_role_list_request() -> auth_pb.AuthRoleListRequest:
    return auth_pb.AuthRoleListRequest()


def build_role_revoke_permission_request(
    role: ByteSequence,
    key: ByteSequence,
    range_end: ByteSequence
) -> auth_pb.AuthRoleRevokePermissionRequest:
    return auth_pb.AuthRoleRevokePermissionRequest(
        role=to_wire_bytes(role),
        key=to_wire_bytes(key),
        range_end=to_wire_bytes(range_end),
    )


def build_role_delete_request(role: ByteSequence) -> auth_pb.AuthRoleDeleteRequest:
    return auth_pb.AuthRoleDeleteRequest(role=to_wire_bytes(role))
