"""etcd v3 Auth wire messages.

The ``authpb`` and ``etcdserverpb`` messages used by the Auth service are
declared here as descriptor protos and registered in a private descriptor
pool, so message classes are available without a protoc build step. Field
names and numbers follow etcd's ``auth.proto`` and ``rpc.proto``.

Identifiers that etcd declares as ``string`` are declared ``bytes``. Both
use wire type 2 and encode identically, and ``bytes`` accepts identifiers
that are not valid UTF-8.
"""

from enum import IntEnum
from typing import Dict, NamedTuple, Type

from google.protobuf import descriptor_pb2, descriptor_pool, message, message_factory
from google.protobuf.internal import enum_type_wrapper

_Field = descriptor_pb2.FieldDescriptorProto

AUTH_SERVICE = "etcdserverpb.Auth"


def _field(
    name: str,
    number: int,
    field_type: int,
    type_name: str = "",
    repeated: bool = False
) -> descriptor_pb2.FieldDescriptorProto:
    field = _Field(
        name=name,
        number=number,
        type=field_type,
        label=_Field.LABEL_REPEATED if repeated else _Field.LABEL_OPTIONAL,
    )
    if type_name:
        field.type_name = type_name
    return field


def _bytes(name: str, number: int, repeated: bool = False) -> descriptor_pb2.FieldDescriptorProto:
    return _field(name, number, _Field.TYPE_BYTES, repeated=repeated)


def _header() -> descriptor_pb2.FieldDescriptorProto:
    return _field("header", 1, _Field.TYPE_MESSAGE, ".etcdserverpb.ResponseHeader")


def _message(name: str, *fields, enums=()) -> descriptor_pb2.DescriptorProto:
    return descriptor_pb2.DescriptorProto(name=name, field=list(fields), enum_type=list(enums))


_PERMISSION_TYPE_PROTO = descriptor_pb2.EnumDescriptorProto(
    name="Type",
    value=[
        descriptor_pb2.EnumValueDescriptorProto(name="READ", number=0),
        descriptor_pb2.EnumValueDescriptorProto(name="WRITE", number=1),
        descriptor_pb2.EnumValueDescriptorProto(name="READWRITE", number=2),
    ],
)

_AUTHPB_FILE = descriptor_pb2.FileDescriptorProto(
    name="etcd_auth/authpb/auth.proto",
    package="authpb",
    syntax="proto3",
    message_type=[
        _message(
            "Permission",
            _field("permType", 1, _Field.TYPE_ENUM, ".authpb.Permission.Type"),
            _bytes("key", 2),
            _bytes("range_end", 3),
            enums=[_PERMISSION_TYPE_PROTO],
        ),
    ],
)

_RPC_FILE = descriptor_pb2.FileDescriptorProto(
    name="etcd_auth/etcdserverpb/rpc.proto",
    package="etcdserverpb",
    syntax="proto3",
    dependency=[_AUTHPB_FILE.name],
    message_type=[
        _message(
            "ResponseHeader",
            _field("cluster_id", 1, _Field.TYPE_UINT64),
            _field("member_id", 2, _Field.TYPE_UINT64),
            _field("revision", 3, _Field.TYPE_INT64),
            _field("raft_term", 4, _Field.TYPE_UINT64),
        ),
        # Requests
        _message("AuthEnableRequest"),
        _message("AuthDisableRequest"),
        _message("AuthenticateRequest", _bytes("name", 1), _bytes("password", 2)),
        _message("AuthUserAddRequest", _bytes("name", 1), _bytes("password", 2)),
        _message("AuthUserGetRequest", _bytes("name", 1)),
        _message("AuthUserDeleteRequest", _bytes("name", 1)),
        _message("AuthUserChangePasswordRequest", _bytes("name", 1), _bytes("password", 2)),
        _message("AuthUserGrantRoleRequest", _bytes("user", 1), _bytes("role", 2)),
        _message("AuthUserRevokeRoleRequest", _bytes("name", 1), _bytes("role", 2)),
        _message("AuthRoleAddRequest", _bytes("name", 1)),
        _message("AuthRoleGetRequest", _bytes("role", 1)),
        _message("AuthUserListRequest"),
        _message("AuthRoleListRequest"),
        _message("AuthRoleDeleteRequest", _bytes("role", 1)),
        _message(
            "AuthRoleGrantPermissionRequest",
            _bytes("name", 1),
            _field("perm", 2, _Field.TYPE_MESSAGE, ".authpb.Permission"),
        ),
        _message(
            "AuthRoleRevokePermissionRequest",
            _bytes("role", 1),
            _bytes("key", 2),
            _bytes("range_end", 3),
        ),
        # Responses
        _message("AuthEnableResponse", _header()),
        _message("AuthDisableResponse", _header()),
        _message(
            "AuthenticateResponse",
            _header(),
            _field("token", 2, _Field.TYPE_STRING),
        ),
        _message("AuthUserAddResponse", _header()),
        _message("AuthUserGetResponse", _header(), _bytes("roles", 2, repeated=True)),
        _message("AuthUserDeleteResponse", _header()),
        _message("AuthUserChangePasswordResponse", _header()),
        _message("AuthUserGrantRoleResponse", _header()),
        _message("AuthUserRevokeRoleResponse", _header()),
        _message("AuthRoleAddResponse", _header()),
        _message(
            "AuthRoleGetResponse",
            _header(),
            _field("perm", 2, _Field.TYPE_MESSAGE, ".authpb.Permission", repeated=True),
        ),
        _message("AuthRoleListResponse", _header(), _bytes("roles", 2, repeated=True)),
        _message("AuthUserListResponse", _header(), _bytes("users", 2, repeated=True)),
        _message("AuthRoleDeleteResponse", _header()),
        _message("AuthRoleGrantPermissionResponse", _header()),
        _message("AuthRoleRevokePermissionResponse", _header()),
    ],
)

_pool = descriptor_pool.DescriptorPool()
_pool.AddSerializedFile(_AUTHPB_FILE.SerializeToString())
_pool.AddSerializedFile(_RPC_FILE.SerializeToString())


def _message_class(full_name: str) -> Type[message.Message]:
    return message_factory.GetMessageClass(_pool.FindMessageTypeByName(full_name))


PermissionType = enum_type_wrapper.EnumTypeWrapper(
    _pool.FindEnumTypeByName("authpb.Permission.Type")
)


class WirePermissionType(IntEnum):
    """Wire values of ``authpb.Permission.Type``.

    ``UNRECOGNIZED`` has no entry in the schema. proto3 enums are open, so
    the value is still accepted on the wire and left for the server to
    reject.
    """

    READ = PermissionType.Value("READ")
    WRITE = PermissionType.Value("WRITE")
    READWRITE = PermissionType.Value("READWRITE")
    UNRECOGNIZED = -1


Permission = _message_class("authpb.Permission")
ResponseHeader = _message_class("etcdserverpb.ResponseHeader")

AuthEnableRequest = _message_class("etcdserverpb.AuthEnableRequest")
AuthDisableRequest = _message_class("etcdserverpb.AuthDisableRequest")
AuthenticateRequest = _message_class("etcdserverpb.AuthenticateRequest")
AuthUserAddRequest = _message_class("etcdserverpb.AuthUserAddRequest")
AuthUserGetRequest = _message_class("etcdserverpb.AuthUserGetRequest")
AuthUserDeleteRequest = _message_class("etcdserverpb.AuthUserDeleteRequest")
AuthUserChangePasswordRequest = _message_class("etcdserverpb.AuthUserChangePasswordRequest")
AuthUserGrantRoleRequest = _message_class("etcdserverpb.AuthUserGrantRoleRequest")
AuthUserRevokeRoleRequest = _message_class("etcdserverpb.AuthUserRevokeRoleRequest")
AuthRoleAddRequest = _message_class("etcdserverpb.AuthRoleAddRequest")
AuthRoleGetRequest = _message_class("etcdserverpb.AuthRoleGetRequest")
AuthUserListRequest = _message_class("etcdserverpb.AuthUserListRequest")
AuthRoleListRequest = _message_class("etcdserverpb.AuthRoleListRequest")
AuthRoleDeleteRequest = _message_class("etcdserverpb.AuthRoleDeleteRequest")
AuthRoleGrantPermissionRequest = _message_class("etcdserverpb.AuthRoleGrantPermissionRequest")
AuthRoleRevokePermissionRequest = _message_class("etcdserverpb.AuthRoleRevokePermissionRequest")

AuthEnableResponse = _message_class("etcdserverpb.AuthEnableResponse")
AuthDisableResponse = _message_class("etcdserverpb.AuthDisableResponse")
AuthenticateResponse = _message_class("etcdserverpb.AuthenticateResponse")
AuthUserAddResponse = _message_class("etcdserverpb.AuthUserAddResponse")
AuthUserGetResponse = _message_class("etcdserverpb.AuthUserGetResponse")
AuthUserDeleteResponse = _message_class("etcdserverpb.AuthUserDeleteResponse")
AuthUserChangePasswordResponse = _message_class("etcdserverpb.AuthUserChangePasswordResponse")
AuthUserGrantRoleResponse = _message_class("etcdserverpb.AuthUserGrantRoleResponse")
AuthUserRevokeRoleResponse = _message_class("etcdserverpb.AuthUserRevokeRoleResponse")
AuthRoleAddResponse = _message_class("etcdserverpb.AuthRoleAddResponse")
AuthRoleGetResponse = _message_class("etcdserverpb.AuthRoleGetResponse")
AuthRoleListResponse = _message_class("etcdserverpb.AuthRoleListResponse")
AuthUserListResponse = _message_class("etcdserverpb.AuthUserListResponse")
AuthRoleDeleteResponse = _message_class("etcdserverpb.AuthRoleDeleteResponse")
AuthRoleGrantPermissionResponse = _message_class("etcdserverpb.AuthRoleGrantPermissionResponse")
AuthRoleRevokePermissionResponse = _message_class("etcdserverpb.AuthRoleRevokePermissionResponse")


class AuthMethod(NamedTuple):
    """One unary RPC of the Auth service."""

    name: str
    request_type: Type[message.Message]
    response_type: Type[message.Message]

    @property
    def path(self) -> str:
        return f"/{AUTH_SERVICE}/{self.name}"


# Stub attribute name -> RPC
AUTH_METHODS: Dict[str, AuthMethod] = {
    "auth_enable": AuthMethod("AuthEnable", AuthEnableRequest, AuthEnableResponse),
    "auth_disable": AuthMethod("AuthDisable", AuthDisableRequest, AuthDisableResponse),
    "authenticate": AuthMethod("Authenticate", AuthenticateRequest, AuthenticateResponse),
    "user_add": AuthMethod("UserAdd", AuthUserAddRequest, AuthUserAddResponse),
    "user_get": AuthMethod("UserGet", AuthUserGetRequest, AuthUserGetResponse),
    "user_list": AuthMethod("UserList", AuthUserListRequest, AuthUserListResponse),
    "user_delete": AuthMethod("UserDelete", AuthUserDeleteRequest, AuthUserDeleteResponse),
    "user_change_password": AuthMethod(
        "UserChangePassword", AuthUserChangePasswordRequest, AuthUserChangePasswordResponse
    ),
    "user_grant_role": AuthMethod("UserGrantRole", AuthUserGrantRoleRequest, AuthUserGrantRoleResponse),
    "user_revoke_role": AuthMethod("UserRevokeRole", AuthUserRevokeRoleRequest, AuthUserRevokeRoleResponse),
    "role_add": AuthMethod("RoleAdd", AuthRoleAddRequest, AuthRoleAddResponse),
    "role_get": AuthMethod("RoleGet", AuthRoleGetRequest, AuthRoleGetResponse),
    "role_list": AuthMethod("RoleList", AuthRoleListRequest, AuthRoleListResponse),
    "role_delete": AuthMethod("RoleDelete", AuthRoleDeleteRequest, AuthRoleDeleteResponse),
    "role_grant_permission": AuthMethod(
        "RoleGrantPermission", AuthRoleGrantPermissionRequest, AuthRoleGrantPermissionResponse
    ),
    "role_revoke_permission": AuthMethod(
        "RoleRevokePermission", AuthRoleRevokePermissionRequest, AuthRoleRevokePermissionResponse
    ),
}
