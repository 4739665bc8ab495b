"""Tests for the wire response translators."""

import pytest

from etcd_auth.platform.auth import ByteSequence, Permission, PermissionKind
from etcd_auth.platform.auth.core import entities
from etcd_auth.platform.auth.infrastructure import translators
from etcd_auth.platform.auth.infrastructure.wire import auth_pb


@pytest.fixture
def wire_header():
    return auth_pb.ResponseHeader(cluster_id=11, member_id=22, revision=33, raft_term=4)


class TestResponseTranslators:

    def test_header(self, wire_header):
        assert translators.to_response_header(wire_header) == entities.ResponseHeader(
            cluster_id=11, member_id=22, revision=33, raft_term=4
        )

    def test_missing_header_translates_to_zeroes(self):
        response = translators.to_auth_enable_response(auth_pb.AuthEnableResponse())
        assert response == entities.AuthEnableResponse()

    def test_user_get_roles(self, wire_header):
        response = translators.to_user_get_response(
            auth_pb.AuthUserGetResponse(header=wire_header, roles=[b"r1", b"r2"])
        )
        assert isinstance(response, entities.AuthUserGetResponse)
        assert response.header.revision == 33
        assert response.roles == (ByteSequence.from_string("r1"), ByteSequence.from_string("r2"))

    def test_user_list(self):
        response = translators.to_user_list_response(auth_pb.AuthUserListResponse(users=[b"alice", b"root"]))
        assert [user.to_string() for user in response.users] == ["alice", "root"]

    def test_role_list(self):
        response = translators.to_role_list_response(auth_pb.AuthRoleListResponse(roles=[b"r1"]))
        assert response.roles == (ByteSequence(b"r1"),)

    def test_role_get_permissions(self):
        wire = auth_pb.AuthRoleGetResponse(perm=[
            auth_pb.Permission(key=b"a", range_end=b"z", permType=2),
            auth_pb.Permission(key=b"foo", permType=0),
        ])
        response = translators.to_role_get_response(wire)
        assert response.permissions == (
            Permission(ByteSequence(b"a"), ByteSequence(b"z"), PermissionKind.READWRITE),
            Permission(ByteSequence(b"foo"), ByteSequence(b""), PermissionKind.READ),
        )
        assert response.permissions[1].is_single_key

    def test_role_get_with_unknown_permission_type_raises(self):
        wire = auth_pb.AuthRoleGetResponse(perm=[auth_pb.Permission(key=b"a", permType=9)])
        with pytest.raises(ValueError):
            translators.to_role_get_response(wire)

    def test_authenticate_token(self, wire_header):
        response = translators.to_authenticate_response(
            auth_pb.AuthenticateResponse(header=wire_header, token="tok.123")
        )
        assert response.token == "tok.123"
        assert "tok.123" not in repr(response)

    @pytest.mark.parametrize("translate, wire_class, domain_class", [
        (translators.to_auth_disable_response, auth_pb.AuthDisableResponse, entities.AuthDisableResponse),
        (translators.to_user_add_response, auth_pb.AuthUserAddResponse, entities.AuthUserAddResponse),
        (translators.to_user_delete_response, auth_pb.AuthUserDeleteResponse, entities.AuthUserDeleteResponse),
        (translators.to_user_change_password_response, auth_pb.AuthUserChangePasswordResponse,
         entities.AuthUserChangePasswordResponse),
        (translators.to_user_grant_role_response, auth_pb.AuthUserGrantRoleResponse,
         entities.AuthUserGrantRoleResponse),
        (translators.to_user_revoke_role_response, auth_pb.AuthUserRevokeRoleResponse,
         entities.AuthUserRevokeRoleResponse),
        (translators.to_role_add_response, auth_pb.AuthRoleAddResponse, entities.AuthRoleAddResponse),
        (translators.to_role_grant_permission_response, auth_pb.AuthRoleGrantPermissionResponse,
         entities.AuthRoleGrantPermissionResponse),
        (translators.to_role_revoke_permission_response, auth_pb.AuthRoleRevokePermissionResponse,
         entities.AuthRoleRevokePermissionResponse),
        (translators.to_role_delete_response, auth_pb.AuthRoleDeleteResponse, entities.AuthRoleDeleteResponse),
    ])
    def test_header_only_responses(self, wire_header, translate, wire_class, domain_class):
        response = translate(wire_class(header=wire_header))
        assert type(response) is domain_class
        assert response.header.member_id == 22
