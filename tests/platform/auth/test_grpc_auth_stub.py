"""Tests for the gRPC Auth stub adapter."""

from unittest.mock import MagicMock

import pytest

from etcd_auth.platform.auth import AuthStub, GrpcAuthStub
from etcd_auth.platform.auth.infrastructure.wire import AUTH_METHODS, auth_pb


@pytest.fixture
def channel():
    """Channel mock handing out one multi-callable per method path."""
    channel = MagicMock()
    channel.callables = {}
    channel.unary_unary.side_effect = (
        lambda path, **kwargs: channel.callables.setdefault(path, MagicMock(name=path))
    )
    return channel


class TestGrpcAuthStub:

    def test_requires_channel(self):
        with pytest.raises(ValueError):
            GrpcAuthStub(None)

    def test_satisfies_protocol(self, channel):
        assert isinstance(GrpcAuthStub(channel), AuthStub)

    def test_registers_every_method(self, channel):
        GrpcAuthStub(channel)

        assert channel.unary_unary.call_count == len(AUTH_METHODS)
        assert set(channel.callables) == {method.path for method in AUTH_METHODS.values()}
        assert "/etcdserverpb.Auth/RoleGrantPermission" in channel.callables

    def test_uses_message_codecs(self, channel):
        GrpcAuthStub(channel)

        kwargs = {
            call.args[0]: call.kwargs for call in channel.unary_unary.call_args_list
        }["/etcdserverpb.Auth/UserGet"]
        assert kwargs["request_serializer"] == auth_pb.AuthUserGetRequest.SerializeToString
        assert kwargs["response_deserializer"] == auth_pb.AuthUserGetResponse.FromString

    def test_issues_future_call(self, channel):
        stub = GrpcAuthStub(channel, timeout=2.5, metadata=[("token", "abc")])
        request = auth_pb.AuthUserAddRequest(name=b"alice", password=b"pw")

        pending_call = stub.user_add(request)

        multicallable = channel.callables["/etcdserverpb.Auth/UserAdd"]
        multicallable.future.assert_called_once_with(
            request, timeout=2.5, metadata=(("token", "abc"),)
        )
        assert pending_call is multicallable.future.return_value

    @pytest.mark.parametrize("attribute", sorted(AUTH_METHODS))
    def test_each_method_targets_its_path(self, channel, attribute):
        stub = GrpcAuthStub(channel)
        getattr(stub, attribute)("request")

        path = AUTH_METHODS[attribute].path
        channel.callables[path].future.assert_called_once_with("request", timeout=None, metadata=None)
