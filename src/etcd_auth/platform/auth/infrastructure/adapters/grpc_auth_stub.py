"""gRPC adapter for the etcd Auth service."""

import logging
from typing import Any, Dict, Optional, Sequence, Tuple

import grpc

from ...core.protocols import PendingCall
from ..wire import AUTH_METHODS

logger = logging.getLogger(__name__)


class GrpcAuthStub:
    """etcd Auth service stub over a ``grpc.Channel``.

    Handles ONLY issuing unary calls. Each method starts the call with
    ``future()`` and hands back the ``grpc.Future``; it never waits for the
    server.
    """

    def __init__(
        self,
        channel: grpc.Channel,
        timeout: Optional[float] = None,
        metadata: Optional[Sequence[Tuple[str, str]]] = None
    ):
        """Initialize the stub.

        Args:
            channel: Open channel to an etcd member
            timeout: Per-call deadline in seconds, None for no deadline
            metadata: Metadata sent with every call
        """
        if channel is None:
            raise ValueError("gRPC channel is required")

        self.timeout = timeout
        self.metadata = tuple(metadata) if metadata else None
        self._callables: Dict[str, Any] = {
            attribute: channel.unary_unary(
                method.path,
                request_serializer=method.request_type.SerializeToString,
                response_deserializer=method.response_type.FromString,
            )
            for attribute, method in AUTH_METHODS.items()
        }

    def _invoke(self, attribute: str, request: Any) -> PendingCall:
        logger.debug(f"Issuing {AUTH_METHODS[attribute].path}")
        return self._callables[attribute].future(
            request,
            timeout=self.timeout,
            metadata=self.metadata,
        )

    def auth_enable(self, request: Any) -> PendingCall:
        return self._invoke("auth_enable", request)

    def auth_disable(self, request: Any) -> PendingCall:
        return self._invoke("auth_disable", request)

    def authenticate(self, request: Any) -> PendingCall:
        return self._invoke("authenticate", request)

    def user_add(self, request: Any) -> PendingCall:
        return self._invoke("user_add", request)

    def user_delete(self, request: Any) -> PendingCall:
        return self._invoke("user_delete", request)

    def user_change_password(self, request: Any) -> PendingCall:
        return self._invoke("user_change_password", request)

    def user_get(self, request: Any) -> PendingCall:
        return self._invoke("user_get", request)

    def user_list(self, request: Any) -> PendingCall:
        return self._invoke("user_list", request)

    def user_grant_role(self, request: Any) -> PendingCall:
        return self._invoke("user_grant_role", request)

    def user_revoke_role(self, request: Any) -> PendingCall:
        return self._invoke("user_revoke_role", request)

    def role_add(self, request: Any) -> PendingCall:
        return self._invoke("role_add", request)

    def role_grant_permission(self, request: Any) -> PendingCall:
        return self._invoke("role_grant_permission", request)

    def role_get(self, request: Any) -> PendingCall:
        return self._invoke("role_get", request)

    def role_list(self, request: Any) -> PendingCall:
        return self._invoke("role_list", request)

    def role_revoke_permission(self, request: Any) -> PendingCall:
        return self._invoke("role_revoke_permission", request)

    def role_delete(self, request: Any) -> PendingCall:
        return self._invoke("role_delete", request)
