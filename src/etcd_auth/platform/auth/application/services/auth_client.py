"""etcd auth client.

Usage:
    from etcd_auth import AuthClient, ByteSequence

    client = AuthClient(stub, asyncio.get_running_loop())
    response = await client.user_get(ByteSequence.from_string("alice"))
    print(response.roles)
"""

import asyncio
import logging
from typing import Any

from ...core.entities import (
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
from ...core.protocols import AuthStub
from ...core.value_objects import ByteSequence, PermissionKind
from .. import operations
from ..operations import AuthOperation
from .future_bridge import FutureBridge

logger = logging.getLogger(__name__)


class AuthClient:
    """Client for the etcd Auth service.

    Every operation validates its arguments, builds the wire request,
    issues the call through the stub and returns an ``asyncio.Future``
    without waiting for the server. Missing or mistyped arguments raise
    ``InvalidArgument`` immediately and issue no call. Remote failures
    resolve the future with ``RpcFailure``; responses that cannot be
    interpreted resolve it with ``TranslationFailure``.

    Futures of separate calls are independent: their completion order does
    not follow the order the calls were made in.
    """

    def __init__(self, stub: AuthStub, loop: asyncio.AbstractEventLoop):
        """Initialize the auth client.

        Args:
            stub: Auth service stub issuing the calls
            loop: Event loop that runs continuations and owns the futures
        """
        if stub is None:
            raise ValueError("Auth stub is required")
        self.stub = stub
        self.bridge = FutureBridge(loop)

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        return self.bridge.loop

    def _execute(self, operation: AuthOperation, **arguments: Any) -> asyncio.Future:
        operation.validate(arguments)
        request = operation.build_request(**arguments)
        pending_call = getattr(self.stub, operation.name)(request)
        # Passwords are never logged
        identifiers = ", ".join(
            f"{name}={value.mask_for_logging()}"
            for name, value in arguments.items()
            if name != "password" and isinstance(value, ByteSequence)
        )
        logger.debug(f"Dispatched {operation.name}({identifiers})")
        return self.bridge.bridge(
            pending_call,
            operation.translate_response,
            operation=operation.name,
        )

    # Cluster auth

    def auth_enable(self) -> "asyncio.Future[AuthEnableResponse]":
        """Enable authentication on the cluster."""
        return self._execute(operations.AUTH_ENABLE)

    def auth_disable(self) -> "asyncio.Future[AuthDisableResponse]":
        """Disable authentication on the cluster."""
        return self._execute(operations.AUTH_DISABLE)

    def authenticate(
        self,
        user: ByteSequence,
        password: ByteSequence
    ) -> "asyncio.Future[AuthenticateResponse]":
        """Exchange credentials for a simple token.

        Args:
            user: User name
            password: User password

        Returns:
            Future resolving to the response carrying the token
        """
        return self._execute(operations.AUTHENTICATE, user=user, password=password)

    # Users

    def user_add(
        self,
        user: ByteSequence,
        password: ByteSequence
    ) -> "asyncio.Future[AuthUserAddResponse]":
        """Add a user with the given password."""
        return self._execute(operations.USER_ADD, user=user, password=password)

    def user_delete(self, user: ByteSequence) -> "asyncio.Future[AuthUserDeleteResponse]":
        return self._execute(operations.USER_DELETE, user=user)

    def user_change_password(
        self,
        user: ByteSequence,
        password: ByteSequence
    ) -> "asyncio.Future[AuthUserChangePasswordResponse]":
        return self._execute(operations.USER_CHANGE_PASSWORD, user=user, password=password)

    def user_get(self, user: ByteSequence) -> "asyncio.Future[AuthUserGetResponse]":
        """Get the roles granted to a user.

        Args:
            user: User name

        Returns:
            Future resolving to the response listing the user's roles
        """
        return self._execute(operations.USER_GET, user=user)

    def user_list(self) -> "asyncio.Future[AuthUserListResponse]":
        """List all user names."""
        return self._execute(operations.USER_LIST)

    def user_grant_role(
        self,
        user: ByteSequence,
        role: ByteSequence
    ) -> "asyncio.Future[AuthUserGrantRoleResponse]":
        return self._execute(operations.USER_GRANT_ROLE, user=user, role=role)

    def user_revoke_role(
        self,
        user: ByteSequence,
        role: ByteSequence
    ) -> "asyncio.Future[AuthUserRevokeRoleResponse]":
        return self._execute(operations.USER_REVOKE_ROLE, user=user, role=role)

    # Roles

    def role_add(self, role: ByteSequence) -> "asyncio.Future[AuthRoleAddResponse]":
        return self._execute(operations.ROLE_ADD, role=role)

    def role_grant_permission(
        self,
        role: ByteSequence,
        key: ByteSequence,
        range_end: ByteSequence,
        kind: PermissionKind
    ) -> "asyncio.Future[AuthRoleGrantPermissionResponse]":
        """Grant a role access to the key range ``[key, range_end)``.

        Args:
            role: Role name
            key: First key of the range
            range_end: End of the range (exclusive); empty for ``key`` alone
            kind: Access level; kinds unknown to the protocol are sent as
                UNRECOGNIZED and left for the server to reject

        Returns:
            Future resolving once the grant is applied
        """
        return self._execute(
            operations.ROLE_GRANT_PERMISSION,
            role=role,
            key=key,
            range_end=range_end,
            kind=kind,
        )

    def role_get(self, role: ByteSequence) -> "asyncio.Future[AuthRoleGetResponse]":
        """Get the permissions held by a role."""
        return self._execute(operations.ROLE_GET, role=role)

    def role_list(self) -> "asyncio.Future[AuthRoleListResponse]":
        return self._execute(operations.ROLE_LIST)

    def role_revoke_permission(
        self,
        role: ByteSequence,
        key: ByteSequence,
        range_end: ByteSequence
    ) -> "asyncio.Future[AuthRoleRevokePermissionResponse]":
        """Revoke the permission a role holds on ``[key, range_end)``."""
        return self._execute(
            operations.ROLE_REVOKE_PERMISSION,
            role=role,
            key=key,
            range_end=range_end,
        )

    def role_delete(self, role: ByteSequence) -> "asyncio.Future[AuthRoleDeleteResponse]":
        return self._execute(operations.ROLE_DELETE, role=role)
