"""Auth RPC stub protocol contract."""

from typing import Any, Protocol, runtime_checkable

from .pending_call import PendingCall


@runtime_checkable
class AuthStub(Protocol):
    """Protocol for the etcd Auth service stub.

    Defines ONLY the contract for issuing calls: one method per RPC, each
    taking a wire request and returning a ``PendingCall`` without blocking.
    """

    def auth_enable(self, request: Any) -> PendingCall: ...

    def auth_disable(self, request: Any) -> PendingCall: ...

    def authenticate(self, request: Any) -> PendingCall: ...

    def user_add(self, request: Any) -> PendingCall: ...

    def user_delete(self, request: Any) -> PendingCall: ...

    def user_change_password(self, request: Any) -> PendingCall: ...

    def user_get(self, request: Any) -> PendingCall: ...

    def user_list(self, request: Any) -> PendingCall: ...

    def user_grant_role(self, request: Any) -> PendingCall: ...

    def user_revoke_role(self, request: Any) -> PendingCall: ...

    def role_add(self, request: Any) -> PendingCall: ...

    def role_grant_permission(self, request: Any) -> PendingCall: ...

    def role_get(self, request: Any) -> PendingCall: ...

    def role_list(self, request: Any) -> PendingCall: ...

    def role_revoke_permission(self, request: Any) -> PendingCall: ...

    def role_delete(self, request: Any) -> PendingCall: ...
