"""Remote call failure surfaced through the client future."""

from typing import Optional, Dict, Any

import grpc

from .....core.exceptions import EtcdAuthError


class RpcFailure(EtcdAuthError):
    """Exception resolving a future whose remote call failed.

    The exception raised by the RPC layer is kept untouched in ``cause``
    (and chained as ``__cause__``).
    """

    def __init__(
        self,
        message: str = "Remote call failed",
        *,
        operation: Optional[str] = None,
        cause: Optional[BaseException] = None,
        context: Optional[Dict[str, Any]] = None
    ) -> None:
        """Initialize RPC failure exception.

        Args:
            message: Human-readable error message
            operation: Client operation whose call failed
            cause: Original exception delivered by the RPC layer
            context: Additional context for debugging
        """
        self.operation = operation
        self.cause = cause
        self.code = self._status_code(cause)
        self.context = context or {}

        super().__init__(
            message,
            details={
                'operation': self.operation,
                'status': self.code.name if self.code is not None else None,
                'cause': repr(cause) if cause is not None else None,
                **self.context
            }
        )
        self.__cause__ = cause

    @staticmethod
    def _status_code(cause: Optional[BaseException]) -> Optional[grpc.StatusCode]:
        """Extract the gRPC status code when the cause is an RPC error."""
        if isinstance(cause, grpc.RpcError) and hasattr(cause, "code"):
            code = cause.code()
            if isinstance(code, grpc.StatusCode):
                return code
        return None

    @classmethod
    def from_cause(cls, operation: Optional[str], cause: BaseException) -> 'RpcFailure':
        """Create exception wrapping the failure delivered for ``operation``."""
        label = operation or "call"
        return cls(f"{label} failed: {cause}", operation=operation, cause=cause)

    @property
    def is_permission_denied(self) -> bool:
        return self.code == grpc.StatusCode.PERMISSION_DENIED

    @property
    def is_unavailable(self) -> bool:
        return self.code in (grpc.StatusCode.UNAVAILABLE, grpc.StatusCode.DEADLINE_EXCEEDED)

    def __str__(self) -> str:
        base_msg = super().__str__()
        if self.code is not None:
            return f"{base_msg} (status={self.code.name})"
        return base_msg
