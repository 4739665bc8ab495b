"""Base exceptions for etcd-auth.

All exceptions inherit from EtcdAuthError and carry an error code and a
details mapping so callers can log or render them uniformly.
"""

from typing import Any, Dict, Optional


class EtcdAuthError(Exception):
    """Base exception for all etcd-auth errors.

    All exceptions in the etcd-auth library inherit from this base class
    and include structured error information for better debugging.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        *args,
        **kwargs
    ):
        super().__init__(message, *args, **kwargs)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


def create_error_response(exception: EtcdAuthError) -> Dict[str, Any]:
    """Render an etcd-auth exception as a plain dict for logs or API payloads.

    ``cause`` names the exception it was raised from, for example the
    ``grpc.RpcError`` behind an ``RpcFailure``, and is None otherwise.
    """
    cause = exception.__cause__
    return {
        "error": {
            "type": type(exception).__name__,
            "code": exception.error_code,
            "message": str(exception),
            "details": dict(exception.details),
            "cause": type(cause).__name__ if cause is not None else None,
        }
    }
