"""Failure to interpret a nominally successful wire response."""

from typing import Optional, Dict, Any

from .....core.exceptions import EtcdAuthError


class TranslationFailure(EtcdAuthError):
    """Exception resolving a future whose response could not be translated.

    Propagates exactly like ``RpcFailure``: the future fails, nothing is
    retried.
    """

    def __init__(
        self,
        message: str = "Response translation failed",
        *,
        operation: Optional[str] = None,
        response_type: Optional[str] = None,
        cause: Optional[BaseException] = None,
        context: Optional[Dict[str, Any]] = None
    ) -> None:
        self.operation = operation
        self.response_type = response_type
        self.cause = cause
        self.context = context or {}

        super().__init__(
            message,
            details={
                'operation': self.operation,
                'response_type': self.response_type,
                'cause': repr(cause) if cause is not None else None,
                **self.context
            }
        )
        self.__cause__ = cause

    @classmethod
    def from_cause(
        cls,
        operation: Optional[str],
        response: Any,
        cause: BaseException
    ) -> 'TranslationFailure':
        """Create exception for a translator that raised on ``response``."""
        response_type = type(response).__name__
        return cls(
            f"Could not translate {response_type}: {cause}",
            operation=operation,
            response_type=response_type,
            cause=cause
        )
