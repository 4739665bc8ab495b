"""Invalid argument exception raised before any RPC is issued."""

from typing import Optional, Dict, Any

from .....core.exceptions import EtcdAuthError


class InvalidArgument(EtcdAuthError, ValueError):
    """Exception raised when an operation argument is missing or malformed.

    This is the only failure raised synchronously by the auth client; every
    other failure resolves the returned future.
    """

    def __init__(
        self,
        message: str = "Invalid argument",
        *,
        operation: Optional[str] = None,
        argument: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ) -> None:
        """Initialize invalid argument exception.

        Args:
            message: Human-readable error message
            operation: Client operation that rejected the argument
            argument: Name of the offending argument
            context: Additional context for debugging
        """
        self.operation = operation
        self.argument = argument
        self.context = context or {}

        super().__init__(
            message,
            details={
                'operation': self.operation,
                'argument': self.argument,
                **self.context
            }
        )

    @classmethod
    def missing(cls, argument: str, operation: Optional[str] = None) -> 'InvalidArgument':
        """Create exception for a required argument that was None."""
        return cls(
            f"{argument} can't be None",
            operation=operation,
            argument=argument,
            context={'reason': 'missing'}
        )

    @classmethod
    def wrong_type(
        cls,
        argument: str,
        expected: type,
        actual: Any,
        operation: Optional[str] = None
    ) -> 'InvalidArgument':
        """Create exception for an argument of the wrong type."""
        return cls(
            f"{argument} must be {expected.__name__}, got {type(actual).__name__}",
            operation=operation,
            argument=argument,
            context={'reason': 'wrong_type', 'expected': expected.__name__}
        )
