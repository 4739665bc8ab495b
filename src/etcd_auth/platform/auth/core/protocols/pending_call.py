"""Pending call protocol contract."""

from typing import Any, Callable, Optional, Protocol, runtime_checkable


@runtime_checkable
class PendingCall(Protocol):
    """Single-shot handle for one in-flight remote invocation.

    Mirrors the subset of ``grpc.Future`` the auth client relies on. The
    RPC layer drives the handle to exactly one terminal state: success with
    a wire response, failure with a cause, or cancelled.
    """

    def add_done_callback(self, fn: Callable[["PendingCall"], None]) -> None:
        """Register ``fn`` to run once the call terminates.

        If the call has already terminated, ``fn`` runs immediately.
        """
        ...

    def cancel(self) -> bool:
        """Attempt to cancel; returns False if the call already terminated."""
        ...

    def cancelled(self) -> bool:
        ...

    def done(self) -> bool:
        ...

    def result(self, timeout: Optional[float] = None) -> Any:
        """Return the wire response, raising the failure cause if any."""
        ...

    def exception(self, timeout: Optional[float] = None) -> Optional[BaseException]:
        """Return the failure cause, or None when the call succeeded."""
        ...
