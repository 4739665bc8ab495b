"""Bridge from single-shot RPC completion handles to asyncio futures."""

import asyncio
import logging
from typing import Any, Callable, Optional, TypeVar

from ...core.exceptions import RpcFailure, TranslationFailure
from ...core.protocols import PendingCall

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CallFuture(asyncio.Future):
    """Future bound to the pending call it resolves from.

    ``cancel()`` cancels the call first. When the call has already
    finished with a response or a failure, the future is left alone and
    ``cancel()`` returns False.
    """

    def __init__(self, pending_call: PendingCall, *, loop: asyncio.AbstractEventLoop):
        super().__init__(loop=loop)
        self.pending_call = pending_call

    def cancel(self, msg: Any = None) -> bool:
        if self.done():
            return False
        call = self.pending_call
        if not call.cancel() and not call.cancelled():
            logger.debug("Cancel ignored: call already completed")
            return False
        return super().cancel(msg=msg)


class FutureBridge:
    """Exposes a ``PendingCall`` as an ``asyncio.Future`` on a given loop.

    Handles ONLY completion bridging and response translation dispatch.
    The RPC layer completes the pending call on its own threads; the
    continuation (translation and resolution) always runs on ``loop``.

    The returned future moves exactly once from pending to succeeded,
    failed or cancelled:

    - success: ``translate(response)`` resolves it, or fails it with
      ``TranslationFailure`` if translation raises
    - failure: it fails with ``RpcFailure`` carrying the original cause;
      ``translate`` is never called
    - cancellation by the caller is forwarded to the pending call; once
      the call has finished, cancelling is a no-op and its outcome stands

    If the loop is closed before the call completes, the continuation
    cannot be scheduled: a warning is logged and the future stays pending.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop):
        """Initialize the bridge.

        Args:
            loop: Event loop that runs continuations and owns the futures
        """
        if loop is None:
            raise ValueError("Event loop is required")
        self.loop = loop

    def bridge(
        self,
        pending_call: PendingCall,
        translate: Callable[[Any], T],
        operation: Optional[str] = None
    ) -> "asyncio.Future[T]":
        """Wrap ``pending_call`` in a future resolved with the translated response.

        Args:
            pending_call: In-flight call, driven to completion by the RPC layer
            translate: Converts the wire response into the domain response
            operation: Operation name used in errors and log lines

        Returns:
            Future that is not yet resolved unless the call already finished
            and the loop has run the continuation
        """
        future = CallFuture(pending_call, loop=self.loop)

        def on_call_done(call: PendingCall) -> None:
            # Runs on whichever thread completed the call
            try:
                self.loop.call_soon_threadsafe(self._settle, future, call, translate, operation)
            except RuntimeError:
                logger.warning(f"{operation}: event loop closed before the call completed")

        pending_call.add_done_callback(on_call_done)
        return future

    def _settle(
        self,
        future: asyncio.Future,
        call: PendingCall,
        translate: Callable[[Any], Any],
        operation: Optional[str]
    ) -> None:
        if future.done():
            return

        if call.cancelled():
            future.cancel()
            return

        error = call.exception()
        if error is not None:
            logger.warning(f"{operation} failed: {error!r}")
            future.set_exception(RpcFailure.from_cause(operation, error))
            return

        response = call.result()
        try:
            result = translate(response)
        except Exception as e:
            logger.warning(f"{operation}: could not translate {type(response).__name__}: {e}")
            future.set_exception(TranslationFailure.from_cause(operation, response, e))
            return

        future.set_result(result)
