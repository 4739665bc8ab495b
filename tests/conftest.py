"""Pytest configuration and fixtures for etcd-auth tests."""

import asyncio
import concurrent.futures
import threading

import grpc
import pytest

from etcd_auth.platform.auth import AuthClient, ByteSequence
from etcd_auth.platform.auth.infrastructure.wire import AUTH_METHODS


class FakePendingCall:
    """In-memory stand-in for ``grpc.Future``, completed by the test."""

    def __init__(self):
        self._lock = threading.Lock()
        self._state = "pending"
        self._response = None
        self._error = None
        self._callbacks = []
        self.cancel_requests = 0

    def _complete(self, state, response=None, error=None) -> bool:
        with self._lock:
            if self._state != "pending":
                return False
            self._state = state
            self._response = response
            self._error = error
            callbacks, self._callbacks = self._callbacks, []
        for callback in callbacks:
            callback(self)
        return True

    def succeed(self, response) -> bool:
        return self._complete("succeeded", response=response)

    def fail(self, error) -> bool:
        return self._complete("failed", error=error)

    def cancel(self) -> bool:
        self.cancel_requests += 1
        return self._complete("cancelled")

    def cancelled(self) -> bool:
        return self._state == "cancelled"

    def done(self) -> bool:
        return self._state != "pending"

    def result(self, timeout=None):
        if self._state == "cancelled":
            raise concurrent.futures.CancelledError()
        if self._error is not None:
            raise self._error
        return self._response

    def exception(self, timeout=None):
        if self._state == "cancelled":
            raise concurrent.futures.CancelledError()
        return self._error

    def add_done_callback(self, fn) -> None:
        with self._lock:
            if self._state == "pending":
                self._callbacks.append(fn)
                return
        fn(self)


class FakeAuthStub:
    """Auth stub recording every issued call."""

    def __init__(self):
        self.calls = []

    def __getattr__(self, name):
        if name not in AUTH_METHODS:
            raise AttributeError(name)

        def issue(request):
            pending_call = FakePendingCall()
            self.calls.append((name, request, pending_call))
            return pending_call

        return issue

    @property
    def last_call(self):
        return self.calls[-1]


class FakeRpcError(grpc.RpcError):
    """RPC error carrying a status code, like the errors grpc raises."""

    def __init__(self, status_code: grpc.StatusCode, details: str = ""):
        super().__init__(details)
        self._status_code = status_code
        self._details = details

    def code(self) -> grpc.StatusCode:
        return self._status_code

    def details(self) -> str:
        return self._details


@pytest.fixture
def stub():
    """Recording auth stub."""
    return FakeAuthStub()


@pytest.fixture
def pending_call():
    """Fresh pending call."""
    return FakePendingCall()


@pytest.fixture
def make_rpc_error():
    """Factory for RPC errors with a given status code."""
    return FakeRpcError


@pytest.fixture
def make_client(stub):
    """Build an AuthClient bound to the running loop (call inside a test)."""
    def factory():
        return AuthClient(stub, asyncio.get_running_loop())
    return factory


@pytest.fixture
def alice():
    return ByteSequence.from_string("alice")


@pytest.fixture
def secret():
    return ByteSequence.from_string("s3cret")
