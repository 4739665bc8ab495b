"""Transport adapters."""

from .grpc_auth_stub import GrpcAuthStub

__all__ = [
    "GrpcAuthStub",
]
