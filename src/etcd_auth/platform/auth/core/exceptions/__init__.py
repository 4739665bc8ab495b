"""Auth client exceptions.

InvalidArgument is raised synchronously; RpcFailure and TranslationFailure
resolve the future returned by an operation.
"""

from .invalid_argument import InvalidArgument
from .rpc_failure import RpcFailure
from .translation_failure import TranslationFailure

__all__ = [
    "InvalidArgument",
    "RpcFailure",
    "TranslationFailure",
]
