"""Exceptions module for etcd-auth.

Base hierarchy shared by every platform module. Auth-specific failures
live in ``etcd_auth.platform.auth.core.exceptions``.
"""

from .base import (
    EtcdAuthError,
    create_error_response,
)
from .domain import ConfigurationError

__all__ = [
    "EtcdAuthError",
    "create_error_response",
    "ConfigurationError",
]
