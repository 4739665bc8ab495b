"""Domain-specific exceptions for etcd-auth."""

from .base import EtcdAuthError


# Configuration Errors
class ConfigurationError(EtcdAuthError):
    """Raised when there's a configuration issue."""
    pass
