"""Configuration module for etcd-auth.

Typed connection settings backed by pydantic-settings plus the logging
setup used by applications embedding the client.
"""

from .settings import EtcdAuthSettings, get_settings

from .logging_config import (
    setup_logging,
    get_logger,
    LogLevel,
    LogVerbosity,
    LogFormat,
    LoggingConfig,
)

__all__ = [
    "EtcdAuthSettings",
    "get_settings",
    "setup_logging",
    "get_logger",
    "LogLevel",
    "LogVerbosity",
    "LogFormat",
    "LoggingConfig",
]
