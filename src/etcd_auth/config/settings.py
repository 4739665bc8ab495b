"""
Connection settings for the etcd auth client.

Values come from ``ETCD_*`` environment variables or a ``.env`` file.
"""
import re
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_ENDPOINT_PATTERN = re.compile(r"^(\[[0-9a-fA-F:.]+\]|[A-Za-z0-9_.-]+):(\d{1,5})$")


class EtcdAuthSettings(BaseSettings):
    """Settings for reaching an etcd cluster's Auth service."""

    model_config = SettingsConfigDict(
        env_prefix="ETCD_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Target
    endpoint: str = Field(default="localhost:2379", description="host:port of an etcd member")
    authority: Optional[str] = Field(default=None, description="Override for the TLS authority / :authority header")

    # Transport security
    secure: bool = Field(default=False)
    root_certificates_path: Optional[str] = Field(default=None)
    private_key_path: Optional[str] = Field(default=None)
    certificate_chain_path: Optional[str] = Field(default=None)

    # Per-call deadline handed to grpc; None leaves calls unbounded
    call_timeout: Optional[float] = Field(default=None)

    @field_validator("endpoint")
    @classmethod
    def validate_endpoint(cls, value: str) -> str:
        value = value.strip()
        match = _ENDPOINT_PATTERN.match(value)
        if not match:
            raise ValueError(f"endpoint must be in 'host:port' form, got: {value!r}")
        port = int(match.group(2))
        if not 0 < port < 65536:
            raise ValueError(f"endpoint port out of range: {port}")
        return value

    @field_validator("call_timeout")
    @classmethod
    def validate_call_timeout(cls, value: Optional[float]) -> Optional[float]:
        if value is not None and value <= 0:
            raise ValueError("call_timeout must be positive")
        return value

    @property
    def has_client_certificate(self) -> bool:
        """Check if mutual TLS material is configured."""
        return bool(self.private_key_path and self.certificate_chain_path)


@lru_cache()
def get_settings() -> EtcdAuthSettings:
    """Get cached settings instance."""
    return EtcdAuthSettings()
