"""Auth client factory."""

import asyncio
import logging
from typing import Optional, Sequence, Tuple

import grpc

from .....config import EtcdAuthSettings, get_settings
from .....core.exceptions import ConfigurationError
from ...application.services import AuthClient
from ..adapters import GrpcAuthStub

logger = logging.getLogger(__name__)


class AuthClientFactory:
    """Auth client factory following maximum separation principle.

    Handles ONLY channel, stub and client instantiation from settings.
    Channel lifetime belongs to the caller: close the channel returned by
    ``create_channel`` (or passed to ``create_client``) when done.
    """

    def __init__(self, settings: Optional[EtcdAuthSettings] = None):
        """Initialize auth client factory.

        Args:
            settings: Connection settings; defaults to ``get_settings()``
        """
        self.settings = settings or get_settings()
        self._validate_config()

    def _validate_config(self) -> None:
        """Validate connection settings.

        Raises:
            ConfigurationError: If TLS settings are inconsistent
        """
        settings = self.settings

        if bool(settings.private_key_path) != bool(settings.certificate_chain_path):
            raise ConfigurationError(
                "private_key_path and certificate_chain_path must be set together",
                details={"endpoint": settings.endpoint},
            )

        if not settings.secure and (settings.root_certificates_path or settings.has_client_certificate):
            raise ConfigurationError(
                "TLS material configured but secure is disabled",
                details={"endpoint": settings.endpoint},
            )

        logger.debug(f"etcd auth configuration validated for {settings.endpoint}")

    @staticmethod
    def _read_file(path: Optional[str]) -> Optional[bytes]:
        if not path:
            return None
        try:
            with open(path, "rb") as fp:
                return fp.read()
        except OSError as e:
            raise ConfigurationError(
                f"Cannot read TLS file {path}: {e}",
                details={"path": path},
            ) from e

    def create_channel(self) -> grpc.Channel:
        """Create a channel to the configured endpoint.

        Returns:
            Insecure or TLS channel, depending on ``settings.secure``

        Raises:
            ConfigurationError: If TLS material cannot be loaded
        """
        settings = self.settings
        options = []

        if settings.secure:
            credentials = grpc.ssl_channel_credentials(
                root_certificates=self._read_file(settings.root_certificates_path),
                private_key=self._read_file(settings.private_key_path),
                certificate_chain=self._read_file(settings.certificate_chain_path),
            )
            if settings.authority:
                options.append(("grpc.ssl_target_name_override", settings.authority))
            logger.info(f"Opening TLS channel to etcd at {settings.endpoint}")
            return grpc.secure_channel(settings.endpoint, credentials, options=options)

        if settings.authority:
            options.append(("grpc.default_authority", settings.authority))
        logger.info(f"Opening insecure channel to etcd at {settings.endpoint}")
        return grpc.insecure_channel(settings.endpoint, options=options)

    def create_stub(
        self,
        channel: grpc.Channel,
        metadata: Optional[Sequence[Tuple[str, str]]] = None
    ) -> GrpcAuthStub:
        return GrpcAuthStub(channel, timeout=self.settings.call_timeout, metadata=metadata)

    def create_client(
        self,
        channel: Optional[grpc.Channel] = None,
        loop: Optional[asyncio.AbstractEventLoop] = None,
        metadata: Optional[Sequence[Tuple[str, str]]] = None
    ) -> AuthClient:
        """Create an auth client.

        Args:
            channel: Channel to use; a new one is created when omitted
            loop: Loop for continuations; defaults to the running loop
            metadata: Metadata sent with every call (e.g. an auth token)

        Returns:
            Configured AuthClient

        Raises:
            ConfigurationError: If no loop is given outside a running loop
        """
        if loop is None:
            try:
                loop = asyncio.get_running_loop()
            except RuntimeError as e:
                raise ConfigurationError(
                    "create_client needs a running event loop or an explicit loop"
                ) from e

        if channel is None:
            channel = self.create_channel()

        return AuthClient(self.create_stub(channel, metadata=metadata), loop)
