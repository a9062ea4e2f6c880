import os
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ._utils._logs import setup_logging
from ._utils.constants import (
    CA_FILE_NAME,
    CERT_FILE_NAME,
    DEFAULT_ENDPOINT,
    DEFAULT_TIMEOUT,
    DEFAULT_TRANSPORT_TIMEOUT,
    ENV_DOCKER_API_VERSION,
    ENV_DOCKER_CERT_PATH,
    ENV_DOCKER_CLIENT_TIMEOUT,
    ENV_DOCKER_DEBUG,
    ENV_DOCKER_HOST,
    ENV_DOCKER_TLS_VERIFY,
    KEY_FILE_NAME,
)
from .credentials import AnonymousCredentials, CertificateCredentials, Credentials

if TYPE_CHECKING:
    from ._docker_client import DockerClient

_TRUTHY = ("1", "true", "yes", "on")


class DockerClientConfiguration(BaseModel):
    """Connection settings shared by the clients created from it.

    Attributes:
        endpoint_base_uri: Daemon address, `unix://`, `tcp://`, `http://` or
            `https://`.
        credentials: Transport security strategy.
        default_timeout: Seconds allowed for buffered calls that do not pass
            their own timeout.
        transport_timeout: Connect/write timeout of the underlying httpx
            client, and read timeout of buffered calls.
        api_version: API version used when `create_client` gets none.
        debug: Enable debug logging for the `dockwire` logger.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    endpoint_base_uri: str = DEFAULT_ENDPOINT
    credentials: Credentials = Field(default_factory=AnonymousCredentials)
    default_timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    transport_timeout: float = Field(default=DEFAULT_TRANSPORT_TIMEOUT, gt=0)
    api_version: Optional[str] = None
    debug: bool = False

    @field_validator("endpoint_base_uri")
    @classmethod
    def endpoint_not_empty(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("endpoint_base_uri must not be empty")
        return value.strip()

    @classmethod
    def from_env(cls) -> "DockerClientConfiguration":
        """Build a configuration from DOCKER_* environment variables.

        A `.env` file in the working directory is loaded first. As with the
        docker CLI, any non-empty DOCKER_TLS_VERIFY enables TLS; the client
        certificate, key and CA are then read from DOCKER_CERT_PATH (default
        `~/.docker`).
        """
        load_dotenv()

        kwargs: dict = {}
        if host := os.environ.get(ENV_DOCKER_HOST):
            kwargs["endpoint_base_uri"] = host
        if api_version := os.environ.get(ENV_DOCKER_API_VERSION):
            kwargs["api_version"] = api_version
        if timeout := os.environ.get(ENV_DOCKER_CLIENT_TIMEOUT):
            kwargs["default_timeout"] = float(timeout)
        kwargs["debug"] = os.environ.get(ENV_DOCKER_DEBUG, "").lower() in _TRUTHY

        if os.environ.get(ENV_DOCKER_TLS_VERIFY):
            cert_path = Path(
                os.path.expanduser(os.environ.get(ENV_DOCKER_CERT_PATH, "~/.docker"))
            )
            kwargs["credentials"] = CertificateCredentials(
                cert_file=str(cert_path / CERT_FILE_NAME),
                key_file=str(cert_path / KEY_FILE_NAME),
                ca_file=str(cert_path / CA_FILE_NAME),
            )

        return cls(**kwargs)

    def create_client(self, requested_api_version: Optional[str] = None) -> "DockerClient":
        from ._docker_client import DockerClient

        setup_logging(self.debug)
        return DockerClient(self, requested_api_version or self.api_version)

    def close(self) -> None:
        self.credentials.close()
