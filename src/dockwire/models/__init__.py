from .errors import (
    DockerApiError,
    DockerCancelledError,
    DockerCertificateRejectedError,
    DockerConnectionError,
    DockerContainerNotFoundError,
    DockerError,
    DockerImageNotFoundError,
    DockerNetworkNotFoundError,
    DockerTimeoutError,
)
from .responses import DockerApiResponse, DockerApiStreamedResponse
from .system import Actor, Message, SystemInfoResponse, VersionResponse

__all__ = [
    "Actor",
    "DockerApiError",
    "DockerApiResponse",
    "DockerApiStreamedResponse",
    "DockerCancelledError",
    "DockerCertificateRejectedError",
    "DockerConnectionError",
    "DockerContainerNotFoundError",
    "DockerError",
    "DockerImageNotFoundError",
    "DockerNetworkNotFoundError",
    "DockerTimeoutError",
    "Message",
    "SystemInfoResponse",
    "VersionResponse",
]
