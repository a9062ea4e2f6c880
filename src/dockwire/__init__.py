"""Asynchronous HTTP client for Docker-compatible container engine daemons."""

from ._config import DockerClientConfiguration
from ._docker_client import CompletionOption, DockerClient
from ._streaming import ResponseStream
from ._utils import (
    ApiResponseErrorHandler,
    BinaryRequestContent,
    CancellationToken,
    JsonRequestContent,
    JsonSerializer,
    RequestBody,
    RequestContent,
    raise_for_status_code,
)
from ._utils.constants import INFINITE_TIMEOUT
from .credentials import (
    AnonymousCredentials,
    BasicAuthCredentials,
    CertificateCredentials,
    Credentials,
)
from .models import (
    DockerApiError,
    DockerApiResponse,
    DockerApiStreamedResponse,
    DockerCancelledError,
    DockerCertificateRejectedError,
    DockerConnectionError,
    DockerContainerNotFoundError,
    DockerError,
    DockerImageNotFoundError,
    DockerNetworkNotFoundError,
    DockerTimeoutError,
)

__all__ = [
    "AnonymousCredentials",
    "ApiResponseErrorHandler",
    "BasicAuthCredentials",
    "BinaryRequestContent",
    "CancellationToken",
    "CertificateCredentials",
    "CompletionOption",
    "Credentials",
    "DockerApiError",
    "DockerApiResponse",
    "DockerApiStreamedResponse",
    "DockerCancelledError",
    "DockerCertificateRejectedError",
    "DockerClient",
    "DockerClientConfiguration",
    "DockerConnectionError",
    "DockerContainerNotFoundError",
    "DockerError",
    "DockerImageNotFoundError",
    "DockerNetworkNotFoundError",
    "DockerTimeoutError",
    "INFINITE_TIMEOUT",
    "JsonRequestContent",
    "JsonSerializer",
    "RequestBody",
    "RequestContent",
    "ResponseStream",
    "raise_for_status_code",
]
