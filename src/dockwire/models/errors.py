from typing import Optional


class DockerError(Exception):
    """Base class for every error raised by dockwire."""


class DockerApiError(DockerError):
    """The daemon answered with a status code outside the success range.

    Attributes:
        status_code: The HTTP status code returned by the daemon.
        response_body: The raw body text, or None when the body was not
            buffered (stream calls).
    """

    def __init__(self, status_code: int, response_body: Optional[str]) -> None:
        self.status_code = status_code
        self.response_body = response_body
        super().__init__(
            f"Docker API responded with status code={status_code}, response={response_body}"
        )


class DockerContainerNotFoundError(DockerApiError):
    pass


class DockerImageNotFoundError(DockerApiError):
    pass


class DockerNetworkNotFoundError(DockerApiError):
    pass


class DockerCancelledError(DockerError):
    """The caller's cancellation token fired before the request completed."""

    def __init__(self, message: str = "The request was cancelled.") -> None:
        self.message = message
        super().__init__(self.message)


class DockerTimeoutError(DockerCancelledError, TimeoutError):
    """The request did not complete within its timeout."""

    def __init__(self, timeout: Optional[float] = None) -> None:
        self.timeout = timeout
        if timeout is None:
            message = "The request timed out."
        else:
            message = f"The request timed out after {timeout} seconds."
        super().__init__(message)


class DockerConnectionError(DockerError):
    """The daemon could not be reached or the connection broke."""


class DockerCertificateRejectedError(DockerConnectionError):
    """The server certificate validation callback rejected the daemon."""
