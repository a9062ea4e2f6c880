from contextlib import contextmanager
from typing import Callable, Generator, Optional

import httpx

from ..models.errors import (
    DockerApiError,
    DockerConnectionError,
    DockerTimeoutError,
)

ApiResponseErrorHandler = Callable[[int, Optional[str]], None]


@contextmanager
def handle_transport_errors(
    timeout: Optional[float] = None,
) -> Generator[None, None, None]:
    """Context manager converting httpx transport failures into dockwire errors.

    Status codes are not inspected here; only failures to obtain or read a
    response are converted.

    Args:
        timeout: The timeout reported on a DockerTimeoutError, if known.

    Raises:
        DockerTimeoutError: When httpx gives up waiting on the daemon.
        DockerConnectionError: For any other transport level failure.
    """
    try:
        yield
    except httpx.TimeoutException as e:
        raise DockerTimeoutError(timeout) from e
    except httpx.TransportError as e:
        raise DockerConnectionError(str(e) or type(e).__name__) from e


def raise_for_status_code(
    status_code: int,
    error_factory: Callable[[int, Optional[str]], Exception] = DockerApiError,
) -> ApiResponseErrorHandler:
    """Build an error handler raising `error_factory(status, body)` for one status code."""

    def handler(response_status: int, response_body: Optional[str]) -> None:
        if response_status == status_code:
            raise error_factory(response_status, response_body)

    return handler
