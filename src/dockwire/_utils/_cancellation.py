import math
from contextlib import contextmanager
from logging import getLogger
from typing import Generator, Optional, Set

import anyio

from ..models.errors import DockerCancelledError, DockerTimeoutError
from .constants import INFINITE_TIMEOUT

logger = getLogger("dockwire")


class CancellationToken:
    """Caller-owned cancellation signal.

    A token may be shared by any number of in-flight requests. Calling
    `cancel()` cancels every request currently linked to it and every request
    started with it afterwards.
    """

    def __init__(self) -> None:
        self._cancelled = False
        self._scopes: Set[anyio.CancelScope] = set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True
        for scope in list(self._scopes):
            scope.cancel()

    @contextmanager
    def _link(self, scope: anyio.CancelScope) -> Generator[None, None, None]:
        if self._cancelled:
            scope.cancel()
        self._scopes.add(scope)
        try:
            yield
        finally:
            self._scopes.discard(scope)


@contextmanager
def compose_cancellation(
    token: Optional[CancellationToken], timeout: float
) -> Generator[anyio.CancelScope, None, None]:
    """Merge a caller token and a timeout into one single-use cancel scope.

    The scope fires on whichever comes first. With `INFINITE_TIMEOUT` no
    deadline is armed and only the token can cancel. Work cancelled by the
    scope surfaces as DockerCancelledError (token) or DockerTimeoutError
    (deadline) once the block exits.

    Args:
        token: The caller's cancellation token, if any.
        timeout: Seconds before the deadline fires, or INFINITE_TIMEOUT.

    Yields:
        anyio.CancelScope: The composed scope.
    """
    if timeout < 0:
        raise ValueError(f"timeout must be non-negative, got {timeout}")

    if timeout == INFINITE_TIMEOUT:
        deadline = math.inf
    else:
        deadline = anyio.current_time() + timeout

    with anyio.CancelScope(deadline=deadline) as scope:
        if token is None:
            yield scope
        else:
            with token._link(scope):
                yield scope

    if scope.cancelled_caught:
        if token is not None and token.cancelled:
            logger.debug("Request cancelled by caller token")
            raise DockerCancelledError()
        logger.debug(f"Request timed out after {timeout}s")
        raise DockerTimeoutError(timeout)
