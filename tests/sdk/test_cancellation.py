import math

import anyio
import pytest

from dockwire import (
    INFINITE_TIMEOUT,
    CancellationToken,
    DockerCancelledError,
    DockerTimeoutError,
)
from dockwire._utils import compose_cancellation

pytestmark = pytest.mark.anyio


class TestComposeCancellation:
    async def test_infinite_timeout_arms_no_deadline(self):
        with compose_cancellation(None, INFINITE_TIMEOUT) as scope:
            assert scope.deadline == math.inf

    async def test_finite_timeout_arms_deadline(self):
        before = anyio.current_time()

        with compose_cancellation(None, 10) as scope:
            assert before + 10 <= scope.deadline <= anyio.current_time() + 10

    async def test_completes_within_timeout(self):
        with compose_cancellation(None, 5):
            await anyio.sleep(0)

    async def test_timeout_raises_timeout_error(self):
        with pytest.raises(DockerTimeoutError) as exc_info:
            with compose_cancellation(None, 0.01):
                await anyio.sleep(5)

        assert exc_info.value.timeout == 0.01
        assert isinstance(exc_info.value, TimeoutError)

    async def test_cancelled_token_raises_cancelled_error(self):
        token = CancellationToken()
        token.cancel()

        with pytest.raises(DockerCancelledError) as exc_info:
            with compose_cancellation(token, INFINITE_TIMEOUT):
                await anyio.sleep(5)

        assert not isinstance(exc_info.value, DockerTimeoutError)

    async def test_token_cancelled_while_waiting(self):
        token = CancellationToken()

        async def cancel_soon() -> None:
            await anyio.sleep(0.01)
            token.cancel()

        async with anyio.create_task_group() as tg:
            tg.start_soon(cancel_soon)
            with pytest.raises(DockerCancelledError):
                with compose_cancellation(token, 10):
                    await anyio.sleep(5)

        assert token.cancelled

    async def test_timeout_fires_before_token(self):
        token = CancellationToken()

        with pytest.raises(DockerTimeoutError):
            with compose_cancellation(token, 0.01):
                await anyio.sleep(5)

        assert not token.cancelled

    async def test_token_link_is_released(self):
        token = CancellationToken()

        with compose_cancellation(token, 5):
            assert len(token._scopes) == 1

        with pytest.raises(DockerTimeoutError):
            with compose_cancellation(token, 0.01):
                await anyio.sleep(5)

        assert token._scopes == set()

    async def test_errors_inside_scope_propagate(self):
        with pytest.raises(KeyError):
            with compose_cancellation(CancellationToken(), 5):
                raise KeyError("inner")

    async def test_negative_timeout_is_rejected(self):
        with pytest.raises(ValueError):
            with compose_cancellation(None, -1):
                pass
