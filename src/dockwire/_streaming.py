from types import TracebackType
from typing import AsyncIterator, Optional, Type

import httpx

from ._utils._errors import handle_transport_errors


class ResponseStream:
    """Live body of a response returned after headers-only completion.

    The caller owns the stream and must release it, either with `aclose()` or
    by using it as an async context manager:

        async with await client.make_request_for_stream("GET", "events") as stream:
            async for line in stream.aiter_lines():
                ...
    """

    def __init__(self, response: httpx.Response) -> None:
        self._response = response

    @property
    def is_closed(self) -> bool:
        return self._response.is_closed

    async def aiter_bytes(self, chunk_size: Optional[int] = None) -> AsyncIterator[bytes]:
        with handle_transport_errors():
            async for chunk in self._response.aiter_bytes(chunk_size):
                yield chunk

    async def aiter_lines(self) -> AsyncIterator[str]:
        with handle_transport_errors():
            async for line in self._response.aiter_lines():
                yield line

    def __aiter__(self) -> AsyncIterator[bytes]:
        return self.aiter_bytes()

    async def read(self) -> bytes:
        """Read the rest of the stream into memory."""
        with handle_transport_errors():
            return await self._response.aread()

    async def aclose(self) -> None:
        await self._response.aclose()

    async def __aenter__(self) -> "ResponseStream":
        return self

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_value: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        await self.aclose()
