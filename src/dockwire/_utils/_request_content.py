from abc import ABC, abstractmethod
from collections.abc import AsyncIterable as AsyncIterableABC
from dataclasses import dataclass
from typing import Any, AsyncIterable, AsyncIterator, Iterable, Optional, Union

from ._serializer import JsonSerializer

RawContent = Union[bytes, Iterable[bytes], AsyncIterable[bytes]]
RequestBodyContent = Union[bytes, AsyncIterable[bytes]]


@dataclass(frozen=True)
class RequestBody:
    content: RequestBodyContent
    media_type: Optional[str] = None


class RequestContent(ABC):
    """Lazily materialized request body.

    `get_content` is called at most once per request, so implementations may
    do expensive or one-shot work there (reading a file, opening a tar stream).
    """

    @abstractmethod
    def get_content(self) -> RequestBody: ...


class JsonRequestContent(RequestContent):
    def __init__(self, value: Any, serializer: Optional[JsonSerializer] = None) -> None:
        self._value = value
        self._serializer = serializer or JsonSerializer()

    def get_content(self) -> RequestBody:
        return RequestBody(
            content=self._serializer.serialize(self._value),
            media_type="application/json",
        )


async def _iterate_async(chunks: Iterable[bytes]) -> AsyncIterator[bytes]:
    for chunk in chunks:
        yield chunk


class BinaryRequestContent(RequestContent):
    """Raw body: bytes, a sync iterable of chunks or an async iterable of chunks.

    Sync iterables are adapted to async iteration, since the shared client is
    an httpx.AsyncClient.
    """

    def __init__(
        self, content: RawContent, media_type: str = "application/octet-stream"
    ) -> None:
        self._content = content
        self._media_type = media_type

    def get_content(self) -> RequestBody:
        content = self._content
        if isinstance(content, (bytes, bytearray, memoryview)):
            content = bytes(content)
        elif not isinstance(content, AsyncIterableABC):
            content = _iterate_async(content)
        return RequestBody(content=content, media_type=self._media_type)
