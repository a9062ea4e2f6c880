from dataclasses import dataclass
from typing import Optional

from httpx import Headers

from .._streaming import ResponseStream


@dataclass(frozen=True)
class DockerApiResponse:
    """Buffered daemon response. The underlying connection is already released."""

    status_code: int
    body: Optional[str]


@dataclass(frozen=True)
class DockerApiStreamedResponse:
    """Status, headers and live body of a long-lived response.

    The caller owns `body` and must close it.
    """

    status_code: int
    body: ResponseStream
    headers: Headers

    async def aclose(self) -> None:
        await self.body.aclose()
