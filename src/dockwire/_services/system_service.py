from typing import TYPE_CHECKING, AsyncIterator, Dict, List, Optional

from .._utils import CancellationToken
from ..models.system import Message, SystemInfoResponse, VersionResponse

if TYPE_CHECKING:
    from .._docker_client import DockerClient


class SystemService:
    """Daemon-wide operations: health check, version, info and events."""

    def __init__(self, client: "DockerClient") -> None:
        self._client = client

    async def ping(self, *, token: Optional[CancellationToken] = None) -> str:
        """Check that the daemon is reachable.

        Returns:
            str: The body of `GET /_ping`, normally "OK".
        """
        response = await self._client.make_request("GET", "_ping", token=token)
        return response.body or ""

    async def get_version(
        self, *, token: Optional[CancellationToken] = None
    ) -> VersionResponse:
        """Retrieve version information of the daemon.

        Examples:
            ```python
            version = await client.system.get_version()
            print(version.api_version)
            ```
        """
        response = await self._client.make_request("GET", "version", token=token)
        return self._client.json_serializer.deserialize(
            response.body or "{}", VersionResponse
        )

    async def get_system_info(
        self, *, token: Optional[CancellationToken] = None
    ) -> SystemInfoResponse:
        response = await self._client.make_request("GET", "info", token=token)
        return self._client.json_serializer.deserialize(
            response.body or "{}", SystemInfoResponse
        )

    async def monitor_events(
        self,
        *,
        since: Optional[str] = None,
        until: Optional[str] = None,
        filters: Optional[Dict[str, List[str]]] = None,
        token: Optional[CancellationToken] = None,
    ) -> AsyncIterator[Message]:
        """Stream daemon events until the daemon ends the stream or the caller stops iterating.

        Args:
            since (Optional[str]): Show events created since this timestamp.
            until (Optional[str]): Stop streaming at this timestamp.
            filters (Optional[Dict[str, List[str]]]): Event filters, e.g.
                `{"type": ["container"]}`.
            token (Optional[CancellationToken]): Cancels waiting for the
                response headers.

        Yields:
            Message: One decoded event per line of the stream.
        """
        query = {"since": since, "until": until, "filters": filters}
        stream = await self._client.make_request_for_stream(
            "GET", "events", query=query, token=token
        )
        async with stream:
            async for line in stream.aiter_lines():
                if not line.strip():
                    continue
                yield self._client.json_serializer.deserialize(line, Message)
