import pytest
from pytest_httpx import HTTPXMock

from dockwire import CancellationToken, DockerApiError, DockerClient
from dockwire.models import Message, SystemInfoResponse, VersionResponse

pytestmark = pytest.mark.anyio


class TestSystemService:
    async def test_ping(self, httpx_mock: HTTPXMock, client: DockerClient, api_url: str):
        httpx_mock.add_response(url=f"{api_url}/_ping", text="OK")

        assert await client.system.ping() == "OK"

    async def test_get_version(
        self, httpx_mock: HTTPXMock, client: DockerClient, api_url: str
    ):
        httpx_mock.add_response(
            url=f"{api_url}/version",
            json={
                "Version": "24.0.7",
                "ApiVersion": "1.43",
                "MinAPIVersion": "1.12",
                "Os": "linux",
                "Arch": "amd64",
                "BuildTime": "2023-10-26T09:08:17.000000000+00:00",
            },
        )

        version = await client.system.get_version()

        assert isinstance(version, VersionResponse)
        assert version.version == "24.0.7"
        assert version.api_version == "1.43"
        assert version.min_api_version == "1.12"
        assert version.model_extra == {"BuildTime": "2023-10-26T09:08:17.000000000+00:00"}

    async def test_get_system_info(
        self, httpx_mock: HTTPXMock, client: DockerClient, api_url: str
    ):
        httpx_mock.add_response(
            url=f"{api_url}/info",
            json={"ID": "abc", "Containers": 3, "ContainersRunning": 1},
        )

        info = await client.system.get_system_info()

        assert isinstance(info, SystemInfoResponse)
        assert info.containers == 3
        assert info.containers_running == 1

    async def test_get_system_info_error(
        self, httpx_mock: HTTPXMock, client: DockerClient, api_url: str
    ):
        httpx_mock.add_response(url=f"{api_url}/info", status_code=500, text="boom")

        with pytest.raises(DockerApiError) as exc_info:
            await client.system.get_system_info()

        assert exc_info.value.status_code == 500
        assert exc_info.value.response_body == "boom"

    async def test_monitor_events(
        self, httpx_mock: HTTPXMock, client: DockerClient, api_url: str
    ):
        httpx_mock.add_response(
            url=f'{api_url}/events?filters={{"type":["container"]}}',
            content=(
                b'{"Type":"container","Action":"start","Actor":{"ID":"abc","Attributes":{"name":"web"}},"time":1700000000}\n'
                b"\n"
                b'{"Type":"container","Action":"die","Actor":{"ID":"abc"},"time":1700000005}\n'
            ),
        )

        events = [
            event
            async for event in client.system.monitor_events(
                filters={"type": ["container"]}
            )
        ]

        assert [type(event) for event in events] == [Message, Message]
        assert [event.action for event in events] == ["start", "die"]
        assert events[0].actor is not None
        assert events[0].actor.attributes == {"name": "web"}
        assert events[1].time == 1700000005

    async def test_monitor_events_token_only_bounds_headers(
        self, httpx_mock: HTTPXMock, client: DockerClient, api_url: str
    ):
        httpx_mock.add_response(
            url=f"{api_url}/events",
            content=(
                b'{"Type":"container","Action":"start"}\n'
                b'{"Type":"container","Action":"die"}\n'
            ),
        )
        token = CancellationToken()
        actions = []

        async for event in client.system.monitor_events(token=token):
            actions.append(event.action)
            token.cancel()

        assert actions == ["start", "die"]
