from typing import AsyncGenerator

import pytest

from dockwire import DockerClient, DockerClientConfiguration


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    for name in (
        "DOCKER_HOST",
        "DOCKER_API_VERSION",
        "DOCKER_CLIENT_TIMEOUT",
        "DOCKER_TLS_VERIFY",
        "DOCKER_CERT_PATH",
        "DOCKER_DEBUG",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def base_url() -> str:
    return "http://localhost:2375"


@pytest.fixture
def version() -> str:
    return "1.43"


@pytest.fixture
def api_url(base_url: str, version: str) -> str:
    return f"{base_url}/v{version}"


@pytest.fixture
def config(base_url: str) -> DockerClientConfiguration:
    return DockerClientConfiguration(
        endpoint_base_uri=base_url.replace("http://", "tcp://"),
        default_timeout=30.0,
    )


@pytest.fixture
async def client(
    config: DockerClientConfiguration, version: str
) -> AsyncGenerator[DockerClient, None]:
    async with config.create_client(version) as docker_client:
        yield docker_client
