import pytest

from dockwire._utils import Endpoint, build_uri, resolve_endpoint, validate_api_version


class TestResolveEndpoint:
    @pytest.mark.parametrize(
        "uri,is_tls,expected",
        [
            ("tcp://10.0.0.5:2375", False, Endpoint("http://10.0.0.5:2375")),
            ("tcp://10.0.0.5:2376", True, Endpoint("https://10.0.0.5:2376")),
            ("http://daemon:2375/", False, Endpoint("http://daemon:2375")),
            ("https://daemon/docker", False, Endpoint("https://daemon/docker")),
            (
                "unix:///var/run/docker.sock",
                False,
                Endpoint("http://localhost", uds="/var/run/docker.sock"),
            ),
            (
                "unix:/run/user/1000/docker.sock",
                False,
                Endpoint("http://localhost", uds="/run/user/1000/docker.sock"),
            ),
        ],
    )
    def test_supported_schemes(self, uri: str, is_tls: bool, expected: Endpoint):
        assert resolve_endpoint(uri, is_tls=is_tls) == expected

    @pytest.mark.parametrize(
        "uri", ["", "npipe://./pipe/docker_engine", "tcp://", "unix://"]
    )
    def test_invalid_endpoints(self, uri: str):
        with pytest.raises(ValueError):
            resolve_endpoint(uri)


class TestValidateApiVersion:
    def test_valid_versions(self):
        assert validate_api_version("1.43") == "1.43"
        assert validate_api_version("v1.41") == "1.41"
        assert validate_api_version(None) is None

    @pytest.mark.parametrize("version", ["1", "latest", "1.2.3", ""])
    def test_invalid_versions(self, version: str):
        with pytest.raises(ValueError):
            validate_api_version(version)


class TestBuildUri:
    def test_versioned_path(self):
        endpoint = Endpoint("http://localhost:2375")

        assert build_uri(endpoint, "1.43", "/info") == "http://localhost:2375/v1.43/info"
        assert build_uri(endpoint, None, "info") == "http://localhost:2375/info"

    def test_query_string(self):
        endpoint = Endpoint("http://localhost:2375")

        uri = build_uri(
            endpoint,
            "1.43",
            "events",
            {"since": None, "all": False, "filters": {"type": ["container"]}},
        )

        assert uri == (
            "http://localhost:2375/v1.43/events"
            "?all=false&filters=%7B%22type%22%3A%5B%22container%22%5D%7D"
        )

    def test_empty_query_adds_nothing(self):
        endpoint = Endpoint("http://localhost:2375")

        assert build_uri(endpoint, "1.43", "info", {}) == "http://localhost:2375/v1.43/info"
