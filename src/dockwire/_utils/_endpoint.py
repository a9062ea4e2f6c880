import json
import re
from dataclasses import dataclass
from typing import Any, Mapping, Optional
from urllib.parse import quote, urlencode, urlsplit

from .constants import UNIX_SOCKET_BASE_URL

_API_VERSION_PATTERN = re.compile(r"^\d+\.\d+$")


@dataclass(frozen=True)
class Endpoint:
    """Resolved daemon address.

    `base_url` is the http(s) URL requests are addressed to. When `uds` is set
    the connection goes through that unix socket instead of TCP.
    """

    base_url: str
    uds: Optional[str] = None


def resolve_endpoint(endpoint_base_uri: str, is_tls: bool = False) -> Endpoint:
    """Turn a DOCKER_HOST style address into an Endpoint.

    Examples:
        >>> resolve_endpoint("tcp://10.0.0.5:2376", is_tls=True)
        Endpoint(base_url='https://10.0.0.5:2376', uds=None)
        >>> resolve_endpoint("unix:///var/run/docker.sock")
        Endpoint(base_url='http://localhost', uds='/var/run/docker.sock')
    """
    if not endpoint_base_uri:
        raise ValueError("endpoint_base_uri must not be empty")

    parts = urlsplit(endpoint_base_uri)
    scheme = parts.scheme.lower()

    if scheme == "unix":
        socket_path = parts.path or parts.netloc
        if not socket_path:
            raise ValueError(f"Missing socket path in {endpoint_base_uri!r}")
        return Endpoint(base_url=UNIX_SOCKET_BASE_URL, uds=socket_path)

    if scheme == "tcp":
        scheme = "https" if is_tls else "http"
    elif scheme not in ("http", "https"):
        raise ValueError(f"Unsupported endpoint scheme {parts.scheme!r}")

    if not parts.netloc:
        raise ValueError(f"Missing host in {endpoint_base_uri!r}")

    base_url = f"{scheme}://{parts.netloc}{parts.path.rstrip('/')}"
    return Endpoint(base_url=base_url)


def validate_api_version(version: Optional[str]) -> Optional[str]:
    if version is None:
        return None
    version = version.strip().lstrip("v")
    if not _API_VERSION_PATTERN.match(version):
        raise ValueError(f"Invalid API version {version!r}, expected MAJOR.MINOR")
    return version


def _encode_query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple, dict)):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


def build_query_string(query: Optional[Mapping[str, Any]]) -> str:
    if not query:
        return ""
    pairs = [
        (key, _encode_query_value(value))
        for key, value in query.items()
        if value is not None
    ]
    return urlencode(pairs, quote_via=quote)


def build_uri(
    endpoint: Endpoint,
    api_version: Optional[str],
    path: str,
    query: Optional[Mapping[str, Any]] = None,
) -> str:
    """Combine base address, API version, path and query into the request URL."""
    relative = path.lstrip("/")
    if api_version is not None:
        relative = f"v{api_version}/{relative}"

    uri = f"{endpoint.base_url}/{relative}"
    query_string = build_query_string(query)
    if query_string:
        uri = f"{uri}?{query_string}"
    return uri
