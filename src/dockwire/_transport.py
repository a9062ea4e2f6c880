from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, Any, Optional, Union

import httpx

from ._utils._endpoint import Endpoint
from ._utils._ssl_context import create_ssl_context
from ._utils.constants import DEFAULT_MAX_REDIRECTS, DEFAULT_TRANSPORT_TIMEOUT

if TYPE_CHECKING:
    import ssl

    from .credentials import Credentials


@dataclass
class TransportHandler:
    """Mutable transport settings that credentials configure in place.

    One handler is rendered into the single httpx.AsyncClient a DockerClient
    keeps for its whole lifetime.
    """

    verify: Union["ssl.SSLContext", bool] = True
    trust_env: bool = True
    proxy: Optional[str] = None
    follow_redirects: bool = False
    max_redirects: int = DEFAULT_MAX_REDIRECTS
    uds: Optional[str] = None
    auth: Optional[httpx.Auth] = None

    def client_kwargs(self) -> dict[str, Any]:
        kwargs: dict[str, Any] = {
            "verify": self.verify,
            "trust_env": self.trust_env,
            "follow_redirects": self.follow_redirects,
            "max_redirects": self.max_redirects,
        }
        if self.proxy is not None:
            kwargs["proxy"] = self.proxy
        if self.auth is not None:
            kwargs["auth"] = self.auth
        if self.uds is not None:
            kwargs["transport"] = httpx.AsyncHTTPTransport(
                uds=self.uds, verify=self.verify
            )
        return kwargs


def create_transport(
    credentials: "Credentials",
    endpoint: Endpoint,
    timeout: float = DEFAULT_TRANSPORT_TIMEOUT,
) -> httpx.AsyncClient:
    """Build the shared AsyncClient for one DockerClient."""
    base_handler = TransportHandler(
        verify=create_ssl_context() if endpoint.base_url.startswith("https") else True,
        uds=endpoint.uds,
    )
    handler = credentials.get_handler(base_handler)

    getLogger("dockwire").debug(
        f"Transport: {endpoint.base_url} uds={endpoint.uds} "
        f"tls={credentials.is_tls_credentials()}"
    )

    return httpx.AsyncClient(
        timeout=httpx.Timeout(timeout),
        **handler.client_kwargs(),
    )
