from enum import Enum
from logging import getLogger
from types import TracebackType
from typing import TYPE_CHECKING, Any, Mapping, Optional, Sequence, Type

import httpx

from ._services import SystemService
from ._streaming import ResponseStream
from ._transport import create_transport
from ._utils import (
    ApiResponseErrorHandler,
    CancellationToken,
    JsonSerializer,
    RequestContent,
    build_uri,
    compose_cancellation,
    handle_transport_errors,
    resolve_endpoint,
    validate_api_version,
)
from ._utils.constants import (
    HEADER_CONTENT_TYPE,
    HEADER_USER_AGENT,
    INFINITE_TIMEOUT,
    USER_AGENT,
)
from .models.errors import DockerApiError
from .models.responses import DockerApiResponse, DockerApiStreamedResponse

if TYPE_CHECKING:
    from ._config import DockerClientConfiguration


class CompletionOption(str, Enum):
    RESPONSE_CONTENT_READ = "response_content_read"
    RESPONSE_HEADERS_READ = "response_headers_read"


NO_ERROR_HANDLERS: Sequence[ApiResponseErrorHandler] = ()


class DockerClient:
    """Asynchronous client for a Docker-compatible daemon.

    A client owns one httpx.AsyncClient, built from the configuration's
    credentials when the client is created and shared by every call. Close it
    with `aclose()` or use the client as an async context manager.

    Three dispatch primitives are exposed to the operation services:

    - `make_request`: buffered body, returns DockerApiResponse.
    - `make_request_for_stream`: headers-only, returns a ResponseStream.
    - `make_request_for_streamed_response`: headers-only, returns a
      DockerApiStreamedResponse that keeps status and headers.

    Examples:
        ```python
        from dockwire import DockerClientConfiguration

        async with DockerClientConfiguration().create_client("1.43") as client:
            response = await client.make_request("GET", "info")
            print(response.status_code, response.body)
        ```
    """

    def __init__(
        self,
        configuration: "DockerClientConfiguration",
        requested_api_version: Optional[str] = None,
    ) -> None:
        self._logger = getLogger("dockwire")
        self.configuration = configuration
        self.default_timeout = configuration.default_timeout
        self.json_serializer = JsonSerializer()

        self._requested_api_version = validate_api_version(requested_api_version)
        self._endpoint = resolve_endpoint(
            configuration.endpoint_base_uri,
            is_tls=configuration.credentials.is_tls_credentials(),
        )
        self._client = create_transport(
            configuration.credentials,
            self._endpoint,
            timeout=configuration.transport_timeout,
        )

        self.system = SystemService(self)

    @property
    def requested_api_version(self) -> Optional[str]:
        return self._requested_api_version

    async def make_request(
        self,
        method: str,
        path: str,
        *,
        query: Optional[Mapping[str, Any]] = None,
        body: Optional[RequestContent] = None,
        headers: Optional[Mapping[str, str]] = None,
        timeout: Optional[float] = None,
        token: Optional[CancellationToken] = None,
        error_handlers: Sequence[ApiResponseErrorHandler] = NO_ERROR_HANDLERS,
    ) -> DockerApiResponse:
        """Send a request and buffer the whole response body.

        Args:
            method (str): HTTP method.
            path (str): API path, relative to the versioned base address.
            query (Optional[Mapping[str, Any]]): Query parameters.
            body (Optional[RequestContent]): Request content, materialized once.
            headers (Optional[Mapping[str, str]]): Extra request headers.
            timeout (Optional[float]): Seconds before giving up. Defaults to
                `default_timeout`; INFINITE_TIMEOUT disables it.
            token (Optional[CancellationToken]): Caller cancellation token.
            error_handlers (Sequence[ApiResponseErrorHandler]): Handlers run in
                order against the status code and body text.

        Returns:
            DockerApiResponse: Status code and body text.

        Raises:
            ValueError: If `path` is empty.
            DockerApiError: If the status is outside [200, 400) and no handler
                raised first.
            DockerTimeoutError: If `timeout` elapsed.
            DockerCancelledError: If `token` was cancelled.
            DockerConnectionError: If the daemon could not be reached.
        """
        if timeout is None:
            timeout = self.default_timeout

        response = await self._make_request(
            timeout,
            CompletionOption.RESPONSE_CONTENT_READ,
            method,
            path,
            query,
            headers,
            body,
            token,
        )
        try:
            response_body = response.text
            self.handle_if_error_response(
                response.status_code, response_body, error_handlers
            )
            return DockerApiResponse(response.status_code, response_body)
        finally:
            await response.aclose()

    async def make_request_for_stream(
        self,
        method: str,
        path: str,
        *,
        query: Optional[Mapping[str, Any]] = None,
        body: Optional[RequestContent] = None,
        headers: Optional[Mapping[str, str]] = None,
        timeout: Optional[float] = None,
        token: Optional[CancellationToken] = None,
        error_handlers: Sequence[ApiResponseErrorHandler] = NO_ERROR_HANDLERS,
    ) -> ResponseStream:
        """Send a request and return the live body once headers arrive.

        Error handlers always receive None as the body. The timeout (infinite
        unless given) only bounds the wait for headers. The caller owns the
        returned stream and must close it.
        """
        response = await self._make_streaming_request(
            method, path, query, body, headers, timeout, token, error_handlers
        )
        return ResponseStream(response)

    async def make_request_for_streamed_response(
        self,
        method: str,
        path: str,
        *,
        query: Optional[Mapping[str, Any]] = None,
        body: Optional[RequestContent] = None,
        headers: Optional[Mapping[str, str]] = None,
        timeout: Optional[float] = None,
        token: Optional[CancellationToken] = None,
        error_handlers: Sequence[ApiResponseErrorHandler] = NO_ERROR_HANDLERS,
    ) -> DockerApiStreamedResponse:
        """Like `make_request_for_stream`, also keeping status code and headers."""
        response = await self._make_streaming_request(
            method, path, query, body, headers, timeout, token, error_handlers
        )
        return DockerApiStreamedResponse(
            response.status_code, ResponseStream(response), response.headers
        )

    async def _make_streaming_request(
        self,
        method: str,
        path: str,
        query: Optional[Mapping[str, Any]],
        body: Optional[RequestContent],
        headers: Optional[Mapping[str, str]],
        timeout: Optional[float],
        token: Optional[CancellationToken],
        error_handlers: Sequence[ApiResponseErrorHandler],
    ) -> httpx.Response:
        if timeout is None:
            timeout = INFINITE_TIMEOUT

        response = await self._make_request(
            timeout,
            CompletionOption.RESPONSE_HEADERS_READ,
            method,
            path,
            query,
            headers,
            body,
            token,
        )
        try:
            self.handle_if_error_response(response.status_code, None, error_handlers)
        except BaseException:
            await response.aclose()
            raise
        return response

    async def _make_request(
        self,
        timeout: float,
        completion_option: CompletionOption,
        method: str,
        path: str,
        query: Optional[Mapping[str, Any]],
        headers: Optional[Mapping[str, str]],
        body: Optional[RequestContent],
        token: Optional[CancellationToken],
    ) -> httpx.Response:
        request = self.prepare_request(method, path, query, headers, body)

        with compose_cancellation(token, timeout):
            response = await self._send(request, completion_option)
        return response

    async def _send(
        self,
        request: httpx.Request,
        completion_option: CompletionOption,
    ) -> httpx.Response:
        stream = completion_option is CompletionOption.RESPONSE_HEADERS_READ
        if stream:
            # no read timeout on long-lived bodies
            request.extensions["timeout"] = {
                **request.extensions.get("timeout", {}),
                "read": None,
            }

        self._logger.debug(f"Request: {request.method} {request.url}")
        self._logger.debug(f"HEADERS: {request.headers}")

        with handle_transport_errors():
            response = await self._client.send(request, stream=stream)

        self._logger.debug(f"Response: {response.status_code} {request.url}")
        return response

    def handle_if_error_response(
        self,
        status_code: int,
        response_body: Optional[str],
        handlers: Optional[Sequence[ApiResponseErrorHandler]],
    ) -> None:
        """Run the error handlers, then the default status classification.

        Handlers are called in order; the first one that raises wins and later
        handlers are not called.
        """
        if handlers is not None:
            for handler in handlers:
                handler(status_code, response_body)

        if status_code < 200 or status_code >= 400:
            raise DockerApiError(status_code, response_body)

    def prepare_request(
        self,
        method: str,
        path: str,
        query: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
        body: Optional[RequestContent] = None,
    ) -> httpx.Request:
        if not path:
            raise ValueError("path must not be empty")

        request_headers: list[tuple[str, str]] = [(HEADER_USER_AGENT, USER_AGENT)]
        if headers is not None:
            request_headers.extend(headers.items())

        content = None
        if body is not None:
            request_body = body.get_content()
            content = request_body.content
            if request_body.media_type is not None:
                request_headers.append((HEADER_CONTENT_TYPE, request_body.media_type))

        url = build_uri(self._endpoint, self._requested_api_version, path, query)
        return self._client.build_request(
            method, url, headers=request_headers, content=content
        )

    async def aclose(self) -> None:
        await self._client.aclose()
        self.configuration.close()

    async def __aenter__(self) -> "DockerClient":
        return self

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_value: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        await self.aclose()
