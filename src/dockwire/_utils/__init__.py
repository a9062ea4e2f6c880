from ._cancellation import CancellationToken, compose_cancellation
from ._endpoint import Endpoint, build_uri, resolve_endpoint, validate_api_version
from ._errors import (
    ApiResponseErrorHandler,
    handle_transport_errors,
    raise_for_status_code,
)
from ._logs import setup_logging
from ._request_content import (
    BinaryRequestContent,
    JsonRequestContent,
    RequestBody,
    RequestContent,
)
from ._serializer import JsonSerializer

__all__ = [
    "ApiResponseErrorHandler",
    "BinaryRequestContent",
    "CancellationToken",
    "Endpoint",
    "JsonRequestContent",
    "JsonSerializer",
    "RequestBody",
    "RequestContent",
    "build_uri",
    "compose_cancellation",
    "handle_transport_errors",
    "raise_for_status_code",
    "resolve_endpoint",
    "setup_logging",
    "validate_api_version",
]
