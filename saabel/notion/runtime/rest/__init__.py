"""REST runtime abstractions."""

from .http_client import HTTPClient, HTTPResponse
from .runner import PageAdapter, ResponseAdapter, RestEndpointSpec, RestRunner
from .transport import RESTTransport, rate_limit_hook

__all__ = [
    "HTTPClient",
    "HTTPResponse",
    "PageAdapter",
    "RESTTransport",
    "RestRunner",
    "RestEndpointSpec",
    "ResponseAdapter",
    "rate_limit_hook",
]
