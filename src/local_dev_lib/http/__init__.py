"""HTTP request options and the authenticated platform client."""

from .client import HttpClient, http
from .request_options import DEFAULT_USER_AGENT_HEADERS, get_request_options

__all__ = [
    "DEFAULT_USER_AGENT_HEADERS",
    "HttpClient",
    "get_request_options",
    "http",
]
