"""HTTP transport: client builder, observed calls and call factory."""

from request_outcome.transport.call import ObservedCall, parse_json_body
from request_outcome.transport.client import build_http_client
from request_outcome.transport.config import ClientConfig
from request_outcome.transport.errors import CallConfigurationError
from request_outcome.transport.factory import CallFactory
from request_outcome.transport.secured import (
    get_parser,
    is_secured,
    parse_with,
    secured,
)


__all__ = [
    # Client
    "ClientConfig",
    "build_http_client",
    # Calls
    "CallFactory",
    "ObservedCall",
    "parse_json_body",
    # Markers
    "get_parser",
    "is_secured",
    "parse_with",
    "secured",
    # Errors
    "CallConfigurationError",
]
