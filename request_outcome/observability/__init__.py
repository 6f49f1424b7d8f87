"""Observability module for logging and log redaction."""

from request_outcome.observability.logging import (
    configure_logging,
    configure_logging_from_settings,
    get_logger,
)
from request_outcome.observability.redact import (
    REDACTED_VALUE,
    redact_headers,
    redact_url_credentials,
)


__all__ = [
    "REDACTED_VALUE",
    "configure_logging",
    "configure_logging_from_settings",
    "get_logger",
    "redact_headers",
    "redact_url_credentials",
]
