"""Builder for the shared httpx client."""

import httpx
import structlog

from request_outcome.observability.redact import redact_headers, redact_url_credentials
from request_outcome.transport.config import ClientConfig


logger = structlog.get_logger()


def _log_request(request: httpx.Request) -> None:
    logger.bind(component="transport").debug(
        "http_request",
        method=request.method,
        url=redact_url_credentials(str(request.url)),
        headers=redact_headers(dict(request.headers)),
    )


def _log_response(response: httpx.Response) -> None:
    logger.bind(component="transport").debug(
        "http_response",
        method=response.request.method,
        url=redact_url_credentials(str(response.request.url)),
        status_code=response.status_code,
        headers=redact_headers(dict(response.headers)),
    )


def build_http_client(
    config: ClientConfig,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Build the httpx client used by observed calls.

    Args:
        config: Client configuration.
        transport: Optional transport override (e.g. httpx.MockTransport).

    Returns:
        Configured client. The caller owns it and must close it.
    """
    limits = (
        httpx.Limits(max_keepalive_connections=0)
        if config.disable_keepalive
        else httpx.Limits()
    )
    return httpx.Client(
        base_url=config.base_url,
        timeout=config.timeout_seconds,
        headers={"User-Agent": config.user_agent},
        limits=limits,
        transport=transport,
        event_hooks={"request": [_log_request], "response": [_log_response]},
    )
