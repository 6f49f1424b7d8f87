"""Markers attached to request-builder functions."""

from collections.abc import Callable
from typing import Any, TypeVar


F = TypeVar("F", bound=Callable[..., Any])

_SECURED_ATTR = "__request_outcome_secured__"
_PARSER_ATTR = "__request_outcome_parser__"


def secured(builder: F) -> F:
    """Mark a request builder as requiring a valid auth token.

    Example:
        @secured
        def get_item(client: httpx.Client, item_id: str) -> httpx.Request:
            return client.build_request("GET", f"/items/{item_id}")
    """
    setattr(builder, _SECURED_ATTR, True)
    return builder


def is_secured(builder: Callable[..., Any]) -> bool:
    """Check whether a request builder was marked with @secured."""
    return bool(getattr(builder, _SECURED_ATTR, False))


def parse_with(parser: Callable[[Any], Any]) -> Callable[[F], F]:
    """Attach a body parser to a request builder.

    The parser receives the successful httpx.Response and returns the body
    handed to the observer.
    """

    def decorator(builder: F) -> F:
        setattr(builder, _PARSER_ATTR, parser)
        return builder

    return decorator


def get_parser(builder: Callable[..., Any]) -> Callable[[Any], Any] | None:
    """Return the parser attached with @parse_with, if any."""
    return getattr(builder, _PARSER_ATTR, None)
