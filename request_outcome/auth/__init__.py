"""Auth token provisioning for secured calls."""

from request_outcome.auth.errors import AuthTokenError
from request_outcome.auth.models import AuthToken
from request_outcome.auth.provider import (
    SESSION_COOKIE_NAME,
    AuthLauncher,
    AuthTokenProvider,
    AuthTokenStorage,
    DefaultAuthTokenProvider,
    InMemoryAuthTokenStorage,
)


__all__ = [
    "SESSION_COOKIE_NAME",
    "AuthLauncher",
    "AuthToken",
    "AuthTokenError",
    "AuthTokenProvider",
    "AuthTokenStorage",
    "DefaultAuthTokenProvider",
    "InMemoryAuthTokenStorage",
]
