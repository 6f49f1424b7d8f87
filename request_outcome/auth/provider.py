"""Auth token provisioning for secured calls.

The provider keeps the HTTP client's cookie jar in sync with the stored
session: a valid token is installed as the session cookie before every
secured call, and an unusable one removes the cookie and starts a new
authentication.
"""

from collections.abc import Callable
from datetime import UTC, datetime
from typing import Protocol, runtime_checkable

import httpx
import structlog

from request_outcome.auth.errors import AuthTokenError
from request_outcome.auth.models import AuthToken


logger = structlog.get_logger()

SESSION_COOKIE_NAME = "JSESSIONID"


@runtime_checkable
class AuthTokenProvider(Protocol):
    """Supplies the token for secured calls."""

    def get_auth_token(self) -> AuthToken | None:
        """Return a usable token, or None if the call must not be sent."""
        ...


class AuthTokenStorage(Protocol):
    """Where the current auth token lives."""

    def get_auth_token(self) -> AuthToken | None: ...


class AuthLauncher(Protocol):
    """Starts an (interactive or background) authentication flow."""

    def start_authentication(self) -> None: ...


class InMemoryAuthTokenStorage:
    """Auth token storage kept in process memory."""

    def __init__(self, token: AuthToken | None = None) -> None:
        self._token = token

    def get_auth_token(self) -> AuthToken | None:
        return self._token

    def set_auth_token(self, token: AuthToken | None) -> None:
        self._token = token


def _utc_now() -> datetime:
    return datetime.now(UTC)


class DefaultAuthTokenProvider:
    """Provides stored tokens and mirrors them into the session cookie."""

    def __init__(
        self,
        storage: AuthTokenStorage,
        launcher: AuthLauncher,
        cookies: httpx.Cookies,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        """Initialize the provider.

        Args:
            storage: Source of the current token.
            launcher: Started whenever no usable token is available.
            cookies: Cookie jar of the client that sends secured calls.
                Pass ``client.cookies`` itself; httpx copies jars given
                to its constructor.
            clock: Current time source.
        """
        self._storage = storage
        self._launcher = launcher
        self._cookies = cookies
        self._clock = clock
        self._log = logger.bind(component="auth")

    def get_auth_token(self) -> AuthToken | None:
        """Return the stored token if it is usable.

        A usable token is installed as the session cookie. Otherwise the
        session cookie is removed, authentication is started and None is
        returned.
        """
        try:
            token = self._storage.get_auth_token()
            if token is not None and token.is_valid(self._clock()):
                self._install_session_cookie(token)
                return token
        except AuthTokenError as e:
            self._log.warning("auth_token_lookup_failed", error=str(e))
        except Exception as e:  # noqa: BLE001
            self._log.warning(
                "auth_token_lookup_failed",
                error=str(e),
                error_type=type(e).__name__,
            )

        self._cookies.delete(SESSION_COOKIE_NAME)
        self._launcher.start_authentication()
        return None

    def _install_session_cookie(self, token: AuthToken) -> None:
        if not token.session_id:
            msg = f"Auth token has no session id (uri={token.uri})"
            raise AuthTokenError(msg)
        if not token.uri:
            msg = "Auth token has no uri"
            raise AuthTokenError(msg)

        host = httpx.URL(token.uri).host
        if not host:
            msg = f"Auth token uri has no host: {token.uri}"
            raise AuthTokenError(msg)

        # Replace rather than add so a stale session never lingers
        self._cookies.delete(SESSION_COOKIE_NAME)
        self._cookies.set(SESSION_COOKIE_NAME, token.session_id, domain=host, path="/")
