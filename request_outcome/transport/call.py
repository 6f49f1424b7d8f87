"""Observed HTTP calls routed through the outcome classifier."""

from collections.abc import Callable
from concurrent.futures import Executor, Future
from typing import Any, Generic, TypeVar

import httpx
import structlog

from request_outcome.auth.provider import AuthTokenProvider
from request_outcome.outcome.classifier import OutcomeClassifier
from request_outcome.outcome.models import (
    FailReason,
    Outcome,
    RequestDescriptor,
    ResponseData,
)
from request_outcome.outcome.observer import RequestObserver
from request_outcome.transport.errors import CallConfigurationError


T = TypeVar("T")

logger = structlog.get_logger()


def parse_json_body(response: httpx.Response) -> Any:
    """Decode a JSON body, None for an empty one."""
    if not response.content:
        return None
    return response.json()


class ObservedCall(Generic[T]):
    """A single HTTP request whose completion is reported to an observer.

    The observer first receives ``on_in_progress``, then exactly one of
    ``on_success`` or ``on_failure``. Transport and decoding errors never
    propagate to the caller; they become Failure outcomes.
    """

    def __init__(
        self,
        client: httpx.Client,
        request: httpx.Request,
        *,
        secured: bool = False,
        auth_token_provider: AuthTokenProvider | None = None,
        classifier: OutcomeClassifier | None = None,
        parse: Callable[[httpx.Response], T] | None = None,
    ) -> None:
        """Initialize the call.

        Args:
            client: Client used to send the request.
            request: Request built by the client.
            secured: Whether a valid auth token is required.
            auth_token_provider: Token source for secured calls.
            classifier: Outcome classifier (default instance if omitted).
            parse: Body decoder for successful responses (default: JSON).

        Raises:
            CallConfigurationError: If secured without a token provider.
        """
        if secured and auth_token_provider is None:
            msg = f"Secured call requires an auth token provider: {request.method} {request.url}"
            raise CallConfigurationError(msg)

        self._client = client
        self._request = request
        self._secured = secured
        self._auth_token_provider = auth_token_provider
        self._classifier = classifier or OutcomeClassifier()
        self._parse: Callable[[httpx.Response], Any] = parse or parse_json_body
        self.descriptor = RequestDescriptor.from_httpx(request)

    @property
    def secured(self) -> bool:
        return self._secured

    @property
    def request(self) -> httpx.Request:
        return self._request

    def execute(self, observer: RequestObserver) -> Outcome:
        """Send the request and report the outcome.

        Args:
            observer: Observer notified of progress and the outcome.

        Returns:
            The outcome delivered to the observer.
        """
        observer.on_in_progress()

        if self._secured and not self._has_auth_token():
            logger.bind(component="transport").info(
                "call_not_sent_missing_auth_token",
                call_id=self.descriptor.call_id,
                method=self.descriptor.method,
                url=self.descriptor.url,
            )
            return self._classifier.handle_error(self.descriptor, None, None, observer)

        try:
            response = self._client.send(self._request)
        except httpx.HTTPError as e:
            return self._classifier.handle_error(
                self.descriptor, e, FailReason.OTHER, observer
            )

        try:
            data = self._to_response_data(response)
        except ValueError as e:
            return self._classifier.handle_error(
                self.descriptor, e, FailReason.OTHER, observer
            )
        finally:
            response.close()

        return self._classifier.handle_response(self.descriptor, data, observer)

    def enqueue(self, observer: RequestObserver, executor: Executor) -> "Future[Outcome]":
        """Run ``execute`` on an executor.

        Args:
            observer: Observer notified from the executor's thread.
            executor: Executor that runs the call.

        Returns:
            Future resolving to the delivered outcome.
        """
        return executor.submit(self.execute, observer)

    def _has_auth_token(self) -> bool:
        provider = self._auth_token_provider
        if provider is None or provider.get_auth_token() is None:
            return False

        # httpx renders the Cookie header when the request is built; the
        # provider may have just replaced the session cookie.
        self._request.headers.pop("Cookie", None)
        self._client.cookies.set_cookie_header(self._request)
        return True

    def _to_response_data(self, response: httpx.Response) -> ResponseData[Any]:
        data = ResponseData.from_httpx(response)
        if not data.success:
            return data
        return ResponseData.from_httpx(response, body=self._parse(response))
