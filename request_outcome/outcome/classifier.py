"""Classification of request completions into outcomes."""

from collections.abc import Callable
from typing import Any

import structlog

from request_outcome.outcome.constants import (
    AUTH_ERROR_STATUS_CODES,
    HTTP_STATUS_SERVER_ERROR_MAX,
    HTTP_STATUS_SERVER_ERROR_MIN,
)
from request_outcome.outcome.metrics import OutcomeMetrics
from request_outcome.outcome.models import (
    FailReason,
    Failure,
    Outcome,
    RequestDescriptor,
    ResponseData,
    Success,
)
from request_outcome.outcome.observer import RequestObserver


logger = structlog.get_logger()


def networking_never_disabled() -> bool:
    """Default networking signal.

    No host-level "networking switched off" signal is wired in yet, so
    this always reports networking as enabled.
    """
    return False


class OutcomeClassifier:
    """Turns a response or transport error into a single Outcome.

    Failed responses are checked in a fixed priority order: networking
    disabled, auth error (401/403), server error (5xx), then OTHER.
    Classification never raises; every failure becomes a Failure value.
    """

    def __init__(
        self,
        is_networking_disabled: Callable[[], bool] = networking_never_disabled,
    ) -> None:
        """Initialize the classifier.

        Args:
            is_networking_disabled: Predicate reporting whether networking
                is switched off at the host level.
        """
        self._networking_disabled = is_networking_disabled
        self._metrics = OutcomeMetrics.get_instance()
        self._log = logger.bind(component="outcome")

    def classify_response(
        self,
        request: RequestDescriptor,
        response: ResponseData[Any] | None,
    ) -> Outcome:
        """Classify a completed response.

        Args:
            request: Descriptor of the request that produced the response.
            response: The response, or None if none was received.

        Returns:
            Success with the response body, or the first matching Failure.
        """
        if response is not None and self.is_request_successful(response):
            self._metrics.record_success()
            return Success(body=response.body)

        if self.is_networking_disabled(response):
            reason = FailReason.NETWORKING_DISABLED
        elif self.is_auth_error(response):
            reason = FailReason.AUTH_ERROR
        elif self.is_server_error(request, response):
            reason = FailReason.SERVER_ERROR
        else:
            reason = FailReason.OTHER

        self._metrics.record_failure(reason)
        return Failure(
            reason=reason,
            request=request,
            status_code=response.status_code if response is not None else None,
        )

    def classify_error(
        self,
        request: RequestDescriptor,
        error: BaseException | None,
        reason: FailReason | None,
    ) -> Failure:
        """Classify a transport-level error.

        Args:
            request: Descriptor of the failed request.
            error: The exception raised by the transport, if any.
            reason: Caller-chosen failure reason.

        Returns:
            Failure carrying the given reason.
        """
        self._log.error(
            "request_failed",
            call_id=request.call_id,
            method=request.method,
            url=request.url,
            reason=reason.value if reason else None,
            exc_info=error,
        )
        if error is not None:
            self._metrics.record_transport_error()
        self._metrics.record_failure(reason)
        return Failure(
            reason=reason,
            request=request,
            error=str(error) if error is not None else None,
        )

    def handle_response(
        self,
        request: RequestDescriptor,
        response: ResponseData[Any] | None,
        observer: RequestObserver,
    ) -> Outcome:
        """Classify a response and notify the observer."""
        outcome = self.classify_response(request, response)
        self.dispatch(outcome, observer)
        return outcome

    def handle_error(
        self,
        request: RequestDescriptor,
        error: BaseException | None,
        reason: FailReason | None,
        observer: RequestObserver,
    ) -> Failure:
        """Classify a transport error and notify the observer."""
        failure = self.classify_error(request, error, reason)
        self.dispatch(failure, observer)
        return failure

    @staticmethod
    def dispatch(outcome: Outcome, observer: RequestObserver) -> None:
        """Invoke exactly one observer callback for an outcome.

        Args:
            outcome: Classified outcome.
            observer: Observer to notify.
        """
        if isinstance(outcome, Success):
            observer.on_success(outcome.body)
        else:
            observer.on_failure(outcome)

    def is_request_successful(self, response: ResponseData[Any] | None) -> bool:
        return response is not None and response.success

    def is_networking_disabled(self, response: ResponseData[Any] | None) -> bool:
        return self._networking_disabled()

    def is_auth_error(self, response: ResponseData[Any] | None) -> bool:
        return response is not None and response.status_code in AUTH_ERROR_STATUS_CODES

    def is_server_error(
        self,
        request: RequestDescriptor,
        response: ResponseData[Any] | None,
    ) -> bool:
        """Check for a 5xx response, logging it when found."""
        if response is None:
            return False

        server_error = (
            HTTP_STATUS_SERVER_ERROR_MIN
            <= response.status_code
            <= HTTP_STATUS_SERVER_ERROR_MAX
        )
        if server_error:
            self._metrics.record_server_error()
            self._log.error(
                "server_error",
                call_id=request.call_id,
                method=request.method,
                url=request.url,
                status_code=response.status_code,
            )
        return server_error
