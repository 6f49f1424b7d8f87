"""Request outcome classification.

Turns a completed request (response or transport error) into exactly one
Outcome and forwards it to a registered observer.
"""

from request_outcome.outcome.classifier import (
    OutcomeClassifier,
    networking_never_disabled,
)
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
from request_outcome.outcome.observer import CallbackObserver, RequestObserver


__all__ = [
    # Classifier
    "OutcomeClassifier",
    "networking_never_disabled",
    # Models
    "FailReason",
    "Failure",
    "Outcome",
    "RequestDescriptor",
    "ResponseData",
    "Success",
    # Observer
    "CallbackObserver",
    "RequestObserver",
    # Constants
    "AUTH_ERROR_STATUS_CODES",
    "HTTP_STATUS_SERVER_ERROR_MIN",
    "HTTP_STATUS_SERVER_ERROR_MAX",
    # Metrics
    "OutcomeMetrics",
]
