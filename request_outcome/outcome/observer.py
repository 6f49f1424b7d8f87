"""Observer interface notified with request outcomes."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from request_outcome.outcome.models import Failure


@runtime_checkable
class RequestObserver(Protocol):
    """Receives the lifecycle of a single observed call.

    ``on_in_progress`` fires once before the request is sent. Exactly one
    of ``on_success`` or ``on_failure`` fires once the outcome is known.
    """

    def on_in_progress(self) -> None: ...

    def on_success(self, body: Any) -> None: ...

    def on_failure(self, failure: Failure) -> None: ...


def _noop() -> None:
    return None


@dataclass(frozen=True)
class CallbackObserver:
    """Adapts plain callables to the RequestObserver protocol."""

    success: Callable[[Any], None]
    failure: Callable[[Failure], None]
    in_progress: Callable[[], None] = _noop

    def on_in_progress(self) -> None:
        self.in_progress()

    def on_success(self, body: Any) -> None:
        self.success(body)

    def on_failure(self, failure: Failure) -> None:
        self.failure(failure)
