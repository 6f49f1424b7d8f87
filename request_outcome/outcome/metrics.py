"""Metrics collection for request outcomes."""

from dataclasses import dataclass, field
from typing import ClassVar

from request_outcome.outcome.constants import SUCCESS_METRIC_KEY
from request_outcome.outcome.models import FailReason


@dataclass
class OutcomeMetrics:
    """Counters for classified outcomes.

    Singleton class shared by every classifier in the process.
    """

    outcomes_total: dict[str, int] = field(default_factory=dict)
    server_errors_total: int = 0
    transport_errors_total: int = 0

    _instance: ClassVar["OutcomeMetrics | None"] = None

    @classmethod
    def get_instance(cls) -> "OutcomeMetrics":
        """Get singleton metrics instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset metrics (primarily for testing)."""
        cls._instance = None

    def record_success(self) -> None:
        """Record a successful outcome."""
        self._increment(SUCCESS_METRIC_KEY)

    def record_failure(self, reason: FailReason | None) -> None:
        """Record a failed outcome.

        Args:
            reason: Failure reason, None for calls that were never sent.
        """
        self._increment(reason.value if reason else "NOT_SENT")

    def record_server_error(self) -> None:
        """Record a 5xx response."""
        self.server_errors_total += 1

    def record_transport_error(self) -> None:
        """Record a transport-level exception."""
        self.transport_errors_total += 1

    def _increment(self, key: str) -> None:
        self.outcomes_total[key] = self.outcomes_total.get(key, 0) + 1

    def to_dict(self) -> dict[str, int | dict[str, int]]:
        """Convert metrics to dictionary.

        Returns:
            Dictionary of metric name to value.
        """
        return {
            "outcomes_total": dict(self.outcomes_total),
            "server_errors_total": self.server_errors_total,
            "transport_errors_total": self.transport_errors_total,
        }
