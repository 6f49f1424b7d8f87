"""Auth token models."""

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _as_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC, convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


class AuthToken(BaseModel):
    """Session token issued by the authentication service."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    session_id: str | None = Field(default=None, description="Server session id")
    uri: str | None = Field(default=None, description="URI the session belongs to")
    expires_at: datetime | None = Field(
        default=None,
        description="Expiry instant in UTC; None means no client-side expiry",
    )

    @field_validator("expires_at")
    @classmethod
    def normalize_expiry(cls, v: datetime | None) -> datetime | None:
        """Store the expiry as an aware UTC datetime."""
        return _as_utc(v) if v is not None else None

    def is_valid(self, now: datetime) -> bool:
        """Check the token has not expired.

        Args:
            now: Current time. A naive value is taken as UTC.

        Returns:
            True if the token can be used.
        """
        return self.expires_at is None or _as_utc(now) < self.expires_at
