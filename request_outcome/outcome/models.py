"""Data models for request outcome classification."""

import uuid
from enum import Enum
from typing import Annotated, Any, Generic, Literal, TypeVar

import httpx
from pydantic import BaseModel, ConfigDict, Field

from request_outcome.observability.redact import redact_url_credentials
from request_outcome.outcome.constants import HTTP_STATUS_OK_MAX, HTTP_STATUS_OK_MIN


S = TypeVar("S")


class FailReason(str, Enum):
    """Semantic reason a request is treated as failed.

    - NETWORKING_DISABLED: Networking is switched off on the device/host
    - AUTH_ERROR: Server rejected credentials (401/403)
    - SERVER_ERROR: Server-side failure (5xx)
    - OTHER: Anything else, including transport errors
    """

    NETWORKING_DISABLED = "NETWORKING_DISABLED"
    AUTH_ERROR = "AUTH_ERROR"
    SERVER_ERROR = "SERVER_ERROR"
    OTHER = "OTHER"


class RequestDescriptor(BaseModel):
    """Identifies an outbound request for logging and correlation."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    method: Annotated[str, Field(min_length=1)]
    url: Annotated[str, Field(min_length=1, description="URL with credentials redacted")]
    call_id: str = Field(default_factory=lambda: uuid.uuid4().hex)

    @classmethod
    def from_httpx(cls, request: httpx.Request) -> "RequestDescriptor":
        """Build a descriptor from an httpx request.

        Args:
            request: The outbound request.

        Returns:
            Descriptor with a fresh call id.
        """
        return cls(
            method=request.method,
            url=redact_url_credentials(str(request.url)),
        )


class ResponseData(BaseModel, Generic[S]):
    """Completed response as seen by the classifier."""

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    status_code: int = Field(ge=100, le=999, description="HTTP status code")
    body: S | None = Field(default=None, description="Decoded body, if any")
    success: bool = Field(description="Whether the transport considers it successful")

    @classmethod
    def from_httpx(cls, response: httpx.Response, body: Any = None) -> "ResponseData[Any]":
        """Build response data from an httpx response.

        Args:
            response: The received response.
            body: Already decoded body.

        Returns:
            ResponseData with success set for 2xx codes.
        """
        return cls(
            status_code=response.status_code,
            body=body,
            success=HTTP_STATUS_OK_MIN <= response.status_code < HTTP_STATUS_OK_MAX,
        )


class Success(BaseModel, Generic[S]):
    """Successful outcome carrying the response body."""

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    kind: Literal["success"] = "success"
    body: S | None = None

    @property
    def is_success(self) -> bool:
        return True


class Failure(BaseModel):
    """Failed outcome.

    ``reason`` is None only when a secured call was never sent because no
    auth token was available; authentication is already under way then
    and there is nothing further to present.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["failure"] = "failure"
    reason: FailReason | None
    request: RequestDescriptor
    status_code: int | None = Field(
        default=None, description="HTTP status code if a response was received"
    )
    error: str | None = Field(default=None, description="Transport error message")

    @property
    def is_success(self) -> bool:
        return False


Outcome = Success[Any] | Failure
