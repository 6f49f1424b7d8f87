"""Configuration model for the HTTP transport."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ClientConfig(BaseModel):
    """Configuration for the shared httpx client."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    base_url: Annotated[str, Field(min_length=1, description="API base URL")]
    timeout_seconds: Annotated[float, Field(ge=1.0, le=300.0)] = 30.0
    user_agent: Annotated[str, Field(min_length=1, max_length=500)] = (
        "request-outcome/0.1"
    )
    disable_keepalive: bool = Field(
        default=True,
        description="Keep no idle connections so calls survive connectivity changes",
    )

    @field_validator("base_url")
    @classmethod
    def validate_scheme(cls, v: str) -> str:
        """Ensure the base URL is http(s)."""
        if not v.startswith(("http://", "https://")):
            msg = f"base_url must start with http:// or https://, got {v!r}"
            raise ValueError(msg)
        return v
