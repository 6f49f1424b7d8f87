"""Domain-specific error types for the auth module."""


class AuthTokenError(Exception):
    """Stored auth token is missing required session data."""
