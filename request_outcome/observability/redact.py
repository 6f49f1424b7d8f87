"""Redaction of credentials before they reach the logs."""

import re


# Headers that must never appear in logs
SENSITIVE_HEADERS = frozenset(
    {
        "authorization",
        "cookie",
        "set-cookie",
        "proxy-authorization",
        "x-api-key",
        "x-auth-token",
    }
)

REDACTED_VALUE = "[REDACTED]"

_URL_CREDENTIALS_RE = re.compile(r"(https?://)([^:/@]+):([^@/]+)@")


def redact_headers(headers: dict[str, str]) -> dict[str, str]:
    """Return a copy of headers with sensitive values replaced.

    Args:
        headers: Original headers.

    Returns:
        New dictionary safe for logging.
    """
    return {
        key: REDACTED_VALUE if key.lower() in SENSITIVE_HEADERS else value
        for key, value in headers.items()
    }


def redact_url_credentials(url: str) -> str:
    """Redact user:password credentials embedded in a URL.

    Args:
        url: URL that may contain credentials.

    Returns:
        URL with credentials redacted.
    """
    return _URL_CREDENTIALS_RE.sub(r"\1[REDACTED]:[REDACTED]@", url)
