"""Error types raised by the transport layer."""


class CallConfigurationError(Exception):
    """A call was built with an inconsistent configuration."""
