"""Relay error taxonomy. Every error carries the message shown to the caller."""


class RelayError(Exception):
    """Base class for failures converted into an SSE error event."""

    kind = "relay_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigurationError(RelayError):
    """Raised when the upstream credential is not configured."""

    kind = "config_error"


class NetworkError(RelayError):
    """Raised when the upstream cannot be reached at all."""

    kind = "network_error"

    def __init__(self, description: str) -> None:
        super().__init__(f"Network error: {description}")


class UpstreamProtocolError(RelayError):
    """Raised on a non-success status or a success response without a body."""

    kind = "upstream_error"

    def __init__(self, status: int, text: str = "") -> None:
        super().__init__(f"Upstream error {status}: {text}")
        self.status = status
        self.text = text


class StreamReadError(RelayError):
    """Raised when reading the upstream body fails mid-stream."""

    kind = "stream_error"
