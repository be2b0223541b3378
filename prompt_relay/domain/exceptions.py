class RelayError(Exception):
    """Base class for relay errors surfaced to the caller."""

    def __init__(self, message: str, code: str = "RELAY_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(message)


class ValidationError(RelayError):
    """Raised when a request is rejected before any remote call."""

    def __init__(self, message: str = "Prompt required") -> None:
        super().__init__(message, "VALIDATION_ERROR")


class UpstreamError(RelayError):
    """Raised when the remote generation service or template processing fails.

    The message is the underlying failure text, passed through unfiltered.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message, "UPSTREAM_ERROR")
