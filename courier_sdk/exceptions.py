"""Public exceptions for the Courier SDK."""


class CourierError(Exception):
    """Base exception for all Courier SDK errors."""


class CourierConfigError(CourierError):
    """Configuration error (missing base URL, invalid options, unknown hook kind)."""


class CourierAbortError(CourierError):
    """Request was cancelled through its cancellation token."""

    def __init__(self, message: str = "Aborted", code: str = "ABORT_ERROR") -> None:
        super().__init__(message)
        self.code = code


class CourierDecodeError(CourierError):
    """Successful response whose body is not valid JSON."""

    def __init__(self, message: str, status_code: int | None = None, text: str | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.text = text
