"""Map transport outcomes to issue codes."""

import httpx

from courier_sdk._internal.pipeline.models import Issue
from courier_sdk.exceptions import CourierAbortError

NETWORK_ERROR_MESSAGE = "Network Error"


def is_status_within(status: int, low: int, high: int) -> bool:
    """Check if a status falls inside an inclusive range."""
    return low <= status <= high


def issue_from_status(status: int | None) -> Issue:
    """Classify an HTTP status code.

    Args:
        status: The response status, or None when no response was received.

    Returns:
        NONE for 2xx, CLIENT_ERROR for 4xx, SERVER_ERROR for 5xx and
        UNKNOWN_ERROR for everything else (including 3xx and a missing status).
    """
    if not status:
        return Issue.UNKNOWN_ERROR
    if is_status_within(status, 200, 299):
        return Issue.NONE
    if is_status_within(status, 400, 499):
        return Issue.CLIENT_ERROR
    if is_status_within(status, 500, 599):
        return Issue.SERVER_ERROR
    return Issue.UNKNOWN_ERROR


def issue_from_error(error: BaseException) -> Issue:
    """Classify an exception raised while talking to the transport.

    Checks run in precedence order: abort, connection refused, timeout,
    HTTP status, network failure, then unknown.
    """
    if isinstance(error, CourierAbortError):
        return Issue.ABORT_ERROR
    if isinstance(error, (httpx.ConnectError, ConnectionRefusedError)):
        return Issue.CONNECTION_ERROR
    if isinstance(error, httpx.TimeoutException):
        return Issue.TIMEOUT_ERROR
    if isinstance(error, httpx.HTTPStatusError):
        return issue_from_status(error.response.status_code)
    if isinstance(error, httpx.TransportError) or str(error) == NETWORK_ERROR_MESSAGE:
        return Issue.NETWORK_ERROR
    return Issue.UNKNOWN_ERROR
