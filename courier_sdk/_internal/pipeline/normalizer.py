"""Turn a transport outcome into an ApiOkResponse or ApiErrorResponse."""

import json

import httpx

from courier_sdk._internal.pipeline.dispatcher import Delivery
from courier_sdk._internal.pipeline.issues import issue_from_error
from courier_sdk._internal.pipeline.models import (
    ABORTED_STATUS,
    TIMEOUT_STATUS,
    ApiErrorResponse,
    ApiOkResponse,
    ApiResponse,
    Issue,
    RequestOptions,
)
from courier_sdk.exceptions import CourierDecodeError, CourierError


async def normalize(delivery: Delivery, options: RequestOptions | None) -> ApiResponse:
    """Normalize a Delivery into the uniform result shape.

    Never raises for HTTP or transport failures; those become
    ApiErrorResponse instances.

    Args:
        delivery: The outcome captured by the dispatcher.
        options: The options the request was sent with.

    Returns:
        ApiOkResponse for a 2xx response with a decodable body, otherwise
        ApiErrorResponse.
    """
    if delivery.error is not None or delivery.response is None:
        error = delivery.error or CourierError("transport returned no response")
        return normalize_error(error, delivery.duration_ms, options)
    return await normalize_success(delivery.response, delivery.duration_ms, options)


def normalize_error(
    error: BaseException, duration_ms: float, options: RequestOptions | None
) -> ApiErrorResponse:
    """Build an error result from a transport or HTTP status exception."""
    issue = issue_from_error(error)

    if issue is Issue.ABORT_ERROR:
        return ApiErrorResponse(
            issue=issue,
            original_error=error,
            status=ABORTED_STATUS,
            duration=duration_ms,
            options=options,
        )

    if isinstance(error, httpx.HTTPStatusError):
        return ApiErrorResponse(
            issue=issue,
            original_error=error,
            status=error.response.status_code,
            headers=error.response.headers,
            duration=duration_ms,
            options=options,
        )

    if issue is Issue.TIMEOUT_ERROR:
        return ApiErrorResponse(
            issue=issue,
            original_error=error,
            status=TIMEOUT_STATUS,
            duration=duration_ms,
            options=options,
        )

    status = getattr(error, "status_code", None)
    return ApiErrorResponse(
        issue=issue,
        original_error=error,
        status=status if isinstance(status, int) else None,
        duration=duration_ms,
        options=options,
    )


async def normalize_success(
    response: httpx.Response, duration_ms: float, options: RequestOptions | None
) -> ApiResponse:
    """Read and decode a 2xx response body.

    httpx caches the content on first read, so the response stays readable
    for anyone holding it. Empty content yields body=None; anything else is
    parsed as JSON. A body that is not valid JSON yields an UNKNOWN_ERROR
    result carrying the raw text.
    """
    await response.aread()
    text = response.text

    if not text:
        return ApiOkResponse(
            body=None,
            status=response.status_code,
            headers=response.headers,
            duration=duration_ms,
            options=options,
        )

    try:
        body = json.loads(text)
    except json.JSONDecodeError as e:
        error = CourierDecodeError(
            f"Response body is not valid JSON: {e}",
            status_code=response.status_code,
            text=text,
        )
        error.__cause__ = e
        return ApiErrorResponse(
            issue=Issue.UNKNOWN_ERROR,
            original_error=error,
            status=response.status_code,
            headers=response.headers,
            duration=duration_ms,
            options=options,
            text=text,
        )

    return ApiOkResponse(
        body=body,
        status=response.status_code,
        headers=response.headers,
        duration=duration_ms,
        options=options,
    )
