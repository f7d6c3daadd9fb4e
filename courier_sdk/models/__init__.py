"""Public models for request contexts and results.

    from courier_sdk.models import ApiOkResponse, Issue

    result = await client.get("/users")
    if isinstance(result, ApiOkResponse):
        users = result.body
    elif result.issue is Issue.TIMEOUT_ERROR:
        ...
"""

from courier_sdk._internal.pipeline.models import (
    ABORTED_STATUS,
    TIMEOUT_STATUS,
    ApiErrorResponse,
    ApiOkResponse,
    ApiResponse,
    Issue,
    RequestContext,
    RequestOptions,
)

__all__ = [
    "ABORTED_STATUS",
    "TIMEOUT_STATUS",
    "ApiErrorResponse",
    "ApiOkResponse",
    "ApiResponse",
    "Issue",
    "RequestContext",
    "RequestOptions",
]
