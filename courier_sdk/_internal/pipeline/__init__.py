"""Request lifecycle pipeline.

Header merging, request transforms, dispatch, result normalization, response
transforms and monitor fan-out. Used by `courier_sdk.client.CourierClient`.
"""

from courier_sdk._internal.pipeline.dispatcher import Delivery, build_request, resolve_url, send
from courier_sdk._internal.pipeline.headers import DEFAULT_HEADERS, merge_headers
from courier_sdk._internal.pipeline.issues import issue_from_error, issue_from_status
from courier_sdk._internal.pipeline.models import (
    ABORTED_STATUS,
    DEFAULT_TIMEOUT_MS,
    TIMEOUT_STATUS,
    ApiErrorResponse,
    ApiOkResponse,
    ApiResponse,
    Issue,
    RequestContext,
    RequestOptions,
)
from courier_sdk._internal.pipeline.monitors import run_monitors
from courier_sdk._internal.pipeline.normalizer import normalize
from courier_sdk._internal.pipeline.transforms import (
    TransformOutcome,
    classify_outcome,
    run_transforms,
)

__all__ = [
    "ABORTED_STATUS",
    "DEFAULT_HEADERS",
    "DEFAULT_TIMEOUT_MS",
    "TIMEOUT_STATUS",
    "ApiErrorResponse",
    "ApiOkResponse",
    "ApiResponse",
    "Delivery",
    "Issue",
    "RequestContext",
    "RequestOptions",
    "TransformOutcome",
    "build_request",
    "classify_outcome",
    "issue_from_error",
    "issue_from_status",
    "merge_headers",
    "normalize",
    "resolve_url",
    "run_monitors",
    "run_transforms",
    "send",
]
