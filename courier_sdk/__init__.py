"""Courier SDK for Python.

An async HTTP client that turns every outcome into a uniform result.

Public API:
    CourierClient - User-facing client
    ApiOkResponse, ApiErrorResponse - The two result variants
    Issue - Outcome classification

Internal (not for direct use):
    _internal.pipeline - Request lifecycle pipeline
"""

from courier_sdk._version import __version__
from courier_sdk.client import CourierClient
from courier_sdk.exceptions import (
    CourierAbortError,
    CourierConfigError,
    CourierDecodeError,
    CourierError,
)
from courier_sdk.models import (
    ApiErrorResponse,
    ApiOkResponse,
    ApiResponse,
    Issue,
    RequestContext,
    RequestOptions,
)

__all__ = [
    "__version__",
    "CourierClient",
    "CourierError",
    "CourierAbortError",
    "CourierConfigError",
    "CourierDecodeError",
    "ApiOkResponse",
    "ApiErrorResponse",
    "ApiResponse",
    "Issue",
    "RequestContext",
    "RequestOptions",
]
