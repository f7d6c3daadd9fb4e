"""Pydantic models for the request lifecycle.

A request travels as a `RequestContext` through the request transforms and the
dispatcher, and comes back as one of the two `ApiResponse` variants.
"""

import asyncio
from enum import StrEnum
from typing import Any, Literal

import httpx
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# =============================================================================
# Constants
# =============================================================================

DEFAULT_TIMEOUT_MS = 10_000
ABORTED_STATUS = 299
TIMEOUT_STATUS = 408
BODY_METHODS = frozenset({"POST", "PUT", "PATCH"})

# =============================================================================
# Issue Codes
# =============================================================================


class Issue(StrEnum):
    """Outcome classification of a request.

    Precedence when several could apply:
    ABORT_ERROR > CONNECTION_ERROR > TIMEOUT_ERROR > status-derived
    > NETWORK_ERROR > UNKNOWN_ERROR.
    """

    NONE = "NONE"
    CLIENT_ERROR = "CLIENT_ERROR"
    SERVER_ERROR = "SERVER_ERROR"
    TIMEOUT_ERROR = "TIMEOUT_ERROR"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    NETWORK_ERROR = "NETWORK_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    ABORT_ERROR = "ABORT_ERROR"


# =============================================================================
# Request Models
# =============================================================================


class RequestOptions(BaseModel):
    """Options a request is sent with.

    Request transforms may mutate every field up to dispatch. Assigning a
    plain mapping to `headers` or `search_params` is coerced to the httpx type.
    """

    method: str = "GET"
    headers: httpx.Headers = Field(default_factory=httpx.Headers)
    body: Any = None
    search_params: httpx.QueryParams = Field(default_factory=httpx.QueryParams)
    timeout_ms: int | None = None
    signal: asyncio.Event | None = None

    model_config = ConfigDict(arbitrary_types_allowed=True, validate_assignment=True)

    @field_validator("method", mode="before")
    @classmethod
    def method_upper(cls, v: str) -> str:
        return v.upper()

    @field_validator("headers", mode="before")
    @classmethod
    def coerce_headers(cls, v: Any) -> httpx.Headers:
        if isinstance(v, httpx.Headers):
            return v
        return httpx.Headers(v)

    @field_validator("search_params", mode="before")
    @classmethod
    def coerce_search_params(cls, v: Any) -> httpx.QueryParams:
        if isinstance(v, httpx.QueryParams):
            return v
        return httpx.QueryParams(v or {})


class RequestContext(BaseModel):
    """Mutable per-call state handed to request transforms."""

    url: str
    options: RequestOptions

    model_config = ConfigDict(validate_assignment=True)


# =============================================================================
# Result Models
# =============================================================================


class _ApiResponseBase(BaseModel):
    status: int | None = None
    headers: httpx.Headers | None = None
    options: RequestOptions | None = None
    duration: float = Field(default=0.0, ge=0)

    model_config = ConfigDict(arbitrary_types_allowed=True, validate_assignment=True)

    @field_validator("headers", mode="before")
    @classmethod
    def coerce_headers(cls, v: Any) -> httpx.Headers | None:
        if v is None or isinstance(v, httpx.Headers):
            return v
        return httpx.Headers(v)


class ApiOkResponse(_ApiResponseBase):
    """Successful result: a 2xx response whose body decoded cleanly.

    `body` is None only when the response had no content, so JSON `false`,
    `0` and `""` are kept as-is.
    """

    ok: Literal[True] = True
    issue: Literal[Issue.NONE] = Issue.NONE
    original_error: None = None
    body_used: bool = False
    body: Any = None
    status: int


class ApiErrorResponse(_ApiResponseBase):
    """Failed result: an HTTP error status, a transport failure or an abort.

    `body` is always None when built; response transforms may replace it.
    """

    ok: Literal[False] = False
    issue: Issue
    original_error: BaseException
    body_used: Literal[False] = False
    body: Any = None
    text: str | None = None

    @model_validator(mode="after")
    def issue_not_none(self) -> "ApiErrorResponse":
        if self.issue is Issue.NONE:
            raise ValueError("an error response cannot carry issue NONE")
        return self


ApiResponse = ApiOkResponse | ApiErrorResponse
