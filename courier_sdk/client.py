"""User-facing async HTTP client.

Every verb method returns an `ApiOkResponse` or `ApiErrorResponse`; HTTP and
transport failures never raise. Example:

    from courier_sdk import CourierClient

    async with CourierClient("https://api.example.com") as client:
        client.on_request(lambda ctx: ctx.options.headers.update({"X-Trace": "1"}))
        result = await client.get("/users", {"page": 2})
        if result.ok:
            print(result.body)
        else:
            print(result.issue, result.status)
"""

import asyncio
import os
import sys
from collections.abc import Callable
from typing import Any, Literal

import httpx
from pydantic import BaseModel, Field, ValidationError, field_validator

from courier_sdk._internal.http import create_http_client
from courier_sdk._internal.pipeline import (
    DEFAULT_HEADERS,
    DEFAULT_TIMEOUT_MS,
    ApiResponse,
    RequestContext,
    RequestOptions,
    merge_headers,
    normalize,
    run_monitors,
    run_transforms,
    send,
)
from courier_sdk._internal.redaction import redact_headers
from courier_sdk.exceptions import CourierConfigError

RequestTransform = Callable[[RequestContext], Any]
ResponseTransform = Callable[[ApiResponse], Any]
Monitor = Callable[[ApiResponse], Any]
HookKind = Literal["request", "response", "monitor"]


class ClientConfig(BaseModel):
    """Validated construction options for CourierClient."""

    base_url: str
    default_headers: Any = None
    timeout_ms: int = Field(default=DEFAULT_TIMEOUT_MS, gt=0)
    debug: bool = False

    @field_validator("base_url")
    @classmethod
    def base_url_absolute(cls, v: str) -> str:
        try:
            url = httpx.URL(v)
        except httpx.InvalidURL as e:
            raise ValueError(f"invalid base_url: {e}") from e
        if not url.is_absolute_url:
            raise ValueError("base_url must be an absolute URL")
        return v


class CourierClient:
    """Async HTTP client with request transforms, response transforms and monitors.

    Calls are never serialized against each other: default headers, the base
    URL and the registered hooks are read live, so changes made while a
    request is in flight are visible to it at its next stage.
    """

    def __init__(
        self,
        base_url: str,
        *,
        default_headers: Any = None,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        signal: asyncio.Event | None = None,
        http_client: httpx.AsyncClient | None = None,
        debug: bool = False,
        **transport_options: Any,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Absolute URL relative request paths resolve against.
            default_headers: Headers sent with every request, merged over
                Accept/Content-Type application/json.
            timeout_ms: Default request timeout in milliseconds.
            signal: Cancellation token applied to every request unless a
                call passes its own.
            http_client: Pre-built transport to use instead of creating one.
                It is not closed by aclose().
            debug: Enable debug logging to stderr.
            **transport_options: Forwarded verbatim to httpx.AsyncClient.

        Raises:
            CourierConfigError: If the options are invalid.
        """
        try:
            config = ClientConfig(
                base_url=base_url,
                default_headers=default_headers,
                timeout_ms=timeout_ms,
                debug=debug,
            )
        except ValidationError as e:
            raise CourierConfigError(str(e)) from e

        self.headers = merge_headers(DEFAULT_HEADERS, config.default_headers)
        self._base_url = httpx.URL(config.base_url)
        self._timeout_ms = config.timeout_ms
        self._signal = signal
        self._debug = config.debug

        self.request_transforms: list[RequestTransform] = []
        self.response_transforms: list[ResponseTransform] = []
        self.monitors: list[Monitor] = []

        self._owns_http_client = http_client is None
        self.http_client = http_client or create_http_client(
            timeout_ms=config.timeout_ms, **transport_options
        )

    @classmethod
    def from_env(cls, **kwargs: Any) -> "CourierClient":
        """Create a client from environment variables.

        Required environment variables:
            COURIER_BASE_URL: Base URL for all requests.

        Optional environment variables:
            COURIER_TIMEOUT_MS: Request timeout in milliseconds.
            COURIER_DEBUG: Set to "1" to enable debug logging.

        Args:
            **kwargs: Extra constructor arguments (headers, transport options).

        Raises:
            CourierConfigError: If COURIER_BASE_URL is missing or invalid.
            ValueError: If COURIER_TIMEOUT_MS is not an integer.
        """
        base_url = os.environ.get("COURIER_BASE_URL")
        if not base_url:
            raise CourierConfigError("COURIER_BASE_URL is not set")

        debug = os.environ.get("COURIER_DEBUG", "") == "1"
        timeout_ms = int(os.environ.get("COURIER_TIMEOUT_MS", str(DEFAULT_TIMEOUT_MS)))

        return cls(base_url, timeout_ms=timeout_ms, debug=debug, **kwargs)

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._debug:
            print(f"[courier-sdk] {message}", file=sys.stderr)

    # =========================================================================
    # Base URL
    # =========================================================================

    def set_base_url(self, base_url: str | httpx.URL) -> "CourierClient":
        """Replace the base URL for requests dispatched from now on."""
        try:
            url = httpx.URL(base_url)
        except httpx.InvalidURL as e:
            raise CourierConfigError(f"invalid base_url: {e}") from e
        if not url.is_absolute_url:
            raise CourierConfigError("base_url must be an absolute URL")
        self._base_url = url
        return self

    def get_base_url(self, as_url: bool = False) -> str | httpx.URL:
        """Return the base URL as a string, or as httpx.URL when as_url is set."""
        return self._base_url if as_url else str(self._base_url)

    # =========================================================================
    # Hook Registration
    # =========================================================================

    def on_request(self, transform: RequestTransform) -> "CourierClient":
        """Register a transform run on the RequestContext before dispatch."""
        self.request_transforms.append(transform)
        return self

    def on_response(self, transform: ResponseTransform) -> "CourierClient":
        """Register a transform run on the result before it is returned."""
        self.response_transforms.append(transform)
        return self

    def on_monitor(self, monitor: Monitor) -> "CourierClient":
        """Register a passive observer of finished results."""
        self.monitors.append(monitor)
        return self

    def on(self, kind: HookKind, callback: Callable[[Any], Any]) -> "CourierClient":
        """Register a hook by kind: "request", "response" or "monitor"."""
        if kind == "request":
            return self.on_request(callback)
        if kind == "response":
            return self.on_response(callback)
        if kind == "monitor":
            return self.on_monitor(callback)
        raise CourierConfigError(f"Unknown hook kind: {kind!r}")

    # =========================================================================
    # Request Lifecycle
    # =========================================================================

    async def request(
        self,
        method: str,
        url: str,
        *,
        body: Any = None,
        params: Any = None,
        headers: Any = None,
        timeout_ms: int | None = None,
        signal: asyncio.Event | None = None,
    ) -> ApiResponse:
        """Run one request through the full lifecycle.

        Headers are merged, request transforms run, the request is sent,
        the outcome is normalized, response transforms run and monitors
        are notified.

        Args:
            method: HTTP method.
            url: Path resolved against the base URL (or an absolute URL).
            body: JSON-serialisable body, sent only for POST, PUT and PATCH.
            params: Query parameters as a mapping, pair list or query string.
            headers: Per-call headers overriding the client defaults.
            timeout_ms: Per-call timeout override in milliseconds.
            signal: Per-call cancellation token override.

        Returns:
            ApiOkResponse or ApiErrorResponse.

        Raises:
            Exception: Whatever a request or response transform raises.
        """
        options = RequestOptions(
            method=method,
            headers=merge_headers(self.headers, headers),
            body=body,
            search_params=params,
            timeout_ms=timeout_ms if timeout_ms is not None else self._timeout_ms,
            signal=signal if signal is not None else self._signal,
        )
        context = RequestContext(url=url, options=options)

        await run_transforms(self.request_transforms, context)

        if self._debug:
            self._log_debug(
                f"{context.options.method} {self._base_url.join(context.url)} "
                f"headers={redact_headers(context.options.headers)}"
            )
        delivery = await send(self.http_client, self._base_url, context)
        result = await normalize(delivery, context.options)
        self._log_debug(
            f"{context.options.method} {context.url} -> {result.status} "
            f"{result.issue} in {result.duration:.1f}ms"
        )

        await run_transforms(self.response_transforms, result)
        await run_monitors(self.monitors, result, on_error=self._on_monitor_error)
        return result

    def _on_monitor_error(self, error: Exception) -> None:
        self._log_debug(f"Monitor raised, ignoring: {error!r}")

    # =========================================================================
    # Verbs
    # =========================================================================

    async def get(self, url: str, params: Any = None, **options: Any) -> ApiResponse:
        """Send a GET request."""
        return await self.request("GET", url, params=params, **options)

    async def delete(self, url: str, params: Any = None, **options: Any) -> ApiResponse:
        """Send a DELETE request."""
        return await self.request("DELETE", url, params=params, **options)

    async def head(self, url: str, params: Any = None, **options: Any) -> ApiResponse:
        """Send a HEAD request."""
        return await self.request("HEAD", url, params=params, **options)

    async def link(self, url: str, params: Any = None, **options: Any) -> ApiResponse:
        """Send a LINK request."""
        return await self.request("LINK", url, params=params, **options)

    async def unlink(self, url: str, params: Any = None, **options: Any) -> ApiResponse:
        """Send an UNLINK request."""
        return await self.request("UNLINK", url, params=params, **options)

    async def post(self, url: str, body: Any = None, **options: Any) -> ApiResponse:
        """Send a POST request with a JSON body."""
        return await self.request("POST", url, body=body, **options)

    async def put(self, url: str, body: Any = None, **options: Any) -> ApiResponse:
        """Send a PUT request with a JSON body."""
        return await self.request("PUT", url, body=body, **options)

    async def patch(self, url: str, body: Any = None, **options: Any) -> ApiResponse:
        """Send a PATCH request with a JSON body."""
        return await self.request("PATCH", url, body=body, **options)

    # =========================================================================
    # Lifecycle
    # =========================================================================

    async def aclose(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_http_client:
            await self.http_client.aclose()

    async def __aenter__(self) -> "CourierClient":
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.aclose()
