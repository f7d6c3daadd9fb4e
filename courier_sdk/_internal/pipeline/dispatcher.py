"""Hand a prepared request to the transport and time it."""

import asyncio
import contextlib
import json
import time
from collections.abc import Awaitable
from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict

from courier_sdk._internal.pipeline.models import BODY_METHODS, RequestContext
from courier_sdk.exceptions import CourierAbortError


class Delivery(BaseModel):
    """Raw transport outcome: exactly one of response or error is set."""

    response: httpx.Response | None = None
    error: BaseException | None = None
    duration_ms: float = 0.0

    model_config = ConfigDict(arbitrary_types_allowed=True)


def resolve_url(base_url: httpx.URL, path: str) -> httpx.URL:
    """Resolve a (possibly relative) path against the base URL."""
    return base_url.join(path)


def elapsed_ms(start: float, end: float) -> float:
    """Milliseconds between two perf_counter readings, never negative."""
    return max(0.0, (end - start) * 1000)


def build_request(base_url: httpx.URL, context: RequestContext) -> dict[str, Any]:
    """Build keyword arguments for httpx.AsyncClient.request().

    The body is JSON encoded only for methods that carry one (POST, PUT,
    PATCH) and dropped otherwise.
    """
    options = context.options
    kwargs: dict[str, Any] = {
        "method": options.method,
        "url": resolve_url(base_url, context.url),
        "headers": options.headers,
        "params": options.search_params,
    }
    if options.method in BODY_METHODS and options.body is not None:
        kwargs["content"] = json.dumps(options.body).encode("utf-8")
    if options.timeout_ms is not None:
        kwargs["timeout"] = options.timeout_ms / 1000
    return kwargs


async def _race_signal(
    call: Awaitable[httpx.Response], signal: asyncio.Event | None
) -> httpx.Response:
    """Await the transport call unless the cancellation token fires first."""
    if signal is None:
        return await call

    send_task = asyncio.ensure_future(call)
    if signal.is_set():
        send_task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await send_task
        raise CourierAbortError("Aborted")

    wait_task = asyncio.ensure_future(signal.wait())
    try:
        done, _ = await asyncio.wait({send_task, wait_task}, return_when=asyncio.FIRST_COMPLETED)
    except asyncio.CancelledError:
        send_task.cancel()
        wait_task.cancel()
        raise

    if wait_task in done:
        send_task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await send_task
        raise CourierAbortError("Aborted")

    wait_task.cancel()
    return send_task.result()


async def send(
    http_client: httpx.AsyncClient, base_url: httpx.URL, context: RequestContext
) -> Delivery:
    """Send the request and capture the outcome with its wall-clock duration.

    Non-2xx responses are converted to httpx.HTTPStatusError so that every
    failure, HTTP or transport, ends up in Delivery.error.

    Args:
        http_client: The transport.
        base_url: Base URL the context's path is resolved against.
        context: The request after all request transforms ran.

    Returns:
        A Delivery holding either the response or the error.
    """
    kwargs = build_request(base_url, context)

    start = time.perf_counter()
    try:
        response = await _race_signal(http_client.request(**kwargs), context.options.signal)
        response.raise_for_status()
    except Exception as e:
        return Delivery(error=e, duration_ms=elapsed_ms(start, time.perf_counter()))
    return Delivery(response=response, duration_ms=elapsed_ms(start, time.perf_counter()))
