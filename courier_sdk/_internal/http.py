"""Shared HTTP transport configuration."""

from typing import Any

import httpx

from courier_sdk._internal.pipeline.models import DEFAULT_TIMEOUT_MS
from courier_sdk._version import __version__


def create_http_client(
    *,
    timeout_ms: int = DEFAULT_TIMEOUT_MS,
    **transport_options: Any,
) -> httpx.AsyncClient:
    """Create the configured async transport.

    Args:
        timeout_ms: Default request timeout in milliseconds.
        **transport_options: Forwarded verbatim to httpx.AsyncClient
            (follow_redirects, verify, transport, ...).

    Returns:
        Configured httpx.AsyncClient instance.
    """
    transport_options.setdefault("follow_redirects", True)
    headers = {"User-Agent": f"courier-sdk/{__version__}", **transport_options.pop("headers", {})}
    return httpx.AsyncClient(timeout=timeout_ms / 1000, headers=headers, **transport_options)
