"""Header merging for outbound requests."""

from typing import Any

import httpx

DEFAULT_HEADERS: dict[str, str] = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}


def merge_headers(defaults: Any, overrides: Any = None) -> httpx.Headers:
    """Combine default headers with per-call headers.

    Per-call entries replace same-named defaults (case-insensitive). Neither
    input is mutated.

    Args:
        defaults: The client's default headers.
        overrides: Per-call headers as a mapping, pair list or httpx.Headers.

    Returns:
        A new httpx.Headers instance.
    """
    merged = httpx.Headers(defaults)
    if overrides:
        for key, value in httpx.Headers(overrides).items():
            merged[key] = value
    return merged
