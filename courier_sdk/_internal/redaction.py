"""Redaction of sensitive header values before they reach debug logs."""

from typing import Any

import httpx

REDACT_HEADERS: frozenset[str] = frozenset({
    "authorization",
    "proxy-authorization",
    "cookie",
    "set-cookie",
    "x-api-key",
    "api-key",
    "x-auth-token",
    "x-access-token",
    "x-csrf-token",
})

REDACTED_VALUE = "[REDACTED]"


def redact_headers(headers: Any, *, skip_redaction: bool = False) -> dict[str, str]:
    """Return a plain-dict copy of headers with sensitive values masked.

    Creates a copy - the original headers are never mutated.

    Args:
        headers: Headers as a mapping, pair list or httpx.Headers.
        skip_redaction: If True, returns a copy without redacting.

    Returns:
        A new dictionary with sensitive values replaced by "[REDACTED]".
    """
    result: dict[str, str] = {}
    for key, value in httpx.Headers(headers).items():
        if not skip_redaction and _is_sensitive(key):
            result[key] = REDACTED_VALUE
        else:
            result[key] = value
    return result


def _is_sensitive(name: str) -> bool:
    """Check a header name against the redaction list."""
    lowered = name.lower()
    return lowered in REDACT_HEADERS or "secret" in lowered or lowered.endswith("-token")
