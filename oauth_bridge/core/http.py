"""Helpers shared by the outbound HTTP clients."""

from __future__ import annotations

from typing import Any

import httpx


def response_details(response: httpx.Response) -> Any:
    """Return the upstream error body, parsed as JSON when possible."""
    try:
        return response.json()
    except ValueError:
        return response.text or response.reason_phrase


def transport_details(exc: httpx.HTTPError) -> str:
    """Describe a transport-level failure (timeouts, DNS, refused connections)."""
    message = str(exc)
    return message or exc.__class__.__name__


__all__ = ["response_details", "transport_details"]
