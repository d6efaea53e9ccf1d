"""Exception handlers mapping pipeline failures to JSON responses."""

from __future__ import annotations

import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from oauth_bridge.core.exceptions import BridgeError

logger = logging.getLogger(__name__)


async def bridge_exception_handler(request: Request, exc: BridgeError) -> JSONResponse:
    """Render ``{"error": ..., "details": ...}`` with the error's status code."""
    if exc.status_code >= 500:
        logger.error("OAuth callback / n8n creation error: %s (%s)", exc.message, exc.details)
    else:
        logger.warning("Rejected OAuth callback: %s", exc.message)

    content = {"error": exc.message}
    if exc.details is not None:
        content["details"] = exc.details
    return JSONResponse(status_code=int(exc.status_code), content=content)


__all__ = ["bridge_exception_handler"]
