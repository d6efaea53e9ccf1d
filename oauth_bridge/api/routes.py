"""
FastAPI routes for the OAuth callback bridge.
"""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import RedirectResponse

from oauth_bridge.dependencies import (
    get_app_settings,
    get_caller_context_extractor,
    get_credential_bridge_service,
)

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/healthz", status_code=HTTPStatus.OK)
async def healthcheck() -> dict:
    """Simple health endpoint for monitoring."""
    return {"status": "ok"}


@router.get("/oauth/callback")
async def handle_oauth_callback(
    request: Request,
    extractor: Annotated[Any, Depends(get_caller_context_extractor)],
    bridge: Annotated[Any, Depends(get_credential_bridge_service)],
    settings: Annotated[Any, Depends(get_app_settings)],
) -> RedirectResponse:
    """Exchange the code, store the tokens as an n8n credential and redirect."""
    callback = extractor.validate(request.query_params)
    logger.info(
        "OAuth callback received for caller %s", callback.caller_context.label
    )

    result = await bridge.complete(callback)
    logger.info(
        "Credential %s (%s) ready, notified=%s",
        result.credential.id,
        result.credential_name,
        result.notified,
    )
    return RedirectResponse(url=settings.success_redirect_url, status_code=HTTPStatus.FOUND)


__all__ = ["router"]
