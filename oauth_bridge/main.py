"""
FastAPI application entrypoint for the OAuth callback bridge.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from oauth_bridge import __version__
from oauth_bridge.api.errors import bridge_exception_handler
from oauth_bridge.api.routes import router
from oauth_bridge.core.config import get_settings
from oauth_bridge.core.exceptions import BridgeError
from oauth_bridge.core.logging import configure_logging

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Factory for the FastAPI application."""
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="HighLevel to n8n OAuth Bridge",
        version=__version__,
        description="Completes HighLevel OAuth flows and stores the tokens as n8n credentials.",
    )
    app.include_router(router)
    app.exception_handler(BridgeError)(bridge_exception_handler)

    # Mounted last so API routes take precedence over files.
    if settings.static_dir.is_dir():
        app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="static")
    else:
        logger.warning("Static directory %s not found; success page will not be served", settings.static_dir)
    return app


app = create_app()

__all__ = ["app", "create_app"]
