"""Expose dependency helpers for FastAPI routers."""

from .clients import (
    build_credential_bridge_service,
    get_caller_context_extractor,
    get_credential_bridge_service,
)
from .config import get_app_settings

__all__ = [
    "build_credential_bridge_service",
    "get_app_settings",
    "get_caller_context_extractor",
    "get_credential_bridge_service",
]
