"""
Factory functions to provide shared clients and services as FastAPI dependencies.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

import httpx

from oauth_bridge.clients import CredentialApiClient, OAuthTokenClient, WebhookNotifier
from oauth_bridge.core.config import AppSettings, get_settings
from oauth_bridge.services import CallerContextExtractor, CredentialBridgeService


@lru_cache()
def _settings() -> AppSettings:
    """Internal helper to cache settings for client factories."""
    return get_settings()


def build_credential_bridge_service(
    settings: AppSettings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> CredentialBridgeService:
    """Wire the pipeline from settings, optionally over a custom transport."""
    timeout = settings.http_timeout_seconds
    return CredentialBridgeService(
        token_client=OAuthTokenClient(settings.oauth, timeout=timeout, transport=transport),
        credential_client=CredentialApiClient(
            settings.credential_api, timeout=timeout, transport=transport
        ),
        notifier=WebhookNotifier(settings.webhook, timeout=timeout, transport=transport),
        oauth_settings=settings.oauth,
        credential_settings=settings.credential_api,
    )


@lru_cache()
def get_credential_bridge_service() -> CredentialBridgeService:
    """Provide the callback pipeline."""
    return build_credential_bridge_service(_settings())


@lru_cache()
def get_caller_context_extractor() -> CallerContextExtractor:
    """Provide the configured caller context strategy."""
    return CallerContextExtractor(_settings().caller_context)


__all__ = [
    "build_credential_bridge_service",
    "get_caller_context_extractor",
    "get_credential_bridge_service",
]
