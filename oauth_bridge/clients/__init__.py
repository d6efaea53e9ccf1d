"""Expose outbound HTTP clients."""

from .credential_api import CredentialApiClient
from .oauth_provider import OAuthTokenClient
from .webhook import WebhookNotifier

__all__ = [
    "CredentialApiClient",
    "OAuthTokenClient",
    "WebhookNotifier",
]
