"""
Callback pipeline: token exchange, credential provisioning, notification.
"""

from __future__ import annotations

import logging

from oauth_bridge.clients import CredentialApiClient, OAuthTokenClient, WebhookNotifier
from oauth_bridge.core.config import CredentialApiSettings, OAuthClientSettings
from oauth_bridge.core.exceptions import NotificationError
from oauth_bridge.credentials import FieldContext, build_credential_data, get_schema
from oauth_bridge.schemas import (
    BridgeResult,
    CallbackRequest,
    CredentialSpec,
    ProvisionedCredential,
)
from oauth_bridge.services.caller_context import credential_name

logger = logging.getLogger(__name__)


class CredentialBridgeService:
    """Turn a validated callback into an n8n credential."""

    def __init__(
        self,
        *,
        token_client: OAuthTokenClient,
        credential_client: CredentialApiClient,
        notifier: WebhookNotifier,
        oauth_settings: OAuthClientSettings,
        credential_settings: CredentialApiSettings,
    ) -> None:
        self._tokens = token_client
        self._credentials = credential_client
        self._notifier = notifier
        self._oauth = oauth_settings
        self._credential_settings = credential_settings
        self._schema = get_schema(credential_settings.schema_variant)

    def build_credential_spec(self, token_payload: dict, name: str) -> CredentialSpec:
        ctx = FieldContext(
            token_payload=token_payload,
            credential_api=self._credential_settings,
            oauth=self._oauth,
        )
        return CredentialSpec(
            name=name,
            type=self._credential_settings.credential_type,
            data=build_credential_data(self._schema, ctx),
        )

    async def complete(self, callback: CallbackRequest) -> BridgeResult:
        """
        Run the callback stages in order.

        Token exchange and provisioning errors propagate; notification errors
        are logged and dropped because the credential already exists.
        """
        token_payload = await self._tokens.exchange_authorization_code(callback.code)

        name = credential_name(self._credential_settings.name_prefix, callback.caller_context)
        spec = self.build_credential_spec(token_payload, name)
        credential = await self._credentials.create_credential(spec)

        notified = await self._notify(credential, callback, name)
        return BridgeResult(credential=credential, credential_name=name, notified=notified)

    async def _notify(
        self, credential: ProvisionedCredential, callback: CallbackRequest, name: str
    ) -> bool:
        if not self._notifier.enabled:
            logger.debug("No webhook configured; skipping notification for %s", credential.id)
            return False
        try:
            await self._notifier.notify(
                credential_id=credential.id,
                client_id=callback.caller_context.client_id,
                credential_name=name,
            )
        except NotificationError as exc:
            logger.error("Failed to notify n8n webhook: %s", exc.details)
            return False
        except Exception:  # pylint: disable=broad-except
            logger.exception("Unexpected error trying to notify n8n webhook")
            return False
        logger.info("Notified n8n webhook about credential %s", credential.id)
        return True


__all__ = ["CredentialBridgeService"]
