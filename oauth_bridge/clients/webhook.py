"""Webhook notifier announcing a newly created credential."""

from __future__ import annotations

from typing import Optional

import httpx

from oauth_bridge.core.config import WebhookSettings
from oauth_bridge.core.exceptions import NotificationError
from oauth_bridge.core.http import response_details, transport_details


class WebhookNotifier:
    """POST a small JSON document to the configured n8n webhook."""

    def __init__(
        self,
        settings: WebhookSettings,
        *,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._settings = settings
        self._timeout = timeout
        self._transport = transport

    @property
    def enabled(self) -> bool:
        return self._settings.url is not None

    def build_payload(
        self, *, credential_id: str, client_id: Optional[str], credential_name: str
    ) -> dict:
        fields = self._settings.payload_fields
        return {
            fields["credential_id"]: credential_id,
            fields["client_id"]: client_id,
            fields["credential_name"]: credential_name,
        }

    async def notify(
        self, *, credential_id: str, client_id: Optional[str], credential_name: str
    ) -> None:
        """Send the notification, raising ``NotificationError`` on any failure."""
        if self._settings.url is None:
            raise NotificationError("No webhook URL configured.")

        payload = self.build_payload(
            credential_id=credential_id,
            client_id=client_id,
            credential_name=credential_name,
        )
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.post(str(self._settings.url), json=payload)
        except httpx.HTTPError as exc:
            raise NotificationError(transport_details(exc)) from exc

        if not response.is_success:
            raise NotificationError(response_details(response))


__all__ = ["WebhookNotifier"]
