"""Client for the n8n public credentials API."""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from oauth_bridge.core.config import CredentialApiSettings
from oauth_bridge.core.exceptions import ProvisioningError
from oauth_bridge.core.http import response_details, transport_details
from oauth_bridge.schemas import CredentialSpec, ProvisionedCredential

logger = logging.getLogger(__name__)


class CredentialApiClient:
    """Create credentials through ``/api/v1/credentials``."""

    API_KEY_HEADER = "X-N8N-API-KEY"

    def __init__(
        self,
        settings: CredentialApiSettings,
        *,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._settings = settings
        self._timeout = timeout
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        return {
            "Accept": "application/json",
            self.API_KEY_HEADER: self._settings.api_key,
        }

    async def create_credential(self, spec: CredentialSpec) -> ProvisionedCredential:
        """Submit ``spec`` and return the created credential."""
        logger.info(
            "Creating n8n credential %r of type %s with data keys %s",
            spec.name,
            spec.type,
            sorted(spec.data),
        )
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.post(
                    self._settings.credentials_url,
                    json=spec.model_dump(),
                    headers=self._headers(),
                )
        except httpx.HTTPError as exc:
            raise ProvisioningError(transport_details(exc)) from exc

        if not response.is_success:
            raise ProvisioningError(response_details(response))

        try:
            body = response.json()
        except ValueError as exc:
            raise ProvisioningError(response.text) from exc
        if not isinstance(body, dict) or body.get("id") in (None, ""):
            raise ProvisioningError(body, message="Credential API response did not include an id")

        credential = ProvisionedCredential(
            id=str(body["id"]),
            name=body.get("name"),
            type=body.get("type"),
            raw=body,
        )
        logger.info("Created n8n credential %s", credential.id)
        return credential


__all__ = ["CredentialApiClient"]
