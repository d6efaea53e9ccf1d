"""
HighLevel OAuth client.

Exchanges the authorization code delivered to the callback for tokens.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from oauth_bridge.core.config import OAuthClientSettings
from oauth_bridge.core.exceptions import TokenExchangeError
from oauth_bridge.core.http import response_details, transport_details

logger = logging.getLogger(__name__)


class OAuthTokenClient:
    """Perform the ``authorization_code`` grant against the provider token endpoint."""

    def __init__(
        self,
        settings: OAuthClientSettings,
        *,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._settings = settings
        self._timeout = timeout
        self._transport = transport

    async def exchange_authorization_code(self, code: str) -> Dict[str, Any]:
        """
        Exchange an authorization code for tokens.

        Returns the token endpoint's JSON body untouched.
        """
        payload = {
            "grant_type": "authorization_code",
            "code": code,
            "redirect_uri": str(self._settings.redirect_uri),
            "client_id": self._settings.client_id,
            "client_secret": self._settings.client_secret,
        }

        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                # The provider only accepts form-urlencoded bodies here.
                response = await client.post(
                    str(self._settings.token_endpoint),
                    data=payload,
                    headers={"Accept": "application/json"},
                )
        except httpx.HTTPError as exc:
            raise TokenExchangeError(transport_details(exc)) from exc

        if not response.is_success:
            raise TokenExchangeError(response_details(response))

        try:
            token_payload = response.json()
        except ValueError as exc:
            raise TokenExchangeError(response.text) from exc
        if not isinstance(token_payload, dict):
            raise TokenExchangeError("Token endpoint returned a non-object payload.")

        logger.info("Received token payload with keys %s", sorted(token_payload))
        return token_payload


__all__ = ["OAuthTokenClient"]
