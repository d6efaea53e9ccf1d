"""
Extraction of the callback request and its caller context.

The caller context only labels the credential, so a malformed value never
fails the request: it degrades to the ``unknown`` context instead.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Mapping, Optional

from pydantic import ValidationError

from oauth_bridge.core.config import CallerContextSettings
from oauth_bridge.core.exceptions import CallbackValidationError
from oauth_bridge.schemas import CallbackRequest, CallerContext

logger = logging.getLogger(__name__)

_STATE_CLIENT_ID_KEYS = ("clientId", "n8nClientId")
_STATE_BUSINESS_NAME_KEYS = ("businessName",)


def _first_present(data: Mapping[str, Any], keys: tuple[str, ...]) -> Optional[str]:
    for key in keys:
        value = data.get(key)
        if value is None or value == "":
            continue
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        if not isinstance(value, str):
            raise TypeError(f"State field {key!r} must be a string, got {type(value).__name__}.")
        return value
    return None


def parse_state(state: Optional[str]) -> CallerContext:
    """Decode the JSON ``state`` (already percent-decoded by the framework)."""
    if not state:
        return CallerContext()
    try:
        decoded = json.loads(state)
        if not isinstance(decoded, dict):
            raise TypeError(f"Expected a JSON object, got {type(decoded).__name__}.")
        return CallerContext(
            client_id=_first_present(decoded, _STATE_CLIENT_ID_KEYS),
            business_name=_first_present(decoded, _STATE_BUSINESS_NAME_KEYS),
        )
    except (ValueError, TypeError, RecursionError, ValidationError) as exc:
        logger.warning("Could not parse OAuth state %r, using unknown caller: %s", state[:200], exc)
        return CallerContext()


class CallerContextExtractor:
    """Build a ``CallbackRequest`` from query parameters using the configured strategy."""

    def __init__(self, settings: CallerContextSettings) -> None:
        self._settings = settings

    def extract_context(self, query: Mapping[str, str]) -> CallerContext:
        if self._settings.mode == "state":
            return parse_state(query.get("state"))
        return CallerContext(
            client_id=query.get(self._settings.client_id_param) or None,
            business_name=query.get(self._settings.business_name_param) or None,
        )

    def validate(self, query: Mapping[str, str]) -> CallbackRequest:
        """Return the validated callback or raise ``CallbackValidationError``."""
        code = query.get("code")
        if not code:
            raise CallbackValidationError("Missing code parameter")
        return CallbackRequest(code=code, caller_context=self.extract_context(query))


def credential_name(prefix: str, context: CallerContext) -> str:
    """Name shown in n8n, e.g. ``HighLevel – User Acme``."""
    return f"{prefix} {context.label}"


__all__ = ["CallerContextExtractor", "credential_name", "parse_state"]
