"""Schemas describing the inbound OAuth callback."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

UNKNOWN_CALLER = "unknown"


class CallerContext(BaseModel):
    """Opaque identity of whoever started the OAuth flow. Used for labels only."""

    client_id: Optional[str] = Field(
        default=None, description="Identifier of the caller in the automation platform."
    )
    business_name: Optional[str] = Field(
        default=None, description="Display name of the connected business."
    )

    @property
    def label(self) -> str:
        """Human readable label: business name, then client id, then ``unknown``."""
        for candidate in (self.business_name, self.client_id):
            if candidate and candidate.strip():
                return candidate.strip()
        return UNKNOWN_CALLER


class CallbackRequest(BaseModel):
    """Validated callback carrying the authorization code."""

    code: str = Field(..., min_length=1, description="Authorization code from the provider.")
    caller_context: CallerContext = Field(default_factory=CallerContext)


__all__ = ["CallbackRequest", "CallerContext", "UNKNOWN_CALLER"]
