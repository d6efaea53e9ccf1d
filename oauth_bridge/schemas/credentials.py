"""Schemas for the credential created in n8n."""

from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field


class CredentialSpec(BaseModel):
    """Body submitted to ``POST /api/v1/credentials``."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    type: str
    data: Dict[str, Any]


class ProvisionedCredential(BaseModel):
    """Subset of the credential API response used by later stages."""

    id: str
    name: str | None = None
    type: str | None = None
    raw: Dict[str, Any] = Field(default_factory=dict, repr=False)


class BridgeResult(BaseModel):
    """Outcome of a completed callback."""

    credential: ProvisionedCredential
    credential_name: str
    notified: bool = False


__all__ = ["BridgeResult", "CredentialSpec", "ProvisionedCredential"]
