"""Expose request and credential schemas."""

from .callback import UNKNOWN_CALLER, CallbackRequest, CallerContext
from .credentials import BridgeResult, CredentialSpec, ProvisionedCredential

__all__ = [
    "BridgeResult",
    "CallbackRequest",
    "CallerContext",
    "CredentialSpec",
    "ProvisionedCredential",
    "UNKNOWN_CALLER",
]
