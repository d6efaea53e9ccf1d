"""Service layer exports."""

from .caller_context import CallerContextExtractor, credential_name, parse_state
from .credential_bridge import CredentialBridgeService

__all__ = [
    "CallerContextExtractor",
    "CredentialBridgeService",
    "credential_name",
    "parse_state",
]
