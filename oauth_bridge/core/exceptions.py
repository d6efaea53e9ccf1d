"""Shared exceptions for the callback pipeline."""

from http import HTTPStatus
from typing import Any, Optional


class BridgeError(Exception):
    """Base exception for failures while handling an OAuth callback."""

    status_code: int = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, message: str, details: Optional[Any] = None):
        """Create a new BridgeError.

        Args:
        ----
            message (str): Short, stable description returned to the caller.
            details (Any, optional): Upstream error body or transport message.

        """
        self.message = message
        self.details = details
        super().__init__(message)


class CallbackValidationError(BridgeError):
    """Raised when the callback request is missing required input."""

    status_code = HTTPStatus.BAD_REQUEST


class TokenExchangeError(BridgeError):
    """Raised when the token endpoint rejects the code or cannot be reached."""

    def __init__(
        self,
        details: Optional[Any] = None,
        message: str = "Failed to exchange authorization code",
    ):
        super().__init__(message, details)


class ProvisioningError(BridgeError):
    """Raised when the credential API rejects the credential or cannot be reached."""

    def __init__(
        self,
        details: Optional[Any] = None,
        message: str = "Failed to create n8n credential",
    ):
        super().__init__(message, details)


class NotificationError(BridgeError):
    """Raised by the webhook client. Never leaves the notification stage."""

    def __init__(
        self,
        details: Optional[Any] = None,
        message: str = "Failed to notify webhook",
    ):
        super().__init__(message, details)


__all__ = [
    "BridgeError",
    "CallbackValidationError",
    "NotificationError",
    "ProvisioningError",
    "TokenExchangeError",
]
