"""OAuth2 authorization-code bridge that provisions n8n credentials."""

__version__ = "0.1.0"
