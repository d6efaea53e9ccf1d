"""
Application configuration models and helpers.

Every deployment-specific knob of the callback bridge lives here: the OAuth
client registration, the credential API and its schema variant, the caller
context strategy and the optional notification webhook.
"""

from functools import lru_cache
from pathlib import Path
from typing import Dict, Literal, Optional

import os

from pydantic import AnyHttpUrl, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from oauth_bridge.credentials.schema import SCHEMA_VARIANTS


def _load_env_file(path: str = ".env") -> None:
    """Best-effort load key=value pairs from a .env file into os.environ."""
    env_path = Path(path)
    if not env_path.exists():
        return
    for raw_line in env_path.read_text().splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        key, sep, value = line.partition("=")
        if not sep:
            continue
        key = key.strip()
        if not key or key in os.environ:
            continue
        cleaned = value.strip().strip('"').strip("'")
        os.environ[key] = cleaned


_load_env_file()

_STATIC_DIR = Path(__file__).resolve().parent.parent / "static"


class _EnvSettings(BaseSettings):
    model_config = SettingsConfigDict(populate_by_name=True, extra="ignore")


class OAuthClientSettings(_EnvSettings):
    """OAuth client registration used for the code-for-token exchange."""

    client_id: str = Field(..., validation_alias="OAUTH_CLIENT_ID")
    client_secret: str = Field(..., validation_alias="OAUTH_CLIENT_SECRET")
    redirect_uri: AnyHttpUrl = Field(..., validation_alias="OAUTH_REDIRECT_URI")
    token_endpoint: AnyHttpUrl = Field(
        "https://services.leadconnectorhq.com/oauth/token",
        validation_alias="OAUTH_TOKEN_ENDPOINT",
    )


class CredentialApiSettings(_EnvSettings):
    """Settings for the n8n credential-management API."""

    base_url: AnyHttpUrl = Field(..., validation_alias="N8N_URL")
    api_key: str = Field(..., validation_alias="N8N_API_KEY")
    credential_type: str = Field("highLevelOAuth2Api", validation_alias="CREDENTIAL_TYPE")
    schema_variant: str = Field(
        "minimal",
        validation_alias="CREDENTIAL_SCHEMA_VARIANT",
        description="Name of the credential data field-set accepted by the n8n instance.",
    )
    name_prefix: str = Field("HighLevel – User", validation_alias="CREDENTIAL_NAME_PREFIX")
    auth_url: str = Field(
        "https://marketplace.gohighlevel.com/oauth/chooselocation",
        validation_alias="HIGHLEVEL_AUTH_URL",
    )
    scope: Optional[str] = Field(
        None,
        validation_alias="HIGHLEVEL_SCOPE",
        description="Scope override. Falls back to the scope echoed by the token endpoint.",
    )
    server_url: str = Field(
        "https://services.leadconnectorhq.com",
        validation_alias="HIGHLEVEL_SERVER_URL",
    )

    @field_validator("schema_variant")
    @classmethod
    def _known_variant(cls, value: str) -> str:
        """Reject schema variants that have no field-set declared."""
        if value not in SCHEMA_VARIANTS:
            known = ", ".join(sorted(SCHEMA_VARIANTS))
            raise ValueError(f"Unknown credential schema variant {value!r} (known: {known}).")
        return value

    @property
    def credentials_url(self) -> str:
        return f"{str(self.base_url).rstrip('/')}/api/v1/credentials"


class CallerContextSettings(_EnvSettings):
    """How the caller identity is carried on the callback request."""

    mode: Literal["query", "state"] = Field("query", validation_alias="CALLER_CONTEXT_MODE")
    client_id_param: str = Field("n8nClientId", validation_alias="CALLER_CLIENT_ID_PARAM")
    business_name_param: str = Field(
        "businessName", validation_alias="CALLER_BUSINESS_NAME_PARAM"
    )


class WebhookSettings(_EnvSettings):
    """Optional webhook notified once a credential has been created."""

    url: Optional[AnyHttpUrl] = Field(None, validation_alias="WEBHOOK_URL")
    payload_fields: Dict[str, str] = Field(
        default_factory=lambda: {
            "credential_id": "ghlCredentialId",
            "client_id": "clientId",
            "credential_name": "ghlCredentialName",
        },
        validation_alias="WEBHOOK_PAYLOAD_FIELDS",
    )

    @field_validator("payload_fields")
    @classmethod
    def _complete_field_map(cls, value: Dict[str, str]) -> Dict[str, str]:
        missing = {"credential_id", "client_id", "credential_name"} - set(value)
        if missing:
            raise ValueError(f"Webhook payload field map is missing {sorted(missing)}.")
        return value


class AppSettings(_EnvSettings):
    """Root settings object for the FastAPI application."""

    environment: str = Field("development", validation_alias="APP_ENV")
    log_level: str = Field("INFO", validation_alias="APP_LOG_LEVEL")
    port: int = Field(3000, validation_alias="PORT")
    http_timeout_seconds: float = Field(
        10.0,
        validation_alias="HTTP_TIMEOUT_SECONDS",
        description="Upper bound for each outbound call made while handling a callback.",
    )
    success_redirect_url: str = Field("/success.html", validation_alias="SUCCESS_REDIRECT_URL")
    static_dir: Path = Field(_STATIC_DIR, validation_alias="STATIC_DIR")
    oauth: OAuthClientSettings = Field(default_factory=OAuthClientSettings)
    credential_api: CredentialApiSettings = Field(default_factory=CredentialApiSettings)
    caller_context: CallerContextSettings = Field(default_factory=CallerContextSettings)
    webhook: WebhookSettings = Field(default_factory=WebhookSettings)


@lru_cache()
def get_settings() -> AppSettings:
    """Return a cached settings object."""
    return AppSettings()  # type: ignore[call-arg]


__all__ = [
    "AppSettings",
    "CallerContextSettings",
    "CredentialApiSettings",
    "OAuthClientSettings",
    "WebhookSettings",
    "get_settings",
]
