"""
Field-set descriptors for the ``highLevelOAuth2Api`` credential ``data`` object.

n8n validates ``data`` against a JSON schema whose required and forbidden keys
depend on the instance's version and feature flags. Each variant below is a
declaration of the keys it accepts; every key is filled by a single shared
resolver, and keys a variant does not declare are forbidden for it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Dict, FrozenSet, Mapping, Tuple

if TYPE_CHECKING:
    from oauth_bridge.core.config import CredentialApiSettings, OAuthClientSettings

DEFAULT_SCOPE = "api"


@dataclass(frozen=True)
class FieldContext:
    """Inputs available to field resolvers while building ``data``."""

    token_payload: Mapping[str, Any]
    credential_api: "CredentialApiSettings"
    oauth: "OAuthClientSettings"


def _resolve_scope(ctx: FieldContext) -> str:
    if ctx.credential_api.scope:
        return ctx.credential_api.scope
    echoed = ctx.token_payload.get("scope")
    if isinstance(echoed, str) and echoed:
        return echoed
    return DEFAULT_SCOPE


FIELD_RESOLVERS: Dict[str, Callable[[FieldContext], Any]] = {
    "authUrl": lambda ctx: ctx.credential_api.auth_url,
    "scope": _resolve_scope,
    # Stored whole so n8n can refresh the token itself.
    "oauthTokenData": lambda ctx: ctx.token_payload,
    "serverUrl": lambda ctx: ctx.credential_api.server_url,
    "clientId": lambda ctx: ctx.oauth.client_id,
    "clientSecret": lambda ctx: ctx.oauth.client_secret,
    "sendAdditionalBodyProperties": lambda ctx: False,
    "additionalBodyProperties": lambda ctx: "{}",
}

KNOWN_FIELDS: FrozenSet[str] = frozenset(FIELD_RESOLVERS)


@dataclass(frozen=True)
class CredentialSchema:
    """Keys a given n8n schema variant accepts in ``data``."""

    name: str
    fields: Tuple[str, ...]

    def __post_init__(self) -> None:
        unknown = set(self.fields) - KNOWN_FIELDS
        if unknown:
            raise ValueError(f"Schema {self.name!r} declares unknown fields {sorted(unknown)}.")

    @property
    def forbidden(self) -> FrozenSet[str]:
        return KNOWN_FIELDS - set(self.fields)


_MINIMAL_FIELDS = ("authUrl", "scope", "oauthTokenData")

SCHEMA_VARIANTS: Dict[str, CredentialSchema] = {
    "minimal": CredentialSchema(name="minimal", fields=_MINIMAL_FIELDS),
    # Instances whose feature flags force the custom grant / app registration mode.
    "extended": CredentialSchema(
        name="extended",
        fields=_MINIMAL_FIELDS
        + (
            "serverUrl",
            "clientId",
            "clientSecret",
            "sendAdditionalBodyProperties",
            "additionalBodyProperties",
        ),
    ),
}


def get_schema(name: str) -> CredentialSchema:
    """Look up a schema variant by name."""
    try:
        return SCHEMA_VARIANTS[name]
    except KeyError as exc:
        raise ValueError(f"Unknown credential schema variant {name!r}.") from exc


def build_credential_data(schema: CredentialSchema, ctx: FieldContext) -> Dict[str, Any]:
    """Build ``data`` containing exactly the keys declared by ``schema``."""
    return {field: FIELD_RESOLVERS[field](ctx) for field in schema.fields}


__all__ = [
    "DEFAULT_SCOPE",
    "FIELD_RESOLVERS",
    "KNOWN_FIELDS",
    "SCHEMA_VARIANTS",
    "CredentialSchema",
    "FieldContext",
    "build_credential_data",
    "get_schema",
]
