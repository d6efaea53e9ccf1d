"""Credential payload construction for the n8n credential API."""

from .schema import (
    KNOWN_FIELDS,
    SCHEMA_VARIANTS,
    CredentialSchema,
    FieldContext,
    build_credential_data,
    get_schema,
)

__all__ = [
    "KNOWN_FIELDS",
    "SCHEMA_VARIANTS",
    "CredentialSchema",
    "FieldContext",
    "build_credential_data",
    "get_schema",
]
