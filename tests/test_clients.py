try:
    from . import _bootstrap  # noqa: F401
    from ._upstream import CREDENTIALS_URL, TOKEN_PAYLOAD, TOKEN_URL, WEBHOOK_URL
except ImportError:  # pragma: no cover - fallback for direct execution
    import _bootstrap  # type: ignore # noqa: F401
    from _upstream import CREDENTIALS_URL, TOKEN_PAYLOAD, TOKEN_URL, WEBHOOK_URL  # type: ignore

import json

import httpx
import pytest

from oauth_bridge.clients import CredentialApiClient, OAuthTokenClient, WebhookNotifier
from oauth_bridge.core.config import CredentialApiSettings, OAuthClientSettings, WebhookSettings
from oauth_bridge.core.exceptions import NotificationError, ProvisioningError, TokenExchangeError
from oauth_bridge.schemas import CredentialSpec

pytestmark = pytest.mark.anyio


def _refuse(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("connection refused", request=request)


def _spec() -> CredentialSpec:
    return CredentialSpec(
        name="HighLevel – User Acme",
        type="highLevelOAuth2Api",
        data={"authUrl": "https://auth", "scope": "api", "oauthTokenData": TOKEN_PAYLOAD},
    )


async def test_exchange_returns_provider_payload_unchanged(upstream):
    client = OAuthTokenClient(OAuthClientSettings(), transport=upstream.transport)

    payload = await client.exchange_authorization_code("auth-code")

    assert payload == TOKEN_PAYLOAD
    assert len(upstream.calls_to(TOKEN_URL)) == 1


async def test_exchange_error_keeps_raw_text_body(upstream):
    upstream.handlers[TOKEN_URL] = lambda request: httpx.Response(502, text="Bad Gateway from edge")
    client = OAuthTokenClient(OAuthClientSettings(), transport=upstream.transport)

    with pytest.raises(TokenExchangeError) as excinfo:
        await client.exchange_authorization_code("auth-code")

    assert excinfo.value.details == "Bad Gateway from edge"
    assert excinfo.value.status_code == 500


async def test_exchange_transport_failure_reports_message(upstream):
    upstream.handlers[TOKEN_URL] = _refuse
    client = OAuthTokenClient(OAuthClientSettings(), transport=upstream.transport)

    with pytest.raises(TokenExchangeError) as excinfo:
        await client.exchange_authorization_code("auth-code")

    assert excinfo.value.details == "connection refused"


async def test_exchange_rejects_non_object_payload(upstream):
    upstream.handlers[TOKEN_URL] = lambda request: httpx.Response(200, json=["access"])
    client = OAuthTokenClient(OAuthClientSettings(), transport=upstream.transport)

    with pytest.raises(TokenExchangeError):
        await client.exchange_authorization_code("auth-code")


async def test_create_credential_posts_spec(upstream):
    client = CredentialApiClient(CredentialApiSettings(), transport=upstream.transport)

    credential = await client.create_credential(_spec())

    assert credential.id == "cred-42"
    assert credential.name == "HighLevel – User Acme"
    (request,) = upstream.calls_to(CREDENTIALS_URL)
    assert json.loads(request.content) == _spec().model_dump()


async def test_create_credential_stringifies_numeric_id(upstream):
    upstream.handlers[CREDENTIALS_URL] = lambda request: httpx.Response(200, json={"id": 17})
    client = CredentialApiClient(CredentialApiSettings(), transport=upstream.transport)

    credential = await client.create_credential(_spec())

    assert credential.id == "17"


async def test_create_credential_unauthorized(upstream):
    upstream.handlers[CREDENTIALS_URL] = lambda request: httpx.Response(
        401, json={"message": "unauthorized"}
    )
    client = CredentialApiClient(CredentialApiSettings(), transport=upstream.transport)

    with pytest.raises(ProvisioningError) as excinfo:
        await client.create_credential(_spec())

    assert excinfo.value.details == {"message": "unauthorized"}


async def test_create_credential_without_id_fails(upstream):
    upstream.handlers[CREDENTIALS_URL] = lambda request: httpx.Response(200, json={"name": "x"})
    client = CredentialApiClient(CredentialApiSettings(), transport=upstream.transport)

    with pytest.raises(ProvisioningError) as excinfo:
        await client.create_credential(_spec())

    assert excinfo.value.details == {"name": "x"}


async def test_create_credential_transport_failure(upstream):
    upstream.handlers[CREDENTIALS_URL] = _refuse
    client = CredentialApiClient(CredentialApiSettings(), transport=upstream.transport)

    with pytest.raises(ProvisioningError) as excinfo:
        await client.create_credential(_spec())

    assert excinfo.value.details == "connection refused"


async def test_webhook_uses_configured_field_names(upstream):
    settings = WebhookSettings(
        WEBHOOK_URL=WEBHOOK_URL,
        WEBHOOK_PAYLOAD_FIELDS={
            "credential_id": "credentialId",
            "client_id": "callerContext",
            "credential_name": "credentialName",
        },
    )
    notifier = WebhookNotifier(settings, transport=upstream.transport)

    await notifier.notify(credential_id="cred-1", client_id=None, credential_name="HighLevel – User unknown")

    (request,) = upstream.calls_to(WEBHOOK_URL)
    assert json.loads(request.content) == {
        "credentialId": "cred-1",
        "callerContext": None,
        "credentialName": "HighLevel – User unknown",
    }


async def test_webhook_error_status_raises_notification_error(upstream):
    upstream.handlers[WEBHOOK_URL] = lambda request: httpx.Response(500, text="boom")
    notifier = WebhookNotifier(WebhookSettings(WEBHOOK_URL=WEBHOOK_URL), transport=upstream.transport)

    with pytest.raises(NotificationError) as excinfo:
        await notifier.notify(credential_id="cred-1", client_id="c1", credential_name="n")

    assert excinfo.value.details == "boom"


async def test_webhook_disabled_without_url():
    notifier = WebhookNotifier(WebhookSettings())

    assert notifier.enabled is False
    with pytest.raises(NotificationError):
        await notifier.notify(credential_id="cred-1", client_id="c1", credential_name="n")
