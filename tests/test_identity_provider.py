import json

import httpx
import pytest

from core.errors import AuthenticationError, BackendFailure, ConflictError, ValidationFailure
from core.identity import FirebaseIdentityProvider


def _provider(handler):
    return FirebaseIdentityProvider(
        api_key="test-key",
        base_url="https://identity.test/v1",
        timeout=5.0,
        transport=httpx.MockTransport(handler),
    )


def _error(message, status_code=400):
    return httpx.Response(
        status_code, json={"error": {"code": status_code, "message": message}}
    )


@pytest.mark.asyncio
async def test_sign_in_posts_credentials_with_api_key():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["key"] = request.url.params["key"]
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"localId": "uid-1", "idToken": "tok"})

    provider = _provider(handler)
    session = await provider.sign_in("a@b.c", "secret")
    await provider.close()

    assert session.uid == "uid-1"
    assert session.token == "tok"
    assert seen["path"] == "/v1/accounts:signInWithPassword"
    assert seen["key"] == "test-key"
    assert seen["body"] == {"email": "a@b.c", "password": "secret", "returnSecureToken": True}


@pytest.mark.asyncio
async def test_sign_up_uses_sign_up_endpoint():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path.endswith("/accounts:signUp")
        return httpx.Response(200, json={"localId": "uid-2", "idToken": "tok-2"})

    session = await _provider(handler).sign_up("new@b.c", "secret")

    assert session.uid == "uid-2"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "message, expected",
    [
        ("INVALID_LOGIN_CREDENTIALS", AuthenticationError),
        ("EMAIL_NOT_FOUND", AuthenticationError),
        ("INVALID_PASSWORD", AuthenticationError),
        ("EMAIL_EXISTS", ConflictError),
        ("WEAK_PASSWORD : Password should be at least 6 characters", ValidationFailure),
        ("INVALID_EMAIL", ValidationFailure),
        ("QUOTA_EXCEEDED", BackendFailure),
    ],
)
async def test_provider_errors_are_translated(message, expected):
    provider = _provider(lambda request: _error(message))

    with pytest.raises(expected) as exc_info:
        await provider.sign_in("a@b.c", "secret")

    assert exc_info.value.message.startswith(message.split(" ")[0])


@pytest.mark.asyncio
async def test_unparseable_error_body_is_backend_failure():
    provider = _provider(lambda request: httpx.Response(503, text="unavailable"))

    with pytest.raises(BackendFailure) as exc_info:
        await provider.sign_up("a@b.c", "secret")

    assert exc_info.value.message == "HTTP_503"


@pytest.mark.asyncio
async def test_network_timeout_is_backend_failure():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    with pytest.raises(BackendFailure):
        await _provider(handler).sign_in("a@b.c", "secret")


@pytest.mark.asyncio
async def test_verify_token_returns_uid():
    def handler(request: httpx.Request) -> httpx.Response:
        assert json.loads(request.content) == {"idToken": "tok"}
        return httpx.Response(200, json={"users": [{"localId": "uid-3"}]})

    assert await _provider(handler).verify_token("tok") == "uid-3"


@pytest.mark.asyncio
async def test_verify_token_rejected():
    provider = _provider(lambda request: _error("INVALID_ID_TOKEN"))

    with pytest.raises(AuthenticationError):
        await provider.verify_token("forged")
