"""
Identity provider client for email/password authentication.
Talks to the Firebase Identity Toolkit REST API over httpx.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

from core.config import get_settings
from core.errors import (
    AuthenticationError,
    BackendFailure,
    ConflictError,
    ValidationFailure,
)
from core.logger import logger

# Provider error codes that mean "these credentials/token are not accepted"
CREDENTIAL_ERRORS = {
    "EMAIL_NOT_FOUND",
    "INVALID_PASSWORD",
    "INVALID_LOGIN_CREDENTIALS",
    "USER_DISABLED",
    "USER_NOT_FOUND",
    "INVALID_ID_TOKEN",
    "TOKEN_EXPIRED",
}

INPUT_ERRORS = {
    "INVALID_EMAIL",
    "MISSING_EMAIL",
    "MISSING_PASSWORD",
    "WEAK_PASSWORD",
}


@dataclass(frozen=True)
class IdentitySession:
    """Result of a successful sign-in or sign-up."""

    uid: str
    token: str


class IIdentityProvider(ABC):
    """Interface for the external identity service."""

    @abstractmethod
    async def sign_in(self, email: str, password: str) -> IdentitySession:
        """Authenticate an existing account."""
        pass

    @abstractmethod
    async def sign_up(self, email: str, password: str) -> IdentitySession:
        """Create a new account and sign it in."""
        pass

    @abstractmethod
    async def verify_token(self, token: str) -> str:
        """Return the uid the ID token belongs to."""
        pass

    async def close(self) -> None:
        """Release network resources."""
        pass


class FirebaseIdentityProvider(IIdentityProvider):
    """Firebase Identity Toolkit implementation of IIdentityProvider."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        settings = get_settings()
        self.api_key = api_key if api_key is not None else settings.firebase_api_key
        self.base_url = (base_url or settings.identity_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.identity_timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None
        logger.debug(f"FirebaseIdentityProvider initialized: {self.base_url}")

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def sign_in(self, email: str, password: str) -> IdentitySession:
        data = await self._call(
            "accounts:signInWithPassword",
            {"email": email, "password": password, "returnSecureToken": True},
        )
        return IdentitySession(uid=data["localId"], token=data["idToken"])

    async def sign_up(self, email: str, password: str) -> IdentitySession:
        data = await self._call(
            "accounts:signUp",
            {"email": email, "password": password, "returnSecureToken": True},
        )
        return IdentitySession(uid=data["localId"], token=data["idToken"])

    async def verify_token(self, token: str) -> str:
        data = await self._call("accounts:lookup", {"idToken": token})
        users = data.get("users") or []
        if not users:
            raise AuthenticationError("INVALID_ID_TOKEN")
        return users[0]["localId"]

    async def _call(self, endpoint: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        POST to an Identity Toolkit endpoint and translate provider errors.

        Raises:
            AuthenticationError: credentials or token rejected
            ConflictError: account already exists
            ValidationFailure: provider rejected the email/password shape
            BackendFailure: network failure, timeout or unexpected response
        """
        try:
            response = await self.client.post(
                f"/{endpoint}", params={"key": self.api_key}, json=payload
            )
        except httpx.TimeoutException as e:
            logger.error(f"Identity provider timeout on {endpoint}: {e}")
            raise BackendFailure("identity provider timed out", cause=e) from e
        except httpx.HTTPError as e:
            logger.error(f"Identity provider request failed on {endpoint}: {e}")
            raise BackendFailure(str(e), cause=e) from e

        if response.is_success:
            logger.debug(f"Identity provider call succeeded: {endpoint}")
            return response.json()

        code = self._error_code(response)
        logger.warning(f"Identity provider rejected {endpoint}: {code}")

        if code in CREDENTIAL_ERRORS:
            raise AuthenticationError(code)
        if code == "EMAIL_EXISTS":
            raise ConflictError(code)
        if code in INPUT_ERRORS:
            raise ValidationFailure([code])
        raise BackendFailure(code)

    @staticmethod
    def _error_code(response: httpx.Response) -> str:
        # Firebase messages look like "WEAK_PASSWORD : Password should be ..."
        try:
            message = response.json()["error"]["message"]
        except (ValueError, KeyError, TypeError):
            return f"HTTP_{response.status_code}"
        return str(message).split(" ")[0]
