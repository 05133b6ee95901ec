"""
Auth service: login, registration and profile bootstrap.

Credential checks are delegated to the identity provider; this service only
checks that inputs are present and string-typed before calling it.

Registration is two-phase. The identity account is created first, then the
default profile document is written through `add_user`. The second phase is an
insert-if-absent keyed by uid, so it can be retried freely, and every login
repeats it, which repairs accounts whose profile write failed.
"""

from typing import Any, Dict, Optional, Tuple

from pydantic import ValidationError

from core.errors import ErrorKind, MissingParameterError, ValidationFailure
from core.identity import IdentitySession, IIdentityProvider
from core.logger import format_exception_short, logger
from repositories.interfaces import IProfileRepository
from repositories.models import ProfileModel, default_profile
from repositories.profile_repository import ProfileRepository
from repositories.schema import collect_violations, validate_string_type
from services.envelope import Envelope, failure_envelope
from services.interfaces import IAuthService


def _session_data(session: IdentitySession) -> Dict[str, str]:
    return {"token": session.token, "uid": session.uid}


def _require_object(data: Any) -> Dict[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationFailure(["body: must be a JSON object"])
    return data


def _credentials(data: Any) -> Tuple[str, str]:
    payload = _require_object(data)
    email = payload.get("email")
    password = payload.get("password")
    if not email or not password:
        raise MissingParameterError("Email and password are required")
    validate_string_type(
        values=[email, password], error_message="Email and password must be strings"
    )
    return email, password


class AuthService(IAuthService):
    """IAuthService backed by an external identity provider."""

    def __init__(
        self,
        identity_provider: IIdentityProvider,
        profile_repository: Optional[IProfileRepository] = None,
    ):
        self.identity_provider = identity_provider
        self.profile_repository = profile_repository or ProfileRepository()
        logger.debug("AuthService initialized")

    async def login(self, credentials: Optional[Dict[str, Any]]) -> Envelope:
        try:
            email, password = _credentials(credentials)
            session = await self.identity_provider.sign_in(email, password)
        except Exception as e:
            return failure_envelope("Error logging in", e)

        await self._reconcile_profile(session.uid, email)
        logger.info(f"User logged in: uid={session.uid}")
        return Envelope.ok("Login successful", data=_session_data(session))

    async def register(self, profile: Optional[Dict[str, Any]]) -> Envelope:
        try:
            email, password = _credentials(profile)
            username = profile.get("username")
            first_name = profile.get("firstName")
            last_name = profile.get("lastName")
            validate_string_type(
                values=[username, first_name, last_name],
                error_message="username, firstName and lastName must be strings",
            )
            session = await self.identity_provider.sign_up(email, password)
        except Exception as e:
            return failure_envelope("Error registering user", e)

        logger.info(f"Identity account created: uid={session.uid}")

        document = default_profile(
            email=email,
            uid=session.uid,
            username=username,
            first_name=first_name or "",
            last_name=last_name or "",
        )
        result = await self.add_user(document.model_dump())
        if not result.success:
            logger.error(
                f"Profile write failed after sign-up, uid={session.uid}: {result.message}"
            )
            return Envelope.fail(
                f"Account created but profile setup is pending: {result.message}",
                500,
                ErrorKind.PROFILE_PENDING,
                data=_session_data(session),
            )

        return Envelope.ok("User registered successfully", data=_session_data(session))

    async def add_user(self, profile: Optional[Dict[str, Any]]) -> Envelope:
        try:
            if not profile:
                raise MissingParameterError("User profile is required")
            payload = _require_object(profile)
            try:
                model = ProfileModel.model_validate(payload)
            except ValidationError as e:
                raise ValidationFailure(collect_violations(e)) from e

            created = await self.profile_repository.ensure_profile(model.uid, model.model_dump())
            message = "User added successfully" if created else "User already exists"
            return Envelope.ok(message, data=model.uid)

        except Exception as e:
            return failure_envelope("Error adding user", e)

    async def logout(self, token: Optional[str]) -> Envelope:
        """
        ID tokens are stateless, so logging out only confirms the token is
        still accepted by the identity provider.
        """
        try:
            if not token:
                raise MissingParameterError("Token is required")
            validate_string_type(token, error_message="Token must be a string")
            uid = await self.identity_provider.verify_token(token)
            logger.info(f"User logged out: uid={uid}")
            return Envelope.ok("Logout successful")

        except Exception as e:
            return failure_envelope("Error logging out", e)

    async def _reconcile_profile(self, uid: str, email: str) -> None:
        try:
            await self.profile_repository.ensure_profile(
                uid, default_profile(email=email, uid=uid).model_dump()
            )
        except Exception as e:
            # The session is valid, the profile is retried on the next login
            logger.error(format_exception_short(e, f"Profile reconciliation failed for uid={uid}"))
