"""
Authentication API Routes.
"""

from typing import Any, Optional

from fastapi import APIRouter, Body, Depends

from core.config import get_settings
from core.logger import logger
from internal.api.dependencies.auth import get_bearer_token
from internal.api.schemas import StandardResponse
from internal.api.utils import envelope_response
from services.interfaces import IAuthService

AUTH_RESPONSES = {
    400: {"description": "Missing or malformed credentials", "model": StandardResponse},
    401: {"description": "Credentials or token rejected", "model": StandardResponse},
    409: {"description": "Account already exists", "model": StandardResponse},
    500: {"description": "Identity provider or database failure", "model": StandardResponse},
}


def create_auth_routes(auth_service: IAuthService) -> APIRouter:
    """
    Factory function to create auth routes with dependency injection.

    Args:
        auth_service: Implementation of IAuthService

    Returns:
        APIRouter: Configured router with login, register, logout and user endpoints
    """
    router = APIRouter(prefix=get_settings().api_prefix, tags=["Auth"])

    @router.post(
        "/login",
        response_model=StandardResponse,
        summary="Login",
        description="Sign in with `{email, password}`",
        responses=AUTH_RESPONSES,
    )
    async def login(body: Any = Body(default=None)):
        """
        Sign in with email and password.

        **Returns:** `{token, uid}` where token is the identity provider ID token.
        """
        envelope = await auth_service.login(body)
        logger.debug(f"POST /login: status={envelope.status}")
        return envelope_response(envelope)

    @router.post(
        "/register",
        response_model=StandardResponse,
        summary="Register",
        description="Create an account from `{email, password, username?, firstName?, lastName?}`",
        responses=AUTH_RESPONSES,
    )
    async def register(body: Any = Body(default=None)):
        """
        Create an account and its profile.

        If the account is created but the profile write fails, the response is
        a 500 with error `PROFILE_PENDING` that still carries `{token, uid}`.
        Logging in, or posting the profile to `/user`, completes the setup.
        """
        envelope = await auth_service.register(body)
        logger.debug(f"POST /register: status={envelope.status}")
        return envelope_response(envelope)

    @router.post(
        "/logout",
        response_model=StandardResponse,
        summary="Logout",
        description="Token from the body `{token}` or an `Authorization: Bearer` header",
        responses=AUTH_RESPONSES,
    )
    async def logout(
        body: Any = Body(default=None),
        bearer_token: Optional[str] = Depends(get_bearer_token),
    ):
        token = body.get("token") if isinstance(body, dict) else None
        envelope = await auth_service.logout(token or bearer_token)
        return envelope_response(envelope)

    @router.post(
        "/user",
        response_model=StandardResponse,
        summary="Add User Profile",
        description="Store a profile document; an existing profile is left unchanged",
        responses=AUTH_RESPONSES,
    )
    async def add_user(body: Any = Body(default=None)):
        return envelope_response(await auth_service.add_user(body))

    return router
