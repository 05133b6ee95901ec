"""
Authentication dependencies for API endpoints.
"""

from typing import Optional

from fastapi import Header

from core.logger import logger


async def get_bearer_token(
    authorization: Optional[str] = Header(
        None, description="ID token as `Authorization: Bearer <token>`"
    )
) -> Optional[str]:
    """
    Extract the ID token from the Authorization header.

    Returns:
        The token, or None when the header is absent or not a Bearer credential
    """
    if not authorization:
        return None

    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        logger.warning("Ignoring Authorization header without a Bearer token")
        return None

    return token.strip()
