"""
Interface for Auth Service.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from services.envelope import Envelope


class IAuthService(ABC):
    """Interface for account and session operations."""

    @abstractmethod
    async def login(self, credentials: Optional[Dict[str, Any]]) -> Envelope:
        """
        Sign in with email and password.

        Returns:
            Envelope: data is {token, uid}
        """
        pass

    @abstractmethod
    async def register(self, profile: Optional[Dict[str, Any]]) -> Envelope:
        """
        Create an identity account and its profile document.

        Returns:
            Envelope: data is {token, uid}
        """
        pass

    @abstractmethod
    async def add_user(self, profile: Optional[Dict[str, Any]]) -> Envelope:
        """
        Store a profile document, keeping an existing one untouched.

        Returns:
            Envelope: data is the uid
        """
        pass

    @abstractmethod
    async def logout(self, token: Optional[str]) -> Envelope:
        """End a session identified by its ID token."""
        pass
