import importlib.util
import sys
from pathlib import Path
from typing import Dict, List, Tuple

import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from core.errors import AuthenticationError, ConflictError
from core.identity import IdentitySession, IIdentityProvider

PROJECT_ROOT = Path(__file__).resolve().parent.parent


def load_api_main():
    # Import cmd/api/main.py by path to avoid conflict with stdlib cmd
    module_name = "taskflow_api_main"
    if module_name in sys.modules:
        return sys.modules[module_name]
    spec = importlib.util.spec_from_file_location(
        module_name, PROJECT_ROOT / "cmd" / "api" / "main.py"
    )
    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    spec.loader.exec_module(module)
    return module


class FakeIdentityProvider(IIdentityProvider):
    """In-memory identity provider recording every call."""

    def __init__(self):
        self.accounts: Dict[str, Tuple[str, str]] = {}
        self.calls: List[str] = []

    def add_account(self, email: str, password: str) -> str:
        uid = f"uid-{len(self.accounts) + 1}"
        self.accounts[email] = (uid, password)
        return uid

    async def sign_in(self, email: str, password: str) -> IdentitySession:
        self.calls.append("sign_in")
        account = self.accounts.get(email)
        if account is None or account[1] != password:
            raise AuthenticationError("INVALID_LOGIN_CREDENTIALS")
        return IdentitySession(uid=account[0], token=f"token-{account[0]}")

    async def sign_up(self, email: str, password: str) -> IdentitySession:
        self.calls.append("sign_up")
        if email in self.accounts:
            raise ConflictError("EMAIL_EXISTS")
        uid = self.add_account(email, password)
        return IdentitySession(uid=uid, token=f"token-{uid}")

    async def verify_token(self, token: str) -> str:
        self.calls.append("verify_token")
        for uid, _ in self.accounts.values():
            if token == f"token-{uid}":
                return uid
        raise AuthenticationError("INVALID_ID_TOKEN")


@pytest.fixture
def database():
    return AsyncMongoMockClient()["taskflow_test"]


@pytest.fixture
def identity_provider():
    return FakeIdentityProvider()


@pytest.fixture
def app(database, identity_provider):
    return load_api_main().create_app(database=database, identity_provider=identity_provider)


@pytest.fixture
def client(app):
    return TestClient(app)
