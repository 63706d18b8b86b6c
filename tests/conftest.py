import os

# Settings are read at import time of career_advisor.main
os.environ.setdefault("MONGODB_URI", "mongodb://localhost:27017")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")

from unittest.mock import MagicMock

import mongomock
import pytest
from fastapi.testclient import TestClient

from career_advisor.api import deps
from career_advisor.core.security import PasswordHasher, TokenService
from career_advisor.services.account_store import AccountStore
from career_advisor.services.auth_service import Authenticator
from career_advisor.services.ollama_client import OllamaClient


@pytest.fixture()
def users_collection():
    client = mongomock.MongoClient()
    return client["career_advisor_test"]["users"]


@pytest.fixture()
def store(users_collection) -> AccountStore:
    store = AccountStore(users_collection)
    store.ensure_indexes()
    return store


@pytest.fixture()
def hasher() -> PasswordHasher:
    # Minimum bcrypt cost keeps the suite fast
    return PasswordHasher(rounds=4)


@pytest.fixture()
def tokens() -> TokenService:
    return TokenService(secret_key="unit-test-secret", algorithm="HS256", expire_minutes=60)


@pytest.fixture()
def authenticator(store, hasher, tokens) -> Authenticator:
    return Authenticator(store, hasher, tokens)


@pytest.fixture()
def ollama():
    return MagicMock(spec=OllamaClient)


@pytest.fixture()
def client(store, hasher, tokens, ollama):
    from career_advisor.main import app

    app.dependency_overrides[deps.get_account_store] = lambda: store
    app.dependency_overrides[deps.get_password_hasher] = lambda: hasher
    app.dependency_overrides[deps.get_token_service] = lambda: tokens
    app.dependency_overrides[deps.get_ollama_client] = lambda: ollama
    # Not used as a context manager: startup would connect to a real MongoDB
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def signup_payload() -> dict:
    return {
        "email": "a@x.com",
        "password": "secret1",
        "firstName": "Ann",
        "lastName": "Lee",
    }
