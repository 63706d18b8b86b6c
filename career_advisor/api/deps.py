"""
Dependency providers.

Every component is built once from Settings and handed to routes through
FastAPI's Depends. Tests swap any of them via app.dependency_overrides.
"""

from functools import lru_cache

from fastapi import Depends

from career_advisor.core.config import get_settings
from career_advisor.core.security import PasswordHasher, TokenService
from career_advisor.db.mongodb import get_collection, COLLECTIONS
from career_advisor.services.account_store import AccountStore
from career_advisor.services.auth_service import Authenticator
from career_advisor.services.ollama_client import OllamaClient


@lru_cache()
def get_password_hasher() -> PasswordHasher:
    return PasswordHasher(rounds=get_settings().bcrypt_rounds)


@lru_cache()
def get_token_service() -> TokenService:
    settings = get_settings()
    return TokenService(
        secret_key=settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
        expire_minutes=settings.jwt_expire_minutes
    )


@lru_cache()
def get_account_store() -> AccountStore:
    return AccountStore(get_collection(COLLECTIONS["users"]))


@lru_cache()
def get_ollama_client() -> OllamaClient:
    return OllamaClient(get_settings())


def get_authenticator(
    store: AccountStore = Depends(get_account_store),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: TokenService = Depends(get_token_service),
) -> Authenticator:
    return Authenticator(store, hasher, tokens)
