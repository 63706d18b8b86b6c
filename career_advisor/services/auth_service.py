"""
Authentication Service - signup and login.

Ties AccountStore, PasswordHasher and TokenService together and translates
their errors into the API error taxonomy. Everything here blocks (bcrypt,
pymongo), so routes call it through the threadpool.
"""

import logging
from typing import Tuple

from career_advisor.core.errors import Conflict, InvalidCredentials
from career_advisor.core.security import PasswordHasher, TokenService
from career_advisor.schemas.schemas import PublicUser, SignupRequest, UserProfile
from career_advisor.services.account_store import AccountStore, DuplicateEmail, SECRET_FIELD

logger = logging.getLogger(__name__)


class Authenticator:

    def __init__(self, store: AccountStore, hasher: PasswordHasher, tokens: TokenService):
        self.store = store
        self.hasher = hasher
        self.tokens = tokens

    def signup(self, request: SignupRequest) -> Tuple[str, PublicUser]:
        """Create an account and return (token, public view)."""
        hashed = self.hasher.hash(request.password)
        try:
            account = self.store.create(request.email, hashed, request.profile_fields())
        except DuplicateEmail:
            logger.info("Signup rejected, email already registered")
            raise Conflict("User with this email already exists")

        logger.info("Account %s created", account["id"])
        token = self.tokens.issue(account["id"])
        return token, PublicUser.model_validate(account)

    def login(self, email: str, password: str) -> Tuple[str, UserProfile]:
        """
        Check credentials and return (token, full public profile).

        Unknown email and wrong password raise the same InvalidCredentials,
        so the response does not reveal whether an account exists.
        """
        account = self.store.find_by_email(email, include_secret=True)
        hashed = account.pop(SECRET_FIELD, None) if account else None

        if account is None or not self.hasher.verify(password, hashed):
            logger.info("Login failed (%s)", "unknown email" if account is None else "bad password")
            raise InvalidCredentials("Invalid credentials")

        logger.info("Account %s logged in", account["id"])
        token = self.tokens.issue(account["id"])
        return token, UserProfile.model_validate(account)
