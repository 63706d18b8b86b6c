"""
Security primitives - password hashing and JWT identity claims.

Provides:
- PasswordHasher: bcrypt hashing with passlib
- TokenService: JWT issue/verify with python-jose

Both are plain objects configured once from Settings and injected where
needed, so tests can build them with their own secret and cost.
"""

import logging
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Optional

from jose import jwt, JWTError, ExpiredSignatureError
from jose.exceptions import JWTClaimsError
from passlib.context import CryptContext

logger = logging.getLogger(__name__)


class PasswordHasher:
    """Salted, cost-parameterized one-way hash (bcrypt)."""

    def __init__(self, rounds: int = 10):
        self.context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds
        )

    def hash(self, secret: str) -> str:
        if not secret:
            raise ValueError("Password must not be empty")
        return self.context.hash(secret)

    def verify(self, secret: str, hashed_secret: str) -> bool:
        """True iff secret matches. Never raises for bad input."""
        if not secret or not hashed_secret:
            return False
        try:
            return self.context.verify(secret, hashed_secret)
        except (ValueError, TypeError):
            # Unrecognized or corrupt hash in storage
            logger.warning("Stored password hash could not be parsed")
            return False


class TokenErrorKind(str, Enum):
    MISSING = "missing"
    MALFORMED = "malformed"
    EXPIRED = "expired"
    SIGNATURE_INVALID = "signature_invalid"


class TokenError(Exception):
    def __init__(self, kind: TokenErrorKind, detail: str = ""):
        self.kind = kind
        self.detail = detail
        super().__init__(f"{kind.value}: {detail}" if detail else kind.value)


class TokenService:
    """
    Issues and verifies signed, time-bounded identity claims.

    Claims: sub (account id), iat, exp. Verification is pure: it never
    consults storage, so a token stays valid until exp or until the secret
    is rotated. There is no revocation list.
    """

    def __init__(self, secret_key: str, algorithm: str = "HS256", expire_minutes: int = 60):
        if not secret_key:
            raise ValueError("JWT secret key is required")
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes

    def issue(self, account_id: str, now: Optional[datetime] = None) -> str:
        issued_at = now or datetime.now(timezone.utc)
        claims = {
            "sub": str(account_id),
            "iat": issued_at,
            "exp": issued_at + timedelta(minutes=self.expire_minutes),
        }
        return jwt.encode(claims, self.secret_key, algorithm=self.algorithm)

    def verify(self, token: Optional[str]) -> str:
        """Return the account id carried by token, or raise TokenError."""
        if not token:
            raise TokenError(TokenErrorKind.MISSING)

        # Structural check first so a garbled token is not reported as a bad signature
        try:
            jwt.get_unverified_claims(token)
        except JWTError as e:
            raise TokenError(TokenErrorKind.MALFORMED, str(e))

        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except ExpiredSignatureError as e:
            raise TokenError(TokenErrorKind.EXPIRED, str(e))
        except JWTClaimsError as e:
            raise TokenError(TokenErrorKind.MALFORMED, str(e))
        except JWTError as e:
            raise TokenError(TokenErrorKind.SIGNATURE_INVALID, str(e))

        account_id = payload.get("sub")
        if not account_id or "exp" not in payload:
            raise TokenError(TokenErrorKind.MALFORMED, "missing sub or exp claim")
        return account_id
