"""
Access control - FastAPI dependency for protected routes.

Extracts the bearer token, verifies it with TokenService and hands the
account id to the route. Any failure ends the request with 401 before the
route body runs. The client only ever sees "Token is not valid"; the exact
reason (expired, bad signature, ...) goes to the log.
"""

import logging
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from career_advisor.api.deps import get_token_service
from career_advisor.core.errors import Unauthenticated
from career_advisor.core.security import TokenError, TokenService

logger = logging.getLogger(__name__)

# auto_error=False so a missing header goes through our own error shape
bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_account_id(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    tokens: TokenService = Depends(get_token_service),
) -> str:
    """
    FastAPI dependency - resolve the authenticated account id.

    Usage:
        @router.get("/protected")
        async def route(account_id: str = Depends(get_current_account_id)):
            ...
    """
    if credentials is None or not credentials.credentials:
        raise Unauthenticated("No token, authorization denied")

    try:
        account_id = tokens.verify(credentials.credentials)
    except TokenError as e:
        logger.info("Token rejected on %s: %s", request.url.path, e.kind.value)
        raise Unauthenticated("Token is not valid")

    return account_id
