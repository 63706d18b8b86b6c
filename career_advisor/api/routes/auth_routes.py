"""
Authentication Routes

POST /auth/signup - Register and get JWT token
POST /auth/login - Login and get JWT token
POST /auth/logout - Acknowledge logout (tokens are stateless)
"""

import logging

from fastapi import APIRouter, Depends
from starlette.concurrency import run_in_threadpool

from career_advisor.api.deps import get_authenticator
from career_advisor.core.auth import get_current_account_id
from career_advisor.services.auth_service import Authenticator
from career_advisor.schemas.schemas import (
    SignupRequest, LoginRequest, SignupResponse, LoginResponse, MessageResponse
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/signup", response_model=SignupResponse, status_code=201)
async def signup(request: SignupRequest, auth: Authenticator = Depends(get_authenticator)):
    """
    Register a new account.

    Returns a token right away, no separate login needed.
    """
    token, user = await run_in_threadpool(auth.signup, request)
    return SignupResponse(token=token, user=user)


@router.post("/login", response_model=LoginResponse)
async def login(request: LoginRequest, auth: Authenticator = Depends(get_authenticator)):
    """
    Login and receive JWT access token.

    Include token in requests: Authorization: Bearer <token>
    """
    token, user = await run_in_threadpool(auth.login, request.email, request.password)
    return LoginResponse(token=token, user=user)


@router.post("/logout", response_model=MessageResponse)
async def logout(account_id: str = Depends(get_current_account_id)):
    """
    Logout.

    Tokens are not tracked server-side, so this does not revoke anything:
    the token stays valid until it expires. The client must discard it.
    """
    logger.info("Account %s logged out", account_id)
    return MessageResponse(message="Logged out successfully")
