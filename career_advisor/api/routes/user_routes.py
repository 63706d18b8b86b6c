"""
User Routes

GET /user/profile - Get own profile
GET /protected - Token check endpoint
"""

from fastapi import APIRouter, Depends
from starlette.concurrency import run_in_threadpool

from career_advisor.api.deps import get_account_store
from career_advisor.core.auth import get_current_account_id
from career_advisor.core.errors import NotFound
from career_advisor.services.account_store import AccountStore
from career_advisor.schemas.schemas import UserProfile, ProtectedResponse, ErrorResponse

router = APIRouter(tags=["User"], responses={404: {"model": ErrorResponse, "description": "Account not found"}})


@router.get("/user/profile", response_model=UserProfile)
async def get_profile(
    account_id: str = Depends(get_current_account_id),
    store: AccountStore = Depends(get_account_store)
):
    """Get current user's full profile."""
    account = await run_in_threadpool(store.find_by_id, account_id)
    if account is None:
        raise NotFound("User not found")
    return UserProfile.model_validate(account)


@router.get("/protected", response_model=ProtectedResponse)
async def protected(account_id: str = Depends(get_current_account_id)):
    return ProtectedResponse(
        message=f"Welcome to the protected route, user {account_id}!",
        user_id=account_id
    )
