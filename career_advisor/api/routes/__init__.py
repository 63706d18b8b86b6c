"""
API Routes - Combines all route modules into single router.
"""

from fastapi import APIRouter

from career_advisor.api.routes.auth_routes import router as auth_router
from career_advisor.api.routes.user_routes import router as user_router
from career_advisor.api.routes.ai_routes import router as ai_router
from career_advisor.schemas.schemas import ErrorResponse

# Every error body is {"error", "message"}; documented once for all routes
api_router = APIRouter(responses={
    400: {"model": ErrorResponse, "description": "Invalid input or credentials"},
    401: {"model": ErrorResponse, "description": "Missing or invalid token"},
    500: {"model": ErrorResponse, "description": "Unexpected failure"},
})

# Include all sub-routers
api_router.include_router(auth_router)
api_router.include_router(user_router)
api_router.include_router(ai_router)
