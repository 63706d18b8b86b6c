"""
API module - FastAPI routers and dependency providers.

Usage:
    from career_advisor.api.routes import api_router
    app.include_router(api_router, prefix="/api")
"""
