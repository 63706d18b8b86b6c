"""
Career Advisor - Main Application

FastAPI backend with:
- MongoDB for account and profile documents
- JWT authentication (bcrypt-hashed passwords)
- Local Ollama model for the career-advice chat

Run: uvicorn career_advisor.main:app --reload
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from career_advisor.api.deps import get_account_store
from career_advisor.api.routes import api_router
from career_advisor.core.config import get_settings
from career_advisor.core.errors import AppError, Internal, ValidationError
from career_advisor.core.logging import configure_logging
from career_advisor.db.mongodb import test_mongo_connection, close_mongo_client

# Fails fast if MONGODB_URI or JWT_SECRET_KEY is missing
settings = get_settings()
configure_logging(settings.log_level)

logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Career Advisor",
    description="""
    Backend for a student career-advisory dashboard.

    ## Features
    - **Authentication**: signup/login returning a 1-hour JWT
    - **Profile**: academics, interests, achievements, university applications
    - **AI Chat**: career and education questions answered by a local model
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(api_router, prefix="/api")


# ============================================================
# ERROR HANDLERS
# Every failure is {"error": kind, "message": text}, never a traceback
# ============================================================

@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict(), headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if any(err.get("type") == "missing" for err in errors):
        message = "Please enter all required fields"
    else:
        first = errors[0] if errors else {}
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{field}: {first.get('msg', 'invalid value')}" if field else first.get("msg", "Invalid request")
    return JSONResponse(status_code=400, content=ValidationError(message).to_dict())


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content=Internal().to_dict())


# Startup event
@app.on_event("startup")
async def startup_event():
    """Create the unique email index; the app must not run without it."""
    try:
        await run_in_threadpool(get_account_store().ensure_indexes)
    except Exception:
        logger.exception("MongoDB index initialization failed")
        raise
    logger.info("MongoDB indexes initialized")


@app.on_event("shutdown")
async def shutdown_event():
    close_mongo_client()


@app.get("/health", tags=["Health"])
async def health_check():
    """Detailed health check."""
    mongo_ok = await run_in_threadpool(test_mongo_connection)
    return {
        "status": "healthy" if mongo_ok else "degraded",
        "mongodb": "connected" if mongo_ok else "disconnected"
    }
