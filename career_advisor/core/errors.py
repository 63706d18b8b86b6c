"""
Error taxonomy.

Every failure that reaches a client is an AppError subclass rendered as
{"error": kind, "message": message}. Component-level errors (DuplicateEmail,
TokenError, openai exceptions) are translated into these at the service
boundary, so routes never see storage or library internals.
"""

from typing import Dict, Optional


class AppError(Exception):
    kind = "Internal"
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: Optional[str] = None, headers: Optional[Dict[str, str]] = None):
        self.message = message or self.default_message
        self.headers = headers
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"error": self.kind, "message": self.message}


class ValidationError(AppError):
    kind = "ValidationError"
    status_code = 400
    default_message = "Invalid request"


class InvalidCredentials(AppError):
    kind = "InvalidCredentials"
    status_code = 400
    default_message = "Invalid credentials"


class Conflict(AppError):
    # 400 rather than 409 to stay compatible with the existing frontend
    kind = "Conflict"
    status_code = 400
    default_message = "User with this email already exists"


class Unauthenticated(AppError):
    kind = "Unauthenticated"
    status_code = 401
    default_message = "Token is not valid"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message, headers={"WWW-Authenticate": "Bearer"})


class NotFound(AppError):
    kind = "NotFound"
    status_code = 404
    default_message = "User not found"


class UpstreamRateLimited(AppError):
    kind = "UpstreamRateLimited"
    status_code = 429
    default_message = "Rate limit exceeded by AI service. Please try again later."


class UpstreamUnavailable(AppError):
    kind = "UpstreamUnavailable"
    status_code = 503
    default_message = "Unable to connect to Ollama service. Please make sure Ollama is running locally."


class UpstreamError(AppError):
    kind = "UpstreamError"
    status_code = 500
    default_message = "AI service error"


class Internal(AppError):
    pass
