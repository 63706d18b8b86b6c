"""
Pydantic Schemas - Request/Response Validation

All API request and response schemas in one file for simplicity.
Fields are snake_case in Python and camelCase on the wire (the frontend and
the stored Mongo documents both use camelCase).
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field, StringConstraints, field_validator, model_validator
from pydantic.alias_generators import to_camel
from typing import Annotated, Optional, List, Any
from datetime import datetime
from enum import Enum


# ============================================================
# ENUMS
# ============================================================

class InterestCategory(str, Enum):
    gaming = "Gaming"
    ai_software_testing = "AI Software Testing"
    robotics = "Robotics"
    other = "Other"


class ApplicationStatus(str, Enum):
    not_started = "Not Started"
    in_progress = "In Progress"
    submitted = "Submitted"
    accepted = "Accepted"
    rejected = "Rejected"


# Trimmed text. Passwords stay plain `str`: surrounding spaces are part of the secret.
Trimmed = Annotated[str, StringConstraints(strip_whitespace=True)]
NonEmpty = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
        validate_default=True,
    )


# ============================================================
# PROFILE SUB-DOCUMENTS
# ============================================================

class Interest(CamelModel):
    name: NonEmpty
    category: InterestCategory


class Achievement(CamelModel):
    title: NonEmpty
    icon: Optional[str] = None
    date: Optional[datetime] = None


class AcademicProgress(CamelModel):
    subject: NonEmpty
    grade: NonEmpty
    progress: Optional[float] = Field(None, ge=0, le=100)


class UniversityApplication(CamelModel):
    university_name: NonEmpty
    program: NonEmpty
    deadline: datetime
    status: ApplicationStatus = ApplicationStatus.not_started


class ApplicationProgress(CamelModel):
    average_completion: float = Field(0, ge=0, le=100)
    current_project: Optional[str] = None
    project_link: Optional[str] = None


# ============================================================
# AUTH SCHEMAS
# ============================================================

class SignupRequest(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=6)
    first_name: NonEmpty
    last_name: NonEmpty
    age: Optional[int] = Field(None, ge=13, le=100)
    school: Optional[Trimmed] = None
    grade: Optional[Trimmed] = None
    profile_picture: Optional[str] = None
    interests: List[Interest] = []
    achievements: List[Achievement] = []
    academic_progress: List[AcademicProgress] = []
    university_applications: List[UniversityApplication] = []
    application_progress: ApplicationProgress = Field(default_factory=ApplicationProgress)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.strip().lower()

    @field_validator("password")
    @classmethod
    def bcrypt_length(cls, v: str) -> str:
        # bcrypt only looks at the first 72 bytes
        if len(v.encode("utf-8")) > 72:
            raise ValueError("Password must be at most 72 bytes long")
        return v

    def profile_fields(self) -> dict:
        """Everything except the credentials, in stored (camelCase) form."""
        return self.model_dump(by_alias=True, exclude={"email", "password"})


class LoginRequest(CamelModel):
    email: NonEmpty
    password: str = Field(..., min_length=1)


class PublicUser(CamelModel):
    """Account view returned at signup. Never carries the password hash."""
    id: str
    email: str
    first_name: str
    last_name: str
    full_name: str = ""
    age: Optional[int] = None
    school: Optional[str] = None
    grade: Optional[str] = None

    @model_validator(mode="after")
    def fill_full_name(self) -> "PublicUser":
        if not self.full_name:
            self.full_name = f"{self.first_name} {self.last_name}"
        return self


class UserProfile(PublicUser):
    """Full public profile returned at login and by GET /user/profile."""
    profile_picture: Optional[str] = None
    interests: List[Interest] = []
    achievements: List[Achievement] = []
    academic_progress: List[AcademicProgress] = []
    university_applications: List[UniversityApplication] = []
    application_progress: ApplicationProgress = Field(default_factory=ApplicationProgress)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class SignupResponse(BaseModel):
    message: str = "User registered successfully"
    token: str
    user: PublicUser


class LoginResponse(BaseModel):
    message: str = "Logged in successfully"
    token: str
    user: UserProfile


# ============================================================
# AI CHAT SCHEMAS
# ============================================================

class ChatRequest(BaseModel):
    # Left untyped so a non-string message gets its own error instead of a coercion
    message: Any = None


class ChatResponse(BaseModel):
    response: str


# ============================================================
# GENERIC SCHEMAS
# ============================================================

class MessageResponse(BaseModel):
    message: str


class ProtectedResponse(CamelModel):
    message: str
    user_id: str


class ErrorResponse(BaseModel):
    error: str
    message: str
