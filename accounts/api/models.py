"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.

Request fields are optional at the schema level: presence is checked by
the domain services so a missing field yields 400 with a field-specific
message instead of FastAPI's default 422.
"""

from pydantic import BaseModel, Field


class RegisterRequest(BaseModel):
    """Request model for user registration."""

    name: str | None = Field(None, description="Display name (min 2 characters)")
    email: str | None = Field(None, description="Email address, unique per account")
    password: str | None = Field(None, description="Password (min 6 characters)")
    gender: str | None = Field(None, description="Gender")


class LoginRequest(BaseModel):
    """Request model for login."""

    email: str | None = None
    password: str | None = None


class ContactRequest(BaseModel):
    """Request model for the contact form."""

    name: str | None = None
    email: str | None = None
    message: str | None = None
    subject: str | None = None


class UserProfile(BaseModel):
    """Non-secret user fields. Never includes the password hash."""

    name: str
    email: str
    gender: str


class UserResponse(BaseModel):
    """Response model for successful registration and login."""

    message: str
    user: UserProfile


class MessageResponse(BaseModel):
    """Response model carrying only a message."""

    message: str


class ErrorResponse(BaseModel):
    """Standard error response model."""

    message: str
