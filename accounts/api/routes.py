"""
API routes - Registration, login and contact endpoints.

This module defines the HTTP endpoints:
- POST /register - Create an account
- POST /login    - Verify credentials (no session is created)
- POST /contact  - Relay a contact-form message by email

Domain errors propagate to the handlers in accounts.api.errors.
"""

from fastapi import APIRouter, Depends, status

from accounts.api.dependencies import (
    get_authentication_service,
    get_contact_service,
    get_registration_service,
)
from accounts.api.models import (
    ContactRequest,
    ErrorResponse,
    LoginRequest,
    MessageResponse,
    RegisterRequest,
    UserProfile,
    UserResponse,
)
from accounts.domain.authentication import AuthenticationService
from accounts.domain.contact import ContactService
from accounts.domain.registration import RegistrationService

router = APIRouter(tags=["accounts"])


@router.post(
    "/register",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse, "description": "Missing or invalid fields"},
        409: {"model": ErrorResponse, "description": "Email already registered"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
    summary="Register a new user",
    description="Create an account from name, email, password and gender.",
)
async def register(
    request_data: RegisterRequest,
    service: RegistrationService = Depends(get_registration_service),
) -> UserResponse:
    """
    Register a new user.

    - **name**: Display name (minimum 2 characters)
    - **email**: Email address (stored lowercased)
    - **password**: Password (minimum 6 characters)
    - **gender**: Gender
    """
    user = await service.register(
        request_data.name,
        request_data.email,
        request_data.password,
        request_data.gender,
    )
    return UserResponse(
        message="User registered successfully.",
        user=UserProfile(**user.public_profile()),
    )


@router.post(
    "/login",
    response_model=UserResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Missing fields"},
        401: {"model": ErrorResponse, "description": "Invalid email or password"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
    summary="Log in",
    description="Verify email and password and return the user's profile. "
    "No session or token is issued.",
)
async def login(
    request_data: LoginRequest,
    service: AuthenticationService = Depends(get_authentication_service),
) -> UserResponse:
    user = await service.authenticate(request_data.email, request_data.password)
    return UserResponse(
        message=f"Login successful, welcome {user.name}",
        user=UserProfile(**user.public_profile()),
    )


@router.post(
    "/contact",
    response_model=MessageResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Missing fields"},
        500: {"model": ErrorResponse, "description": "Message could not be sent"},
    },
    summary="Send a contact message",
)
async def contact(
    request_data: ContactRequest,
    service: ContactService = Depends(get_contact_service),
) -> MessageResponse:
    await service.send(
        request_data.name,
        request_data.email,
        request_data.message,
        request_data.subject,
    )
    return MessageResponse(message="Message sent successfully!")
