"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into routes.

The repository and email sender are created during app lifespan
startup and stored in app.state; services are cheap dataclasses
built per request around them.
"""

from fastapi import Depends, Request

from accounts.config.settings import Settings
from accounts.domain.authentication import AuthenticationService
from accounts.domain.contact import ContactService
from accounts.domain.ports import EmailSender, UserRepository
from accounts.domain.registration import RegistrationService


def get_app_settings(request: Request) -> Settings:
    """Get the settings the application was created with."""
    return request.app.state.settings


def get_repository(request: Request) -> UserRepository:
    """Get the user repository from app state."""
    return request.app.state.repository


def get_email_sender(request: Request) -> EmailSender:
    """Get the email sender from app state."""
    return request.app.state.email_sender


def get_registration_service(
    repository: UserRepository = Depends(get_repository),
    settings: Settings = Depends(get_app_settings),
) -> RegistrationService:
    """Create registration service with injected repository and work factor."""
    return RegistrationService(repository=repository, rounds=settings.bcrypt_cost)


def get_authentication_service(
    repository: UserRepository = Depends(get_repository),
    settings: Settings = Depends(get_app_settings),
) -> AuthenticationService:
    """Create authentication service with injected repository and work factor."""
    return AuthenticationService(repository=repository, rounds=settings.bcrypt_cost)


def get_contact_service(
    email_sender: EmailSender = Depends(get_email_sender),
    settings: Settings = Depends(get_app_settings),
) -> ContactService:
    """Create contact service with injected sender, inbox and deadline."""
    return ContactService(
        email_sender=email_sender,
        recipient=settings.contact_inbox,
        timeout_seconds=settings.email_timeout_seconds,
    )
