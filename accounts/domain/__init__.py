"""
Domain layer - Pure business logic with zero framework imports.

This package contains the account registration, login and contact
relay logic. It defines its own port interfaces for infrastructure
abstraction, ensuring true hexagonal architecture decoupling.
"""

from .authentication import AuthenticationService
from .contact import ContactService
from .exceptions import (
    AccountError,
    AuthError,
    ConflictError,
    DuplicateKey,
    EmailDeliveryError,
    FieldError,
    InternalError,
    RepositoryError,
    RepositoryUnavailable,
    SchemaViolation,
    ValidationError,
)
from .models import ContactMessage, User
from .ports import EmailSender, UserRepository
from .registration import RegistrationService

__all__ = [
    "AccountError",
    "AuthError",
    "AuthenticationService",
    "ConflictError",
    "ContactMessage",
    "ContactService",
    "DuplicateKey",
    "EmailDeliveryError",
    "EmailSender",
    "FieldError",
    "InternalError",
    "RegistrationService",
    "RepositoryError",
    "RepositoryUnavailable",
    "SchemaViolation",
    "User",
    "UserRepository",
    "ValidationError",
]
