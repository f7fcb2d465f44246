"""
Domain exceptions - Semantic error types for account operations.

This module defines domain-specific exceptions that communicate
business rule violations without leaking infrastructure details.

Two families live here:

- ``AccountError`` and its subclasses form the taxonomy reported to
  callers (validation, conflict, authentication, internal).
- ``RepositoryError`` and ``EmailDeliveryError`` are raised by adapters
  and are always downgraded to the taxonomy at the service boundary.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class FieldError:
    """A single field-level validation failure."""

    field: str
    message: str


class AccountError(Exception):
    """Base class for account domain errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(AccountError):
    """Missing or malformed input, or a schema-level constraint violation."""

    def __init__(self, message: str, errors: list[FieldError] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []


class ConflictError(AccountError):
    """Email is already registered."""

    pass


class AuthError(AccountError):
    """Unknown account or wrong password (deliberately indistinguishable)."""

    pass


class InternalError(AccountError):
    """Repository, hashing or transport failure. Message is always generic."""

    pass


class RepositoryError(Exception):
    """Base class for failures reported by a UserRepository adapter."""

    pass


class DuplicateKey(RepositoryError):
    """Insert rejected by the storage-level uniqueness constraint."""

    pass


class SchemaViolation(RepositoryError):
    """Insert rejected by a storage-level field constraint."""

    pass


class RepositoryUnavailable(RepositoryError):
    """Storage could not be reached."""

    pass


class EmailDeliveryError(Exception):
    """Email transport failed to deliver a message."""

    pass
