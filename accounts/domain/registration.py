"""
Registration domain service - Creates new accounts.

Flow (fail fast, in this order):

1. Missing-field check        -> ValidationError, no repository access
2. Field-level validation     -> ValidationError, no repository access
3. Uniqueness pre-check       -> ConflictError
4. bcrypt hash (worker thread)
5. Insert                     -> ConflictError on DuplicateKey,
                                 ValidationError on SchemaViolation,
                                 InternalError on anything else

The pre-check in step 3 only saves a bcrypt round for the common case.
The repository insert is the authoritative uniqueness check: a
DuplicateKey raised by a concurrent registration is reported exactly
like a pre-check hit.
"""

import asyncio
import logging
from dataclasses import dataclass

from .exceptions import (
    ConflictError,
    DuplicateKey,
    InternalError,
    SchemaViolation,
    ValidationError,
)
from .hashing import BCRYPT_ROUNDS, hash_password
from .models import User
from .ports import UserRepository
from .validation import missing_fields, normalize_email, validate_registration

logger = logging.getLogger(__name__)

EMAIL_TAKEN_MESSAGE = "Email already registered."


@dataclass
class RegistrationService:
    """
    Domain service for user registration.

    Orchestrates the registration flow: validation, email normalization,
    password hashing and persistence.
    """

    repository: UserRepository
    rounds: int = BCRYPT_ROUNDS

    async def register(
        self,
        name: str | None,
        email: str | None,
        password: str | None,
        gender: str | None,
    ) -> User:
        """
        Register a new user.

        Args:
            name: Display name (trimmed, min 2 characters)
            email: Email address (will be normalized)
            password: Plaintext password (min 6 characters, will be hashed)
            gender: Free-form gender (trimmed, required)

        Returns:
            The stored User

        Raises:
            ValidationError: Missing or invalid fields
            ConflictError: Email is already registered
            InternalError: Repository or hashing failure
        """
        missing = missing_fields(
            {"name": name, "email": email, "password": password, "gender": gender},
            secret=("password",),
        )
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}.")

        result = validate_registration(name, email, password, gender)
        if not result.ok:
            raise ValidationError(result.message(), errors=result.errors)

        normalized_email = normalize_email(email)

        try:
            existing = await self.repository.find_by_email(normalized_email)
        except Exception as e:
            logger.exception("User lookup failed during registration")
            raise InternalError("Internal server error.") from e

        if existing is not None:
            logger.info("Registration rejected: email already registered")
            raise ConflictError(EMAIL_TAKEN_MESSAGE)

        try:
            password_hash = await asyncio.to_thread(hash_password, password, self.rounds)
        except Exception as e:
            logger.exception("Password hashing failed")
            raise InternalError("Internal server error.") from e

        user = User(
            name=name.strip(),
            email=normalized_email,
            password_hash=password_hash,
            gender=gender.strip(),
        )

        try:
            stored = await self.repository.insert(user)
        except DuplicateKey:
            logger.info("Registration rejected: concurrent insert claimed the email first")
            raise ConflictError(EMAIL_TAKEN_MESSAGE) from None
        except SchemaViolation as e:
            raise ValidationError(str(e)) from None
        except Exception as e:
            logger.exception("User insert failed")
            raise InternalError("Internal server error.") from e

        logger.info("User registered")
        return stored
