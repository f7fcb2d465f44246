"""
Authentication domain service - Verifies login credentials.

Security design:

- "No such account" and "wrong password" raise the same AuthError with
  the same message, so responses cannot be used to enumerate accounts.
- When the email is unknown, the password is still checked against a
  dummy hash so both failure paths pay the bcrypt cost.
- bcrypt.checkpw compares digests in constant time.

No session, token or cookie is created on success.
"""

import asyncio
import logging
from dataclasses import dataclass
from functools import lru_cache

from .exceptions import AuthError, InternalError, ValidationError
from .hashing import BCRYPT_ROUNDS, CorruptHashRecord, hash_password, verify_password
from .models import User
from .ports import UserRepository
from .validation import missing_fields, normalize_email

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Invalid email or password."


@lru_cache(maxsize=None)
def dummy_hash(rounds: int) -> str:
    """
    Hash of a throwaway password, verified when the email is unknown.

    Built at the same cost as stored hashes so both failure paths take
    equally long. Cached per cost factor.
    """
    return hash_password("dummy_password_for_timing_safety", rounds)


@dataclass
class AuthenticationService:
    """Domain service for login."""

    repository: UserRepository
    rounds: int = BCRYPT_ROUNDS

    async def authenticate(self, email: str | None, password: str | None) -> User:
        """
        Verify an email/password pair.

        Args:
            email: Email address (will be normalized)
            password: Plaintext password

        Returns:
            The matching User

        Raises:
            ValidationError: Email or password missing
            AuthError: Unknown email or wrong password
            InternalError: Repository failure or corrupt stored hash
        """
        missing = missing_fields({"email": email, "password": password}, secret=("password",))
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}.")

        normalized_email = normalize_email(email)

        try:
            user = await self.repository.find_by_email(normalized_email)
        except Exception as e:
            logger.exception("User lookup failed during login")
            raise InternalError("Internal server error.") from e

        if user is not None:
            stored_hash = user.password_hash
        else:
            stored_hash = await asyncio.to_thread(dummy_hash, self.rounds)

        try:
            password_valid = await asyncio.to_thread(verify_password, password, stored_hash)
        except CorruptHashRecord as e:
            logger.error("Stored password hash is corrupt")
            raise InternalError("Internal server error.") from e

        if user is None or not password_valid:
            logger.info("Login failed")
            raise AuthError(INVALID_CREDENTIALS_MESSAGE)

        return user
