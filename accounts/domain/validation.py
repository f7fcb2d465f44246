"""
Input validation - Explicit field checks run before any persistence call.

Validation functions return a ValidationResult instead of raising, so
services decide how to report failures.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field

from email_validator import EmailNotValidError, validate_email

from .exceptions import FieldError
from .hashing import MAX_PASSWORD_BYTES

MIN_NAME_LENGTH = 2
MIN_PASSWORD_LENGTH = 6


@dataclass
class ValidationResult:
    """Outcome of a validation pass: ok, or a list of field errors."""

    errors: list[FieldError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def add(self, field_name: str, message: str) -> None:
        self.errors.append(FieldError(field_name, message))

    def message(self) -> str:
        """Human-readable summary, one sentence per field error."""
        return " ".join(error.message for error in self.errors)


def normalize_email(email: str) -> str:
    """
    Normalize email address for consistent storage and lookup.

    Applies: strip whitespace + lowercase
    """
    return email.strip().lower()


def missing_fields(values: Mapping[str, str | None], secret: tuple[str, ...] = ()) -> list[str]:
    """
    Return the names of required fields that are absent or blank.

    Fields listed in ``secret`` are not stripped before the emptiness
    check, so a password made of spaces still counts as present.
    """
    missing = []
    for name, value in values.items():
        if value is None:
            missing.append(name)
        elif name in secret:
            if value == "":
                missing.append(name)
        elif not value.strip():
            missing.append(name)
    return missing


def _encodable(value: str) -> bool:
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def validate_registration(name: str, email: str, password: str, gender: str) -> ValidationResult:
    """
    Check field-level constraints for a new account.

    - name: at least 2 characters after trimming
    - email: syntactically valid address (no DNS lookup)
    - password: at least 6 characters, at most 72 bytes as UTF-8, no NUL bytes
    - gender: not blank after trimming
    """
    result = ValidationResult()

    if len(name.strip()) < MIN_NAME_LENGTH:
        result.add("name", f"Name must be at least {MIN_NAME_LENGTH} characters.")

    try:
        validate_email(email.strip(), check_deliverability=False)
    except EmailNotValidError:
        result.add("email", "Email address is not valid.")

    if len(password) < MIN_PASSWORD_LENGTH:
        result.add("password", f"Password must be at least {MIN_PASSWORD_LENGTH} characters.")
    elif "\x00" in password or not _encodable(password):
        result.add("password", "Password contains invalid characters.")
    elif len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        result.add("password", f"Password must be at most {MAX_PASSWORD_BYTES} bytes.")

    if not gender.strip():
        result.add("gender", "Gender is required.")

    return result
