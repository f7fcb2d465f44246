"""
Unit tests for input validation helpers.
"""

import pytest

from accounts.domain.exceptions import FieldError
from accounts.domain.validation import (
    ValidationResult,
    missing_fields,
    normalize_email,
    validate_registration,
)


class TestNormalizeEmail:
    """Tests for email normalization."""

    def test_strips_whitespace(self) -> None:
        assert normalize_email("  user@example.com  ") == "user@example.com"

    def test_lowercases(self) -> None:
        assert normalize_email("USER@EXAMPLE.COM") == "user@example.com"

    def test_combined(self) -> None:
        assert normalize_email("  Ana@Example.COM\n") == "ana@example.com"


class TestMissingFields:
    """Tests for missing_fields."""

    def test_all_present(self) -> None:
        assert missing_fields({"name": "Ana", "email": "a@b.co"}) == []

    def test_none_is_missing(self) -> None:
        assert missing_fields({"name": None, "email": "a@b.co"}) == ["name"]

    def test_empty_is_missing(self) -> None:
        assert missing_fields({"name": "", "email": ""}) == ["name", "email"]

    def test_blank_is_missing(self) -> None:
        assert missing_fields({"name": "   "}) == ["name"]

    def test_secret_fields_are_not_stripped(self) -> None:
        """A password made of spaces counts as present."""
        assert missing_fields({"password": "      "}, secret=("password",)) == []
        assert missing_fields({"password": ""}, secret=("password",)) == ["password"]

    def test_preserves_field_order(self) -> None:
        result = missing_fields({"a": None, "b": "x", "c": None, "d": ""})
        assert result == ["a", "c", "d"]


class TestValidateRegistration:
    """Tests for validate_registration."""

    def test_valid_input(self) -> None:
        result = validate_registration("Ana", "ana@example.com", "secret1", "F")
        assert result.ok
        assert result.errors == []

    def test_name_too_short(self) -> None:
        result = validate_registration("A", "ana@example.com", "secret1", "F")
        assert not result.ok
        assert [e.field for e in result.errors] == ["name"]

    def test_name_length_counted_after_trim(self) -> None:
        result = validate_registration("  A  ", "ana@example.com", "secret1", "F")
        assert [e.field for e in result.errors] == ["name"]

    def test_name_of_two_characters_accepted(self) -> None:
        assert validate_registration("Al", "al@example.com", "secret1", "M").ok

    @pytest.mark.parametrize("email", ["not-an-email", "ana@", "@example.com", "ana example.com"])
    def test_invalid_email(self, email: str) -> None:
        result = validate_registration("Ana", email, "secret1", "F")
        assert [e.field for e in result.errors] == ["email"]

    def test_email_with_surrounding_whitespace_accepted(self) -> None:
        assert validate_registration("Ana", "  ANA@Example.com ", "secret1", "F").ok

    def test_password_too_short(self) -> None:
        result = validate_registration("Ana", "ana@example.com", "12345", "F")
        assert [e.field for e in result.errors] == ["password"]

    def test_password_of_six_characters_accepted(self) -> None:
        assert validate_registration("Ana", "ana@example.com", "123456", "F").ok

    def test_password_with_nul_byte_rejected(self) -> None:
        result = validate_registration("Ana", "ana@example.com", "secret\x001", "F")
        assert [e.field for e in result.errors] == ["password"]

    def test_password_of_72_bytes_accepted(self) -> None:
        assert validate_registration("Ana", "ana@example.com", "x" * 72, "F").ok

    def test_password_over_72_bytes_rejected(self) -> None:
        result = validate_registration("Ana", "ana@example.com", "x" * 73, "F")
        assert [e.field for e in result.errors] == ["password"]
        assert result.message() == "Password must be at most 72 bytes."

    def test_password_limit_counts_utf8_bytes(self) -> None:
        # 37 two-byte characters: 37 characters, 74 bytes
        result = validate_registration("Ana", "ana@example.com", "é" * 37, "F")
        assert [e.field for e in result.errors] == ["password"]

    def test_blank_gender(self) -> None:
        result = validate_registration("Ana", "ana@example.com", "secret1", "  ")
        assert [e.field for e in result.errors] == ["gender"]

    def test_multiple_errors_collected(self) -> None:
        result = validate_registration("A", "bad", "123", "F")
        assert [e.field for e in result.errors] == ["name", "email", "password"]


class TestValidationResult:
    """Tests for ValidationResult."""

    def test_empty_result_is_ok(self) -> None:
        assert ValidationResult().ok

    def test_add_makes_result_not_ok(self) -> None:
        result = ValidationResult()
        result.add("name", "Name is required.")
        assert not result.ok
        assert result.errors == [FieldError("name", "Name is required.")]

    def test_message_joins_errors(self) -> None:
        result = ValidationResult()
        result.add("name", "Name is too short.")
        result.add("password", "Password is too short.")
        assert result.message() == "Name is too short. Password is too short."
