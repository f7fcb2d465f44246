"""
Credential hashing - bcrypt hash records and verification.

A hash record is the self-describing string produced by bcrypt::

    $2b$10$<22-char salt><31-char digest>

It embeds the algorithm identifier, the work factor and the salt, so
verification needs nothing but the record itself. A fresh salt is drawn
for every call to hash_password.

Both operations are CPU-bound (~100ms at cost 10); async callers should
run them via asyncio.to_thread.
"""

import re

import bcrypt

# bcrypt work factor. Raise over time to keep pace with hardware.
BCRYPT_ROUNDS = 10

# bcrypt only consumes the first 72 bytes of input; longer passwords are refused.
MAX_PASSWORD_BYTES = 72

_HASH_RECORD_RE = re.compile(r"^\$2[abxy]\$(\d{2})\$[./A-Za-z0-9]{53}$")


class CorruptHashRecord(ValueError):
    """Stored hash record is not a well-formed bcrypt string."""

    pass


def hash_password(plaintext: str, rounds: int = BCRYPT_ROUNDS) -> str:
    """
    Hash a password with a fresh random salt.

    Args:
        plaintext: Password as entered by the user
        rounds: bcrypt cost factor (log2 of iterations)

    Returns:
        bcrypt hash record suitable for storage as an opaque string

    Raises:
        ValueError: If plaintext exceeds MAX_PASSWORD_BYTES when UTF-8 encoded
    """
    password = plaintext.encode("utf-8")
    if len(password) > MAX_PASSWORD_BYTES:
        raise ValueError(f"Password exceeds {MAX_PASSWORD_BYTES} bytes")
    return bcrypt.hashpw(password, bcrypt.gensalt(rounds=rounds)).decode()


def verify_password(plaintext: str, hash_record: str) -> bool:
    """
    Check a password against a stored hash record.

    Re-derives the digest with the salt and cost embedded in the record.
    bcrypt.checkpw compares in constant time. A plaintext longer than
    MAX_PASSWORD_BYTES can never have been hashed, so it does not match.

    Raises:
        CorruptHashRecord: If hash_record is not a bcrypt string
    """
    if not isinstance(hash_record, str) or _HASH_RECORD_RE.match(hash_record) is None:
        raise CorruptHashRecord("Malformed bcrypt hash record")
    try:
        password = plaintext.encode("utf-8")
        if len(password) > MAX_PASSWORD_BYTES:
            return False
        return bcrypt.checkpw(password, hash_record.encode())
    except ValueError:
        # The record is well-formed, so bcrypt rejected the plaintext itself.
        return False


def work_factor(hash_record: str) -> int:
    """Return the cost factor embedded in a hash record."""
    match = _HASH_RECORD_RE.match(hash_record)
    if match is None:
        raise CorruptHashRecord("Malformed bcrypt hash record")
    return int(match.group(1))
