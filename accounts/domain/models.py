"""
Domain models - Plain value objects shared by services and adapters.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class User:
    """
    Registered account.

    ``email`` is always stored normalized (stripped, lowercased) and
    ``password_hash`` is a bcrypt hash record, never the plaintext.
    Timestamps are assigned by the repository on insert.
    """

    name: str
    email: str
    password_hash: str
    gender: str
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def public_profile(self) -> dict[str, str]:
        """Non-secret fields safe to return to clients."""
        return {"name": self.name, "email": self.email, "gender": self.gender}


@dataclass(frozen=True)
class ContactMessage:
    """Contact-form submission addressed to the site owner."""

    sender_name: str
    sender_email: str
    subject: str
    body: str
    recipient: str
