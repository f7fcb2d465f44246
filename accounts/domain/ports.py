"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure. Adapters implement these protocols.
"""

from typing import Protocol

from .models import ContactMessage, User


class UserRepository(Protocol):
    """Port interface for user persistence."""

    async def find_by_email(self, email: str) -> User | None:
        """
        Look up a user by normalized email.

        Args:
            email: Normalized email address (stripped, lowercased)

        Returns:
            The stored User, or None if no account uses this email

        Raises:
            RepositoryUnavailable: If storage cannot be reached
        """
        ...

    async def insert(self, user: User) -> User:
        """
        Persist a new user.

        Uniqueness of the email is enforced atomically by the storage
        layer, so two concurrent inserts for one email never both succeed.

        Args:
            user: User to store (timestamps are ignored and reassigned)

        Returns:
            The stored User with created_at/updated_at set

        Raises:
            DuplicateKey: If the email is already taken
            SchemaViolation: If a field constraint is violated
            RepositoryUnavailable: If storage cannot be reached
        """
        ...

    async def ping(self) -> None:
        """Raise RepositoryUnavailable if storage is not reachable."""
        ...


class EmailSender(Protocol):
    """Port interface for email delivery."""

    async def send_contact_message(self, message: ContactMessage) -> None:
        """
        Deliver a contact-form message to its recipient.

        Args:
            message: Message to deliver

        Raises:
            EmailDeliveryError: If the transport rejects or fails the send
        """
        ...
