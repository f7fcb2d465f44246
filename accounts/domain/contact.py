"""
Contact relay service - Forwards contact-form submissions by email.

Independent of registration and login. Delivery runs under a deadline
owned by this service; a slow transport surfaces as InternalError rather
than holding the request open.
"""

import asyncio
import logging
from dataclasses import dataclass

from .exceptions import InternalError, ValidationError
from .models import ContactMessage
from .ports import EmailSender
from .validation import missing_fields

logger = logging.getLogger(__name__)

DEFAULT_SUBJECT = "Contact"


@dataclass
class ContactService:
    """Domain service for the contact form."""

    email_sender: EmailSender
    recipient: str
    timeout_seconds: float = 10.0

    async def send(
        self,
        name: str | None,
        email: str | None,
        message: str | None,
        subject: str | None = None,
    ) -> ContactMessage:
        """
        Build and deliver a contact message.

        Args:
            name: Sender's name
            email: Sender's email, used as Reply-To
            message: Message body
            subject: Optional subject, prefixed to the sender's name

        Returns:
            The delivered ContactMessage

        Raises:
            ValidationError: name, email or message missing, or a header
                field (name, email, subject) contains a line break
            InternalError: Transport failure or timeout
        """
        missing = missing_fields({"name": name, "email": email, "message": message})
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}.")

        # These values end up in mail headers
        multiline = [
            field
            for field, value in (("name", name), ("email", email), ("subject", subject))
            if value and ("\r" in value or "\n" in value)
        ]
        if multiline:
            raise ValidationError(f"Fields must not contain line breaks: {', '.join(multiline)}.")

        topic = subject.strip() if subject and subject.strip() else DEFAULT_SUBJECT
        contact = ContactMessage(
            sender_name=name.strip(),
            sender_email=email.strip(),
            subject=f"{topic} - {name.strip()}",
            body=f"Name: {name.strip()}\nEmail: {email.strip()}\nMessage: {message}\n",
            recipient=self.recipient,
        )

        try:
            await asyncio.wait_for(
                self.email_sender.send_contact_message(contact),
                timeout=self.timeout_seconds,
            )
        except TimeoutError as e:
            logger.error("Contact message delivery timed out after %ss", self.timeout_seconds)
            raise InternalError("Failed to send message.") from e
        except Exception as e:
            logger.exception("Contact message delivery failed")
            raise InternalError("Failed to send message.") from e

        logger.info("Contact message relayed to %s", self.recipient)
        return contact
