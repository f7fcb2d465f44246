"""
Console email sender adapter - Implements EmailSender protocol.

This module provides a console-based implementation of the domain's
email sender port, logging contact messages for local development.
"""

import logging

from accounts.domain.models import ContactMessage

logger = logging.getLogger(__name__)


class ConsoleEmailSender:
    """
    Implements EmailSender protocol via console logging.

    Uses structural subtyping - no explicit inheritance from Protocol.
    For demo/development purposes - prints contact messages to stdout.
    """

    async def send_contact_message(self, message: ContactMessage) -> None:
        """
        Log a contact message (simulates email delivery).

        In production, this is replaced with SmtpEmailSender.

        Args:
            message: Contact message built by ContactService
        """
        logger.info(
            "[CONTACT] To: %s From: %s <%s> Subject: %s\n%s",
            message.recipient,
            message.sender_name,
            message.sender_email,
            message.subject,
            message.body,
        )
