"""
SMTP email sender adapter - Implements EmailSender protocol via aiosmtplib.

The message is sent from the configured account; the visitor's address
goes in Reply-To so the site owner can answer directly without the
server spoofing the visitor as sender.
"""

import logging
from email.message import EmailMessage

import aiosmtplib

from accounts.domain.exceptions import EmailDeliveryError
from accounts.domain.models import ContactMessage

logger = logging.getLogger(__name__)


class SmtpEmailSender:
    """
    Implements EmailSender protocol over SMTP.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(
        self,
        hostname: str,
        port: int,
        username: str | None,
        password: str | None,
        use_tls: bool = True,
    ) -> None:
        self._hostname = hostname
        self._port = port
        self._username = username
        self._password = password
        self._use_tls = use_tls

    def build_message(self, message: ContactMessage) -> EmailMessage:
        """Render a ContactMessage as a plain-text MIME message."""
        email = EmailMessage()
        email["Subject"] = message.subject
        email["From"] = self._username or message.recipient
        email["To"] = message.recipient
        email["Reply-To"] = f"{message.sender_name} <{message.sender_email}>"
        email.set_content(message.body)
        return email

    async def send_contact_message(self, message: ContactMessage) -> None:
        """
        Send a contact message.

        Raises:
            EmailDeliveryError: SMTP connection, auth or send failure
        """
        email = self.build_message(message)
        try:
            await aiosmtplib.send(
                email,
                hostname=self._hostname,
                port=self._port,
                username=self._username,
                password=self._password,
                use_tls=self._use_tls,
            )
        except aiosmtplib.SMTPException as e:
            logger.error("SMTP send failed via %s:%s - %s", self._hostname, self._port, e)
            raise EmailDeliveryError(str(e)) from e
