"""
Unit tests for SmtpEmailSender adapter.

aiosmtplib.send is patched; no network connections are made.
"""

from unittest.mock import AsyncMock, patch

import aiosmtplib
import pytest

from accounts.adapters.smtp import sender as sender_module
from accounts.adapters.smtp.sender import SmtpEmailSender
from accounts.domain.exceptions import EmailDeliveryError
from accounts.domain.models import ContactMessage


@pytest.fixture
def message() -> ContactMessage:
    return ContactMessage(
        sender_name="Ana",
        sender_email="ana@example.com",
        subject="Hi - Ana",
        body="Name: Ana\nEmail: ana@example.com\nMessage: Hello\n",
        recipient="owner@example.com",
    )


@pytest.fixture
def smtp_sender() -> SmtpEmailSender:
    return SmtpEmailSender(
        hostname="smtp.example.com",
        port=465,
        username="site@example.com",
        password="app-password",
        use_tls=True,
    )


class TestBuildMessage:
    """Tests for MIME rendering."""

    def test_headers(self, smtp_sender: SmtpEmailSender, message: ContactMessage) -> None:
        email = smtp_sender.build_message(message)

        assert email["Subject"] == "Hi - Ana"
        assert email["From"] == "site@example.com"
        assert email["To"] == "owner@example.com"
        assert "ana@example.com" in email["Reply-To"]

    def test_body(self, smtp_sender: SmtpEmailSender, message: ContactMessage) -> None:
        email = smtp_sender.build_message(message)

        assert "Message: Hello" in email.get_content()

    def test_from_falls_back_to_recipient(self, message: ContactMessage) -> None:
        anonymous = SmtpEmailSender(hostname="localhost", port=25, username=None, password=None)

        assert anonymous.build_message(message)["From"] == "owner@example.com"


class TestSendContactMessage:
    """Tests for delivery."""

    @pytest.mark.asyncio
    async def test_sends_with_configured_server(
        self, smtp_sender: SmtpEmailSender, message: ContactMessage
    ) -> None:
        with patch.object(sender_module.aiosmtplib, "send", new=AsyncMock()) as send:
            await smtp_sender.send_contact_message(message)

        send.assert_awaited_once()
        kwargs = send.call_args.kwargs
        assert kwargs["hostname"] == "smtp.example.com"
        assert kwargs["port"] == 465
        assert kwargs["username"] == "site@example.com"
        assert kwargs["use_tls"] is True

    @pytest.mark.asyncio
    async def test_smtp_error_becomes_delivery_error(
        self, smtp_sender: SmtpEmailSender, message: ContactMessage
    ) -> None:
        failing = AsyncMock(side_effect=aiosmtplib.SMTPException("connection lost"))
        with patch.object(sender_module.aiosmtplib, "send", new=failing):
            with pytest.raises(EmailDeliveryError):
                await smtp_sender.send_contact_message(message)
