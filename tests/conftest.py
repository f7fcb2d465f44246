"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- A fast bcrypt work factor for service tests
- In-memory repository and recording email sender
- Settings and a fully wired application on the in-memory backend
"""

from collections.abc import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from accounts.adapters.repository.memory import InMemoryUserRepository
from accounts.api.main import create_app
from accounts.config.settings import Settings
from accounts.domain.models import ContactMessage

# Minimum bcrypt cost; keeps hashing-heavy tests quick.
FAST_ROUNDS = 4


class RecordingEmailSender:
    """EmailSender that keeps delivered messages in memory."""

    def __init__(self) -> None:
        self.sent: list[ContactMessage] = []

    async def send_contact_message(self, message: ContactMessage) -> None:
        self.sent.append(message)


@pytest.fixture
def repository() -> InMemoryUserRepository:
    """Fresh in-memory repository for each test."""
    return InMemoryUserRepository()


@pytest.fixture
def email_sender() -> RecordingEmailSender:
    return RecordingEmailSender()


@pytest.fixture
def settings() -> Settings:
    """Settings for the in-memory backend with a fast work factor."""
    return Settings(
        repository_backend="memory",
        bcrypt_cost=FAST_ROUNDS,
        cors_allowed_origins=["https://frontend.example.com"],
        email_backend="console",
        contact_recipient="owner@example.com",
        email_timeout_seconds=1.0,
        _env_file=None,
    )


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    return create_app(settings)


@pytest.fixture
def client(app: FastAPI, email_sender: RecordingEmailSender) -> Generator[TestClient, None, None]:
    """Test client with lifespan run; the email sender is swapped for a recorder."""
    with TestClient(app) as test_client:
        app.state.email_sender = email_sender
        yield test_client
