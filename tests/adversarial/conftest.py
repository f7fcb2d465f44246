"""
Shared fixtures for adversarial tests.

Provides services wired to a shared in-memory repository so that
concurrent requests contend for the same storage.
"""

import pytest

from accounts.adapters.repository.memory import InMemoryUserRepository
from accounts.domain.authentication import AuthenticationService
from accounts.domain.registration import RegistrationService

# Module-level marker for all adversarial tests
pytestmark = pytest.mark.adversarial


@pytest.fixture
def registration(repository: InMemoryUserRepository) -> RegistrationService:
    return RegistrationService(repository=repository, rounds=4)


@pytest.fixture
def authentication(repository: InMemoryUserRepository) -> AuthenticationService:
    return AuthenticationService(repository=repository)
