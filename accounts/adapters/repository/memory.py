"""
In-memory repository adapter - Implements UserRepository protocol.

Holds users in a dict keyed by email for local development and tests.
Mirrors the constraints of the PostgreSQL schema (UNIQUE email, CHECK
constraints) so both adapters fail the same way.
"""

import asyncio
from dataclasses import replace
from datetime import datetime, timezone

from accounts.domain.exceptions import DuplicateKey, SchemaViolation
from accounts.domain.models import User


class InMemoryUserRepository:
    """
    Implements UserRepository protocol with a process-local dict.

    Uses structural subtyping - no explicit inheritance from Protocol.
    The check-and-insert runs under an asyncio.Lock, so it is atomic with
    respect to other coroutines on the same event loop.
    """

    def __init__(self) -> None:
        self._users: dict[str, User] = {}
        self._lock = asyncio.Lock()

    async def find_by_email(self, email: str) -> User | None:
        return self._users.get(email)

    async def insert(self, user: User) -> User:
        self._check_constraints(user)

        async with self._lock:
            if user.email in self._users:
                raise DuplicateKey(user.email)
            now = datetime.now(timezone.utc)
            stored = replace(user, created_at=now, updated_at=now)
            self._users[user.email] = stored
            return stored

    async def ping(self) -> None:
        return None

    def __len__(self) -> int:
        return len(self._users)

    def _check_constraints(self, user: User) -> None:
        if len(user.name.strip()) < 2:
            raise SchemaViolation("Name must be at least 2 characters.")
        if not user.email or user.email != user.email.strip().lower():
            raise SchemaViolation("Email must be stored lowercased and trimmed.")
        if not user.password_hash:
            raise SchemaViolation("password_hash is required.")
        if not user.gender.strip():
            raise SchemaViolation("Gender is required.")
