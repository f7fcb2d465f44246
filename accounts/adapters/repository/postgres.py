"""
PostgreSQL repository adapter - Implements UserRepository protocol.

This module provides the PostgreSQL implementation of the domain's
repository port using psycopg3 (async) with raw SQL.

Uniqueness:
-----------
The users table carries a UNIQUE constraint on email. Concurrent inserts
for the same email are serialized by PostgreSQL: exactly one commits and
the others fail with UniqueViolation, which is reported as DuplicateKey.

Error translation:
------------------
- UniqueViolation              -> DuplicateKey
- CheckViolation / NotNull     -> SchemaViolation (constraint-specific message)
- OperationalError, PoolTimeout -> RepositoryUnavailable
"""

import logging
from pathlib import Path

import psycopg
from psycopg import errors
from psycopg_pool import AsyncConnectionPool

from accounts.domain.exceptions import DuplicateKey, RepositoryUnavailable, SchemaViolation
from accounts.domain.models import User

logger = logging.getLogger(__name__)

# Shipped as package data, see [tool.setuptools.package-data]
MIGRATIONS_DIR = Path(__file__).parent / "migrations"

# Messages for CHECK constraints declared in migrations/001_create_users.sql
_CONSTRAINT_MESSAGES = {
    "users_name_length": "Name must be at least 2 characters.",
    "users_email_normalized": "Email must be stored lowercased and trimmed.",
    "users_gender_present": "Gender is required.",
}

_USER_COLUMNS = "name, email, password_hash, gender, created_at, updated_at"


def _row_to_user(row: tuple) -> User:
    return User(
        name=row[0],
        email=row[1],
        password_hash=row[2],
        gender=row[3],
        created_at=row[4],
        updated_at=row[5],
    )


class PostgresUserRepository:
    """
    Implements UserRepository protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    All SQL uses parameterized queries for security.
    """

    def __init__(self, pool: AsyncConnectionPool) -> None:
        """
        Initialize repository with connection pool.

        Args:
            pool: psycopg3 AsyncConnectionPool, opened by the app lifespan
        """
        self._pool = pool

    async def find_by_email(self, email: str) -> User | None:
        """
        Fetch a user by normalized email.

        Args:
            email: Normalized email address (lowercase, stripped)

        Returns:
            User if found, None otherwise
        """
        sql = f"SELECT {_USER_COLUMNS} FROM users WHERE email = %s"

        try:
            async with self._pool.connection() as conn, conn.cursor() as cursor:
                await cursor.execute(sql, (email,))
                row = await cursor.fetchone()
        except psycopg.OperationalError as e:
            raise RepositoryUnavailable(str(e)) from e

        return _row_to_user(row) if row is not None else None

    async def insert(self, user: User) -> User:
        """
        Insert a new user row.

        Timestamps come from the database clock (NOW()).

        Args:
            user: User with normalized email and bcrypt password_hash

        Returns:
            Stored User including created_at/updated_at

        Raises:
            DuplicateKey: email already present
            SchemaViolation: a CHECK or NOT NULL constraint failed
            RepositoryUnavailable: database unreachable
        """
        sql = f"""
            INSERT INTO users (name, email, password_hash, gender, created_at, updated_at)
            VALUES (%s, %s, %s, %s, NOW(), NOW())
            RETURNING {_USER_COLUMNS}
        """

        try:
            async with self._pool.connection() as conn, conn.cursor() as cursor:
                await cursor.execute(sql, (user.name, user.email, user.password_hash, user.gender))
                row = await cursor.fetchone()
        except errors.UniqueViolation as e:
            raise DuplicateKey(user.email) from e
        except errors.CheckViolation as e:
            constraint = e.diag.constraint_name or ""
            raise SchemaViolation(_CONSTRAINT_MESSAGES.get(constraint, str(e))) from e
        except errors.NotNullViolation as e:
            raise SchemaViolation(f"{e.diag.column_name} is required.") from e
        except psycopg.OperationalError as e:
            raise RepositoryUnavailable(str(e)) from e

        return _row_to_user(row)

    async def ping(self) -> None:
        """Round-trip a trivial query."""
        try:
            async with self._pool.connection() as conn:
                await conn.execute("SELECT 1")
        except psycopg.OperationalError as e:
            raise RepositoryUnavailable(str(e)) from e


def migration_files() -> list[Path]:
    """Return the packaged SQL migrations in execution order."""
    return sorted(MIGRATIONS_DIR.glob("*.sql"))


async def run_migrations(pool: AsyncConnectionPool) -> None:
    """
    Execute all SQL migration files from the migrations directory.

    Migrations are executed in sorted order (alphabetically by filename).
    Each migration should be idempotent (use IF NOT EXISTS, etc.).

    Args:
        pool: psycopg3 AsyncConnectionPool instance

    Raises:
        RuntimeError: No migration files packaged, or a migration failed
    """
    sql_files = migration_files()

    if not sql_files:
        raise RuntimeError(f"No migration files found in {MIGRATIONS_DIR}")

    logger.info(f"Running {len(sql_files)} migration(s)")

    for sql_file in sql_files:
        logger.info(f"Executing migration: {sql_file.name}")
        try:
            sql_content = sql_file.read_text()

            async with pool.connection() as conn:
                await conn.execute(sql_content)

            logger.info(f"Migration complete: {sql_file.name}")
        except Exception as e:
            logger.error(f"Migration failed: {sql_file.name} - {e}")
            raise RuntimeError(f"Database migration failed: {sql_file.name}") from e
