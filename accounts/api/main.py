"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance,
configures middleware, exception handlers, and lifespan events.
"""

import asyncio
import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from psycopg_pool import AsyncConnectionPool

from accounts.adapters.repository.memory import InMemoryUserRepository
from accounts.adapters.repository.postgres import PostgresUserRepository, run_migrations
from accounts.adapters.smtp.console import ConsoleEmailSender
from accounts.adapters.smtp.sender import SmtpEmailSender
from accounts.api.errors import register_exception_handlers
from accounts.api.routes import router
from accounts.config.settings import Settings, get_settings
from accounts.domain.authentication import dummy_hash
from accounts.domain.exceptions import RepositoryError
from accounts.domain.ports import EmailSender

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "accounts",
        "description": "Register accounts, verify logins and relay contact messages",
    },
]


def build_email_sender(settings: Settings) -> EmailSender:
    """Pick the email transport configured in settings."""
    if settings.email_backend == "smtp":
        return SmtpEmailSender(
            hostname=settings.smtp_host,
            port=settings.smtp_port,
            username=settings.smtp_user,
            password=settings.smtp_password,
            use_tls=settings.smtp_use_tls,
        )
    return ConsoleEmailSender()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Manages application startup and shutdown:
    - Opens the database connection pool on startup (postgres backend)
    - Runs migrations on startup
    - Closes connection pool on shutdown
    """
    settings: Settings = app.state.settings
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    logger.info("Starting application...")

    pool: AsyncConnectionPool | None = None
    if settings.repository_backend == "postgres":
        logger.info("Connecting to database...")

        # Create connection pool with explicit sizing
        pool = AsyncConnectionPool(
            conninfo=settings.database_url,
            min_size=settings.pool_min_size,
            max_size=settings.pool_max_size,
            open=False,
        )
        await pool.open()

        logger.info("Running database migrations...")
        await run_migrations(pool)

        app.state.repository = PostgresUserRepository(pool)
    else:
        logger.warning("Using in-memory user repository; data is lost on restart")
        app.state.repository = InMemoryUserRepository()

    app.state.email_sender = build_email_sender(settings)

    # Warm the login dummy hash at the configured cost
    await asyncio.to_thread(dummy_hash, settings.bcrypt_cost)

    logger.info("Application startup complete")

    yield

    # Shutdown
    logger.info("Shutting down application...")
    if pool is not None:
        await pool.close()
        logger.info("Database connection pool closed")


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Configuration to use; defaults to environment-loaded settings
    """
    settings = settings or get_settings()

    application = FastAPI(
        title="accounts-api",
        description="Account registration, login and contact relay API",
        version="0.1.0",
        openapi_tags=tags_metadata,
        lifespan=lifespan,
    )
    application.state.settings = settings

    # Cross-origin access limited to the configured front-ends
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    register_exception_handlers(application)
    application.include_router(router)

    @application.get("/health", response_model=None)
    async def health_check(request: Request) -> dict[str, str] | JSONResponse:
        """
        Health check endpoint with repository validation.

        Returns 200 OK if application and storage are healthy, 503 otherwise.
        """
        try:
            await request.app.state.repository.ping()
        except RepositoryError:
            logger.exception("Health check failed")
            return JSONResponse(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                content={"status": "unavailable"},
            )
        return {"status": "healthy"}

    return application


app = create_app()
