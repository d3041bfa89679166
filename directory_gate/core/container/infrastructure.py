"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Database (PostgreSQL)
- Token generation (JWT)
- OAuth state signing
- Logging (console)

Request-scoped database sessions are created per request.
"""

from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from directory_gate.core.config import settings
from directory_gate.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from directory_gate.domain.protocols.logger_protocol import LoggerProtocol
    from directory_gate.domain.protocols.state_token_protocol import (
        StateTokenProtocol,
    )
    from directory_gate.domain.protocols.token_generation_protocol import (
        TokenGenerationProtocol,
    )


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Use get_db_session() for per-request sessions.

    Returns:
        Database manager instance.
    """
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


@lru_cache()
def get_token_service() -> "TokenGenerationProtocol":
    """Get JWT bearer credential service singleton (app-scoped).

    Returns:
        JWTService signing with the application secret key.
    """
    from directory_gate.infrastructure.security import JWTService

    return JWTService(
        secret_key=settings.secret_key,
        expiration_minutes=settings.access_token_expire_minutes,
    )


@lru_cache()
def get_state_codec() -> "StateTokenProtocol":
    """Get OAuth state token codec singleton (app-scoped)."""
    from directory_gate.infrastructure.identity import StateTokenCodec

    return StateTokenCodec(
        secret_key=settings.secret_key,
        ttl_seconds=settings.oauth_state_ttl_seconds,
    )


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    - development: ConsoleAdapter (human-readable, colored)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from directory_gate.infrastructure.logging.console_adapter import ConsoleAdapter

    return ConsoleAdapter(
        use_json=not settings.is_development,
        level=settings.log_level,
    )


# ============================================================================
# Request-Scoped Dependencies (Per-Request)
# ============================================================================


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session (request-scoped).

    Commits on success, rolls back on exception, always closes.

    Yields:
        Database session for request duration.
    """
    db = get_database()
    async with db.get_session() as session:
        yield session


async def get_directory_session() -> AsyncGenerator[AsyncSession, None]:
    """Get a second, independent session for the legacy directory read.

    The directory projection and the approved-request lookup run
    concurrently, and one AsyncSession cannot serve two queries at once.

    Yields:
        Database session used only by the directory repository.
    """
    db = get_database()
    async with db.get_session() as session:
        yield session
