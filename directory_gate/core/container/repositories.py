"""Repository dependency factories.

Request-scoped repository instances. Each request gets fresh repositories
bound to its session; the directory repository gets its own session.
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from directory_gate.core.container.infrastructure import (
    get_db_session,
    get_directory_session,
)

if TYPE_CHECKING:
    from directory_gate.infrastructure.persistence.repositories import (
        CallLogRepository,
        DirectoryRepository,
        PersonalRequestRepository,
        UserRepository,
        VersionRepository,
    )


async def get_user_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "UserRepository":
    """Get user repository (request-scoped).

    Args:
        session: Database session for request duration.

    Returns:
        UserRepository instance.
    """
    from directory_gate.infrastructure.persistence.repositories import UserRepository

    return UserRepository(session=session)


async def get_personal_request_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "PersonalRequestRepository":
    """Get personal request repository (request-scoped)."""
    from directory_gate.infrastructure.persistence.repositories import (
        PersonalRequestRepository,
    )

    return PersonalRequestRepository(session=session)


async def get_directory_repository(
    session: AsyncSession = Depends(get_directory_session),
) -> "DirectoryRepository":
    """Get legacy directory repository (request-scoped, own session)."""
    from directory_gate.infrastructure.persistence.repositories import (
        DirectoryRepository,
    )

    return DirectoryRepository(session=session)


async def get_call_log_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "CallLogRepository":
    """Get call log repository (request-scoped)."""
    from directory_gate.infrastructure.persistence.repositories import (
        CallLogRepository,
    )

    return CallLogRepository(session=session)


async def get_version_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "VersionRepository":
    """Get version repository (request-scoped)."""
    from directory_gate.infrastructure.persistence.repositories import (
        VersionRepository,
    )

    return VersionRepository(session=session)
