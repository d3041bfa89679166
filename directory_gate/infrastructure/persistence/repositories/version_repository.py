"""VersionRepository - SQLAlchemy implementation."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from directory_gate.domain.entities.version_info import VersionInfo
from directory_gate.infrastructure.persistence.models.app_version import AppVersion


class VersionRepository:
    """Read access to published client releases."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def find_latest(self) -> VersionInfo | None:
        """Most recently created release (ties broken by newest ID)."""
        stmt = (
            select(AppVersion)
            .order_by(AppVersion.created_at.desc(), AppVersion.id.desc())
            .limit(1)
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return VersionInfo(
            id=model.id,
            version=model.version,
            update_type=model.update_type,
            changelog=model.changelog,
            download_url=model.download_url,
            created_at=model.created_at,
        )
