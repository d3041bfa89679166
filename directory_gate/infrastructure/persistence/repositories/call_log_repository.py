"""CallLogRepository - SQLAlchemy implementation (insert-only)."""

from sqlalchemy.ext.asyncio import AsyncSession

from directory_gate.domain.entities.call_log import CallLog
from directory_gate.infrastructure.persistence.models.call_log import (
    CallLog as CallLogModel,
)


class CallLogRepository:
    """SQLAlchemy implementation of CallLogRepository protocol."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def save(self, call_log: CallLog) -> None:
        """Insert a call log."""
        self.session.add(
            CallLogModel(
                id=call_log.id,
                caller_name=call_log.caller_name,
                rship_manager_name=call_log.rship_manager_name,
                call_type=call_log.call_type,
                called_at=call_log.called_at,
                duration_seconds=call_log.duration_seconds,
                uploaded_by=call_log.uploaded_by,
                created_at=call_log.created_at,
            )
        )
        await self.session.commit()
