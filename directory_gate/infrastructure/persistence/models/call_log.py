"""CallLog database model (insert-only)."""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from directory_gate.infrastructure.persistence.base import BaseModel


class CallLog(BaseModel):
    """Call recorded by an agent's device."""

    __tablename__ = "call_logs"

    caller_name: Mapped[str] = mapped_column(String(255), nullable=False)

    rship_manager_name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        default="N/A",
    )

    call_type: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        comment="Lower-cased call type",
    )

    called_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )

    duration_seconds: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
    )

    uploaded_by: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True,
        comment="Display name of the uploading agent",
    )
