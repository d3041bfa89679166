"""PersonalRequest database model."""

from sqlalchemy import Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from directory_gate.infrastructure.persistence.base import BaseMutableModel


class PersonalRequest(BaseMutableModel):
    """Request to treat a directory contact as personal to the requester.

    Fields:
        id, created_at, updated_at: From BaseMutableModel
        requested_contact: Contact name as typed
        requested_by: Requester display name (never changes)
        reason: Free-text justification
        status: pending | approved | rejected

    Indexes:
        - ix_personal_requests_status_created_at: pending list, newest first
        - ix_personal_requests_requested_by_status: per-user approved names
    """

    __tablename__ = "personal_requests"

    requested_contact: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Directory contact name as typed by the requester",
    )

    requested_by: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Requester display name",
    )

    reason: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="pending",
        comment="pending, approved or rejected",
    )

    __table_args__ = (
        Index("ix_personal_requests_status_created_at", "status", "created_at"),
        Index("ix_personal_requests_requested_by_status", "requested_by", "status"),
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"<PersonalRequest(id={self.id}, "
            f"requested_by={self.requested_by!r}, status={self.status!r})>"
        )
