"""PersonalRequest domain entity.

A claim by one staff member that a shared directory contact is personal to
them. Only approved requests hide the contact, and only from the
requester's own directory view.

Business Rules:
    - New requests start PENDING
    - requested_by never changes after creation
    - Any status can be replaced by any other status (no terminal state)
"""

from dataclasses import dataclass, replace
from datetime import UTC, datetime
from uuid import UUID

from uuid_extensions import uuid7

from directory_gate.domain.enums import RequestStatus


@dataclass(frozen=True, kw_only=True)
class PersonalRequest:
    """Request to treat a directory contact as personal.

    Attributes:
        id: Request identifier.
        requested_contact: Contact name as typed by the requester.
        requested_by: Requester's display name.
        reason: Free-text justification.
        status: Current lifecycle state.
        created_at: Submission time.
        updated_at: Last status change (equals created_at until first update).
    """

    id: UUID
    requested_contact: str
    requested_by: str
    reason: str
    status: RequestStatus
    created_at: datetime
    updated_at: datetime

    @classmethod
    def submit(
        cls, *, requested_contact: str, requested_by: str, reason: str
    ) -> "PersonalRequest":
        """Create a new pending request.

        Args:
            requested_contact: Contact name.
            requested_by: Requester display name.
            reason: Justification.

        Returns:
            PersonalRequest in PENDING state.
        """
        now = datetime.now(UTC)
        return cls(
            id=uuid7(),
            requested_contact=requested_contact,
            requested_by=requested_by,
            reason=reason,
            status=RequestStatus.PENDING,
            created_at=now,
            updated_at=now,
        )

    def with_status(self, status: RequestStatus) -> "PersonalRequest":
        """Return a copy carrying the new status."""
        return replace(self, status=status, updated_at=datetime.now(UTC))

    @property
    def is_approved(self) -> bool:
        """Whether the request currently hides the contact."""
        return self.status == RequestStatus.APPROVED
