"""Personal request lifecycle states.

State Machine:
    PENDING ↔ APPROVED ↔ REJECTED

    Every state can move to every other state through a status update.
    There is no terminal state and no automatic expiry. New requests always
    start in PENDING.

Usage:
    from directory_gate.domain.enums import RequestStatus

    status = RequestStatus.parse("APPROVED")  # RequestStatus.APPROVED
"""

from enum import Enum


class RequestStatus(str, Enum):
    """Personal request lifecycle states.

    String Enum:
        Inherits from str for easy serialization and database storage.
        Values are lowercase for consistency.
    """

    PENDING = "pending"
    """Submitted, awaiting a decision. Has no effect on directory visibility."""

    APPROVED = "approved"
    """Contact is personal to the requester and hidden from their directory view."""

    REJECTED = "rejected"
    """Claim declined. Has no effect on directory visibility."""

    @classmethod
    def parse(cls, value: str) -> "RequestStatus | None":
        """Match a caller-supplied status case-insensitively.

        Args:
            value: Raw status string (e.g. "Approved", " rejected ").

        Returns:
            Matching RequestStatus, or None if the value is not recognized.
        """
        normalized = value.strip().lower()
        for status in cls:
            if status.value == normalized:
                return status
        return None
