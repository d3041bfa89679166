"""CallLog domain entity (write-only audit of agent call activity)."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class CallLog:
    """Single call recorded by an agent's device.

    Attributes:
        id: Record identifier.
        caller_name: Name of the other party.
        rship_manager_name: Relationship manager for the caller ("N/A" if unknown).
        call_type: Lower-cased call type (incoming, outgoing, missed, ...).
        called_at: When the call happened (UTC).
        duration_seconds: Call duration.
        uploaded_by: Display name of the agent who uploaded the log.
        created_at: When the record was stored.
    """

    id: UUID
    caller_name: str
    rship_manager_name: str
    call_type: str
    called_at: datetime
    duration_seconds: int
    uploaded_by: str
    created_at: datetime
