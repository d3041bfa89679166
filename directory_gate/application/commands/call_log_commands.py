"""Call log commands."""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class UploadCallLog:
    """Record one call made or received by an agent.

    Attributes:
        caller_name: Other party's name.
        call_type: Call type as sent by the device (lower-cased on save).
        timestamp_ms: Call time as epoch milliseconds.
        uploaded_by: Display name of the authenticated agent.
        rship_manager_name: Relationship manager ("N/A" when unknown).
        duration_seconds: Call duration.
    """

    caller_name: str
    call_type: str
    timestamp_ms: int
    uploaded_by: str
    rship_manager_name: str = "N/A"
    duration_seconds: int = 0
