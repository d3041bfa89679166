"""CallLogRepository protocol (write-only)."""

from typing import Protocol

from directory_gate.domain.entities.call_log import CallLog


class CallLogRepository(Protocol):
    """Call log persistence."""

    async def save(self, call_log: CallLog) -> None:
        """Persist a call log."""
        ...
