"""Personal request queries."""

from dataclasses import dataclass

from directory_gate.domain.value_objects import AuthenticatedCaller


@dataclass(frozen=True, kw_only=True)
class ListPendingRequests:
    """All pending requests, newest first."""

    caller: AuthenticatedCaller
