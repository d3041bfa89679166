"""Directory queries."""

from dataclasses import dataclass

from directory_gate.domain.value_objects import AuthenticatedCaller


@dataclass(frozen=True, kw_only=True)
class ListVisibleContacts:
    """Directory as seen by one caller (their approved personal contacts removed)."""

    caller: AuthenticatedCaller
