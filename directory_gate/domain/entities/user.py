"""User domain entity.

A user exists once the identity provider has confirmed the person at least
once. Users are created on first login and never updated or deleted: name
and email are not resynchronized on later logins.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class User:
    """Staff member known to the system.

    Attributes:
        id: Stable local identifier.
        email: Email as supplied by the employee directory (unique, case-sensitive).
        name: Display name ("First Last").
        created_at: When the user first logged in.
    """

    id: UUID
    email: str
    name: str
    created_at: datetime
