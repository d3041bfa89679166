"""Authenticated caller identity (taken from a verified bearer credential)."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticatedCaller:
    """Who is making a protected call.

    Attributes:
        user_id: Local user ID.
        email: User email.
        name: Display name; this is the key personal requests are filed under.
    """

    user_id: UUID
    email: str
    name: str
