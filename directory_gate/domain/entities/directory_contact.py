"""DirectoryContact - projection of a legacy directory row.

The legacy directory is read-only. Only these five fields are ever read;
values are exactly as stored (quoting artifacts included) and cleaned by the
visibility query.
"""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class DirectoryContact:
    """Raw legacy directory projection.

    Attributes:
        name: Contact name.
        mobile: Mobile number (may contain embedded quotes).
        pan: Tax identifier (may contain embedded quotes).
        relationship_manager: Relationship manager name.
        family_head: Family head name.
    """

    name: str | None
    mobile: str | None = None
    pan: str | None = None
    relationship_manager: str | None = None
    family_head: str | None = None
