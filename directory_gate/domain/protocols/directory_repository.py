"""DirectoryRepository protocol (legacy contact directory, read-only)."""

from typing import Protocol

from directory_gate.domain.entities.directory_contact import DirectoryContact


class DirectoryRepository(Protocol):
    """Read-only access to the legacy shared directory."""

    async def list_contacts(self) -> list[DirectoryContact]:
        """Return the five-field projection of every directory row, in store order."""
        ...
