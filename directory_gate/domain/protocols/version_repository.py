"""VersionRepository protocol (client release descriptors)."""

from typing import Protocol

from directory_gate.domain.entities.version_info import VersionInfo


class VersionRepository(Protocol):
    """Read access to published client releases."""

    async def find_latest(self) -> VersionInfo | None:
        """Return the most recently created release, or None if none exist."""
        ...
