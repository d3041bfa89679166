"""VersionInfo domain entity (append-only client release descriptor)."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class VersionInfo:
    """Published client release.

    Attributes:
        id: Record identifier.
        version: Version string (e.g. "1.4.2").
        update_type: Kind of update (e.g. "optional", "mandatory").
        changelog: Release notes.
        download_url: Where the client can fetch the build.
        created_at: Publication time; the newest record is the latest release.
    """

    id: UUID
    version: str
    update_type: str
    changelog: str | None
    download_url: str
    created_at: datetime
