"""Client release schemas.

Endpoints:
    GET /version/latest - Latest published release
"""

from pydantic import BaseModel, ConfigDict, Field

from directory_gate.domain.entities.version_info import VersionInfo


class LatestVersionResponse(BaseModel):
    """Latest client release descriptor."""

    latest_version: str = Field(..., alias="latestVersion", examples=["1.4.2"])
    update_type: str = Field(..., alias="updateType", examples=["optional"])
    changelog: str | None = None
    download_url: str = Field(..., alias="downloadUrl")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_entity(cls, version: VersionInfo) -> "LatestVersionResponse":
        return cls(
            latest_version=version.version,
            update_type=version.update_type,
            changelog=version.changelog,
            download_url=version.download_url,
        )
