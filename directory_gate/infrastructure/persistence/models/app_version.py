"""AppVersion database model (append-only client releases)."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from directory_gate.infrastructure.persistence.base import BaseModel


class AppVersion(BaseModel):
    """Published client release. The newest row is the latest version."""

    __tablename__ = "app_versions"

    version: Mapped[str] = mapped_column(String(50), nullable=False)
    update_type: Mapped[str] = mapped_column(String(50), nullable=False)
    changelog: Mapped[str | None] = mapped_column(Text, nullable=True)
    download_url: Mapped[str] = mapped_column(String(1024), nullable=False)
