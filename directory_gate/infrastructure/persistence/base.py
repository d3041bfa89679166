"""Declarative bases for database models.

This module provides:
- BaseModel: Base class for owned tables (id, created_at)
- TimestampMixin: Adds updated_at
- BaseMutableModel: Base for owned tables whose rows change after insert
- legacy_metadata: Separate metadata for the pre-existing directory table

Owned tables are created by Alembic migrations from BaseModel.metadata.
The legacy directory lives in legacy_metadata so that neither migrations
nor create_all ever touch it in production.

Architecture:
    BaseModel (id, created_at)
        ├── BaseMutableModel (+ updated_at)
        │   └── PersonalRequestModel
        ├── UserModel
        ├── CallLogModel
        └── AppVersionModel
"""

from datetime import datetime
from typing import Any
from uuid import UUID as PythonUUID

from sqlalchemy import DateTime, MetaData, Uuid, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from uuid_extensions import uuid7


class BaseModel(DeclarativeBase):
    """Base class for all owned database models.

    Provides:
    - id: UUID primary key (time-ordered)
    - created_at: Timestamp when record was created (UTC)

    Domain entities never inherit from this; repositories map between them.
    """

    __abstract__ = True

    id: Mapped[PythonUUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid7,
        nullable=False,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<{self.__class__.__name__}(id={self.id})>"

    def to_dict(self) -> dict[str, Any]:
        """Convert model to dictionary (for debugging/logging)."""
        return {
            "id": str(self.id),
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }


class TimestampMixin:
    """Mixin for mutable models that track updates."""

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    def to_dict(self) -> dict[str, Any]:
        """Extend BaseModel.to_dict() with updated_at."""
        data: dict[str, Any] = super().to_dict()  # type: ignore[misc]
        data["updated_at"] = self.updated_at.isoformat() if self.updated_at else None
        return data


class BaseMutableModel(TimestampMixin, BaseModel):
    """Base class for mutable database models (id, created_at, updated_at)."""

    __abstract__ = True


# Legacy directory tables. Read-only; never part of migrations.
legacy_metadata = MetaData()
