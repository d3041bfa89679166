"""Persistence adapters (SQLAlchemy 2.0 async)."""

from directory_gate.infrastructure.persistence.base import (
    BaseModel,
    BaseMutableModel,
    legacy_metadata,
)
from directory_gate.infrastructure.persistence.database import Database

__all__ = ["BaseModel", "BaseMutableModel", "Database", "legacy_metadata"]
