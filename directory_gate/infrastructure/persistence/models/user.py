"""User database model.

Users are inserted on first successful login and never updated, so the
model has no updated_at column.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from directory_gate.infrastructure.persistence.base import BaseModel


class User(BaseModel):
    """Staff user confirmed by the identity provider.

    Fields:
        id: UUID primary key (from BaseModel)
        created_at: First login time (from BaseModel)
        email: Unique email, stored exactly as the employee directory returned it
        name: Display name

    Indexes:
        - ix_users_email (unique): get-or-create lookup on login
    """

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
        comment="Employee email (unique, case-sensitive)",
    )

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Display name from the employee directory",
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<User(id={self.id}, email={self.email!r})>"
