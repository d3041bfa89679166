"""UserRepository protocol for user persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from typing import Protocol

from directory_gate.domain.entities.user import User


class UserRepository(Protocol):
    """User repository protocol (port).

    This is a Protocol (not ABC) for structural typing.
    Implementations don't need to inherit from this.

    Methods:
        find_by_email: Retrieve user by exact email
        save: Create new user
    """

    async def find_by_email(self, email: str) -> User | None:
        """Find user by email address.

        Comparison is exact (case-sensitive): the email is stored as the
        employee directory supplied it.

        Args:
            email: User's email address.

        Returns:
            User if found, None otherwise.
        """
        ...

    async def save(self, user: User) -> None:
        """Create new user.

        Args:
            user: User entity to persist.

        Raises:
            IntegrityError: If a user with the same email already exists.
        """
        ...
