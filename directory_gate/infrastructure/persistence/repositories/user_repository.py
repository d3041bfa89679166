"""UserRepository - SQLAlchemy implementation of UserRepository protocol.

Adapter for hexagonal architecture.
Maps between domain User entities and database UserModel.
"""

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from directory_gate.domain.entities.user import User
from directory_gate.infrastructure.persistence.models.user import User as UserModel


class UserRepository:
    """SQLAlchemy implementation of UserRepository protocol.

    This class does NOT inherit from the UserRepository protocol (structural typing).

    Example:
        >>> async with database.get_session() as session:
        ...     repo = UserRepository(session)
        ...     user = await repo.find_by_email("jane.doe@example.com")
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def find_by_email(self, email: str) -> User | None:
        """Find user by exact email.

        Args:
            email: Email as supplied by the employee directory.

        Returns:
            Domain User entity if found, None otherwise.
        """
        stmt = select(UserModel).where(UserModel.email == email)
        result = await self.session.execute(stmt)
        user_model = result.scalar_one_or_none()

        if user_model is None:
            return None

        return self._to_domain(user_model)

    async def save(self, user: User) -> None:
        """Create new user in database.

        The session is rolled back before re-raising so the caller can keep
        using it (e.g. to re-read the user that won a concurrent insert).

        Raises:
            IntegrityError: If the email already exists.
        """
        self.session.add(self._to_model(user))
        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            raise

    def _to_domain(self, user_model: UserModel) -> User:
        return User(
            id=user_model.id,
            email=user_model.email,
            name=user_model.name,
            created_at=user_model.created_at,
        )

    def _to_model(self, user: User) -> UserModel:
        return UserModel(
            id=user.id,
            email=user.email,
            name=user.name,
            created_at=user.created_at,
        )
