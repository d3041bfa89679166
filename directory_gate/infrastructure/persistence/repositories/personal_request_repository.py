"""PersonalRequestRepository - SQLAlchemy implementation.

Adapter for hexagonal architecture.
Maps between domain PersonalRequest entities and PersonalRequestModel.
"""

from datetime import UTC, datetime
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from directory_gate.domain.entities.personal_request import PersonalRequest
from directory_gate.domain.enums import RequestStatus
from directory_gate.infrastructure.persistence.models.personal_request import (
    PersonalRequest as PersonalRequestModel,
)


class PersonalRequestRepository:
    """SQLAlchemy implementation of PersonalRequestRepository protocol.

    Status is stored as the lower-case enum value.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def save(self, request: PersonalRequest) -> None:
        """Insert a new request."""
        self.session.add(self._to_model(request))
        await self.session.commit()

    async def find_by_id(self, request_id: UUID) -> PersonalRequest | None:
        """Find request by ID.

        Returns:
            Domain entity if found, None otherwise.
        """
        model = await self._get_model(request_id)
        if model is None:
            return None
        return self._to_domain(model)

    async def list_by_status(self, status: RequestStatus) -> list[PersonalRequest]:
        """List requests in a status, newest first (ties broken by ID)."""
        stmt = (
            select(PersonalRequestModel)
            .where(PersonalRequestModel.status == status.value)
            .order_by(
                PersonalRequestModel.created_at.desc(),
                PersonalRequestModel.id.desc(),
            )
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def list_requested_contacts(
        self, requested_by: str, status: RequestStatus
    ) -> list[str]:
        """Requested-contact names for one requester in one status."""
        stmt = select(PersonalRequestModel.requested_contact).where(
            PersonalRequestModel.requested_by == requested_by,
            PersonalRequestModel.status == status.value,
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def update_status(
        self, request_id: UUID, status: RequestStatus
    ) -> PersonalRequest | None:
        """Overwrite a request's status.

        Returns:
            Updated entity, or None if the ID does not exist (nothing written).
        """
        model = await self._get_model(request_id)
        if model is None:
            return None

        model.status = status.value
        model.updated_at = datetime.now(UTC)
        await self.session.commit()
        await self.session.refresh(model)

        return self._to_domain(model)

    async def _get_model(self, request_id: UUID) -> PersonalRequestModel | None:
        stmt = select(PersonalRequestModel).where(PersonalRequestModel.id == request_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    def _to_domain(self, model: PersonalRequestModel) -> PersonalRequest:
        """Convert database model to domain entity."""
        return PersonalRequest(
            id=model.id,
            requested_contact=model.requested_contact,
            requested_by=model.requested_by,
            reason=model.reason,
            status=RequestStatus(model.status),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, request: PersonalRequest) -> PersonalRequestModel:
        """Convert domain entity to database model."""
        return PersonalRequestModel(
            id=request.id,
            requested_contact=request.requested_contact,
            requested_by=request.requested_by,
            reason=request.reason,
            status=request.status.value,
            created_at=request.created_at,
            updated_at=request.updated_at,
        )
