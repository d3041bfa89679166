"""PersonalRequestRepository protocol.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from typing import Protocol
from uuid import UUID

from directory_gate.domain.entities.personal_request import PersonalRequest
from directory_gate.domain.enums import RequestStatus


class PersonalRequestRepository(Protocol):
    """Personal request repository protocol (port).

    Methods:
        save: Persist a new request
        find_by_id: Retrieve a request by ID
        list_by_status: Requests in a status, newest first
        list_requested_contacts: Contact names claimed by one requester
        update_status: Overwrite a request's status
    """

    async def save(self, request: PersonalRequest) -> None:
        """Persist a new request.

        Args:
            request: Request entity (usually from PersonalRequest.submit()).
        """
        ...

    async def find_by_id(self, request_id: UUID) -> PersonalRequest | None:
        """Find a request by ID.

        Returns:
            PersonalRequest if found, None otherwise.
        """
        ...

    async def list_by_status(self, status: RequestStatus) -> list[PersonalRequest]:
        """List all requests in a status, newest first."""
        ...

    async def list_requested_contacts(
        self, requested_by: str, status: RequestStatus
    ) -> list[str]:
        """List requested-contact names for one requester in one status.

        Args:
            requested_by: Requester display name (exact match).
            status: Status filter.

        Returns:
            Requested contact names, unnormalized.
        """
        ...

    async def update_status(
        self, request_id: UUID, status: RequestStatus
    ) -> PersonalRequest | None:
        """Overwrite a request's status.

        Args:
            request_id: Request to update.
            status: New status.

        Returns:
            The updated request, or None if no request has that ID
            (nothing is written in that case).
        """
        ...
