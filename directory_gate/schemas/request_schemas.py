"""Personal request schemas.

Endpoints:
    POST /requestAsPersonal     - Submit a request (201)
    GET  /getPendingRequests    - List pending requests
    PUT  /updateRequestStatus   - Approve/reject/reopen a request
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from directory_gate.domain.entities.personal_request import PersonalRequest
from directory_gate.schemas.common_schemas import NonBlankStr


class PersonalRequestCreateRequest(BaseModel):
    """Request schema for submitting a personal request.

    POST /requestAsPersonal
    Returns: 201 Created
    """

    requested_contact: NonBlankStr = Field(
        ...,
        alias="requestedContact",
        description="Directory contact name",
        examples=["Jane Doe"],
    )
    requested_by: NonBlankStr = Field(
        ...,
        alias="requestedBy",
        description="Requester display name",
        examples=["Alice Smith"],
    )
    reason: NonBlankStr = Field(
        ...,
        description="Why the contact is personal",
        examples=["Family member"],
    )

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "requestedContact": "Jane Doe",
                "requestedBy": "Alice Smith",
                "reason": "Family member",
            }
        },
    )


class PersonalRequestCreateResponse(BaseModel):
    """Response schema for a submitted request (201 Created)."""

    message: str = Field(default="Request submitted successfully")
    id: UUID = Field(..., description="Created request ID")


class PersonalRequestResponse(BaseModel):
    """Single personal request."""

    id: UUID
    requested_contact: str = Field(..., alias="requestedContact")
    requested_by: str = Field(..., alias="requestedBy")
    reason: str
    status: str = Field(..., examples=["pending"])
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_entity(cls, request: PersonalRequest) -> "PersonalRequestResponse":
        return cls(
            id=request.id,
            requested_contact=request.requested_contact,
            requested_by=request.requested_by,
            reason=request.reason,
            status=request.status.value,
            created_at=request.created_at,
            updated_at=request.updated_at,
        )


class RequestStatusUpdateRequest(BaseModel):
    """Request schema for changing a request's status.

    PUT /updateRequestStatus

    ``status`` is matched case-insensitively against pending, approved and
    rejected by the handler (unknown values → 400).
    """

    request_id: NonBlankStr = Field(..., alias="requestId")
    status: NonBlankStr = Field(..., examples=["approved"])

    model_config = ConfigDict(populate_by_name=True)


class RequestStatusUpdateResponse(BaseModel):
    """Response schema for a status change."""

    message: str = Field(..., examples=["Request marked as approved"])
    data: PersonalRequestResponse
