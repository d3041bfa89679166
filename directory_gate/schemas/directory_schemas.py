"""Directory schemas.

Endpoints:
    GET /getLegacyData - Directory as visible to the caller
"""

from pydantic import BaseModel, ConfigDict, Field

from directory_gate.application.queries.handlers.list_visible_contacts_handler import (
    VisibleContact,
)


class DirectoryContactResponse(BaseModel):
    """One visible directory contact."""

    name: str
    number: str
    type: str = Field(..., examples=["work"])
    pan: str
    rship_manager: str = Field(..., alias="rshipManager")
    family_head: str = Field(..., alias="familyHead")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_dto(cls, contact: VisibleContact) -> "DirectoryContactResponse":
        return cls(
            name=contact.name,
            number=contact.number,
            type=contact.type,
            pan=contact.pan,
            rship_manager=contact.rship_manager,
            family_head=contact.family_head,
        )
