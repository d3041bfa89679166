"""Call log schemas.

Endpoints:
    POST /uploadCallLog - Store one call log (201)
"""

import math
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from directory_gate.schemas.common_schemas import NonBlankStr

DEFAULT_RSHIP_MANAGER = "N/A"


class CallLogCreateRequest(BaseModel):
    """Request schema for uploading a call log.

    POST /uploadCallLog
    Returns: 201 Created
    """

    caller_name: NonBlankStr = Field(..., alias="callerName")
    rship_manager_name: str = Field(
        default=DEFAULT_RSHIP_MANAGER,
        alias="rshipManagerName",
    )
    type: NonBlankStr = Field(..., examples=["Incoming"])
    timestamp: int = Field(..., description="Call time, epoch milliseconds")
    duration: int = Field(
        default=0, ge=0, description="Duration in seconds (fractions are rounded)"
    )

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "callerName": "Jane Doe",
                "rshipManagerName": "Bob Lee",
                "type": "Incoming",
                "timestamp": 1700000000000,
                "duration": 42,
            }
        },
    )

    @field_validator("duration", mode="before")
    @classmethod
    def round_fractional_duration(cls, v: object) -> object:
        """Round fractional seconds (e.g. 12.5) to a whole number of seconds."""
        if isinstance(v, str):
            try:
                v = float(v)
            except ValueError:
                return v
        if isinstance(v, float) and math.isfinite(v):
            return round(v)
        return v

    @field_validator("rship_manager_name", mode="before")
    @classmethod
    def default_blank_manager(cls, v: object) -> object:
        """Treat null or blank relationship manager as "N/A"."""
        if v is None or (isinstance(v, str) and not v.strip()):
            return DEFAULT_RSHIP_MANAGER
        return v


class CallLogCreateResponse(BaseModel):
    """Response schema for a stored call log (201 Created)."""

    message: str = Field(default="Call log saved successfully")
    id: UUID
