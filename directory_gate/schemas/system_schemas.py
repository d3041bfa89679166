"""System endpoint schemas."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Liveness response."""

    status: str = Field(default="healthy")
