"""Delegated login schemas.

Endpoints:
    GET /auth/zoho           - Authorization URL for the frontend to open
    GET /auth/zoho/callback  - Provider callback (302, no body)
"""

from pydantic import BaseModel, ConfigDict, Field


class AuthorizationUrlResponse(BaseModel):
    """Response schema for starting a login."""

    auth_url: str = Field(..., alias="authUrl")

    model_config = ConfigDict(populate_by_name=True)
