"""System router for lightweight, side-effect free endpoints."""

from fastapi import APIRouter

from directory_gate.schemas.system_schemas import HealthResponse

system_router = APIRouter(tags=["System"])


@system_router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Health check endpoint for monitoring and load balancers.

    Returns:
        HealthResponse: Health status indicator.
    """
    return HealthResponse(status="healthy")
