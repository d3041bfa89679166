"""Client versions router.

Endpoints:
    GET /version/latest - Latest published client release (public)
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from directory_gate.application.queries.handlers.get_latest_version_handler import (
    GetLatestVersionHandler,
)
from directory_gate.application.queries.version_queries import GetLatestVersion
from directory_gate.core.container import get_get_latest_version_handler
from directory_gate.core.result import Failure, Success
from directory_gate.presentation.routers.api.errors import (
    ErrorResponseBuilder,
    ProblemDetails,
)
from directory_gate.presentation.routers.api.middleware.trace_middleware import (
    get_trace_id,
)
from directory_gate.schemas.version_schemas import LatestVersionResponse

router = APIRouter(prefix="/version", tags=["Versions"])


@router.get(
    "/latest",
    response_model=LatestVersionResponse,
    responses={
        404: {"description": "No version published", "model": ProblemDetails},
        500: {"description": "Store failure", "model": ProblemDetails},
    },
    summary="Latest client version",
)
async def get_latest_version(
    request: Request,
    handler: GetLatestVersionHandler = Depends(get_get_latest_version_handler),
) -> LatestVersionResponse | JSONResponse:
    """GET /version/latest → 200 OK, or 404 when nothing is published."""
    result = await handler.handle(GetLatestVersion())

    match result:
        case Success(value=version):
            return LatestVersionResponse.from_entity(version)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error,
                request=request,
                trace_id=get_trace_id() or "",
            )
