"""Call logs router.

Endpoints:
    POST /uploadCallLog - Store one call log (201)
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from directory_gate.application.commands.call_log_commands import UploadCallLog
from directory_gate.application.commands.handlers.upload_call_log_handler import (
    UploadCallLogHandler,
)
from directory_gate.core.container import get_upload_call_log_handler
from directory_gate.core.result import Failure, Success
from directory_gate.presentation.routers.api.errors import (
    ErrorResponseBuilder,
    ProblemDetails,
)
from directory_gate.presentation.routers.api.middleware.auth_dependencies import (
    AuthenticatedUser,
)
from directory_gate.presentation.routers.api.middleware.trace_middleware import (
    get_trace_id,
)
from directory_gate.schemas.call_log_schemas import (
    CallLogCreateRequest,
    CallLogCreateResponse,
)

router = APIRouter(tags=["Call Logs"])


@router.post(
    "/uploadCallLog",
    status_code=status.HTTP_201_CREATED,
    response_model=CallLogCreateResponse,
    responses={
        400: {"description": "Missing fields or bad timestamp", "model": ProblemDetails},
        401: {"description": "Not authenticated", "model": ProblemDetails},
        500: {"description": "Store failure", "model": ProblemDetails},
    },
    summary="Upload call log",
)
async def upload_call_log(
    request: Request,
    data: CallLogCreateRequest,
    current_user: AuthenticatedUser,
    handler: UploadCallLogHandler = Depends(get_upload_call_log_handler),
) -> CallLogCreateResponse | JSONResponse:
    """Record a call made or received by the authenticated agent.

    POST /uploadCallLog → 201 Created

    The uploader is always the credential's display name, never a body field.
    """
    command = UploadCallLog(
        caller_name=data.caller_name,
        call_type=data.type,
        timestamp_ms=data.timestamp,
        uploaded_by=current_user.name,
        rship_manager_name=data.rship_manager_name,
        duration_seconds=data.duration,
    )
    result = await handler.handle(command)

    match result:
        case Success(value=call_log_id):
            return CallLogCreateResponse(id=call_log_id)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error,
                request=request,
                trace_id=get_trace_id() or "",
            )
