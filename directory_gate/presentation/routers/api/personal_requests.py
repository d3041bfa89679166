"""Personal requests router.

Endpoints:
    POST /requestAsPersonal    - Submit a request (201)
    GET  /getPendingRequests   - List pending requests, newest first
    PUT  /updateRequestStatus  - Approve, reject or reopen a request
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from directory_gate.application.commands.handlers.submit_personal_request_handler import (
    SubmitPersonalRequestHandler,
)
from directory_gate.application.commands.handlers.update_request_status_handler import (
    UpdateRequestStatusHandler,
)
from directory_gate.application.commands.request_commands import (
    SubmitPersonalRequest,
    UpdateRequestStatus,
)
from directory_gate.application.queries.handlers.list_pending_requests_handler import (
    ListPendingRequestsHandler,
)
from directory_gate.application.queries.request_queries import ListPendingRequests
from directory_gate.core.container import (
    get_list_pending_requests_handler,
    get_submit_personal_request_handler,
    get_update_request_status_handler,
)
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
from directory_gate.schemas.request_schemas import (
    PersonalRequestCreateRequest,
    PersonalRequestCreateResponse,
    PersonalRequestResponse,
    RequestStatusUpdateRequest,
    RequestStatusUpdateResponse,
)

router = APIRouter(tags=["Personal Requests"])


@router.post(
    "/requestAsPersonal",
    status_code=status.HTTP_201_CREATED,
    response_model=PersonalRequestCreateResponse,
    responses={
        400: {"description": "Missing or blank fields", "model": ProblemDetails},
        401: {"description": "Not authenticated", "model": ProblemDetails},
        500: {"description": "Store failure", "model": ProblemDetails},
    },
    summary="Submit personal request",
)
async def submit_personal_request(
    request: Request,
    data: PersonalRequestCreateRequest,
    current_user: AuthenticatedUser,
    handler: SubmitPersonalRequestHandler = Depends(
        get_submit_personal_request_handler
    ),
) -> PersonalRequestCreateResponse | JSONResponse:
    """Ask for a directory contact to be hidden from the requester.

    POST /requestAsPersonal → 201 Created
    """
    command = SubmitPersonalRequest(
        caller=current_user.as_caller(),
        requested_contact=data.requested_contact,
        requested_by=data.requested_by,
        reason=data.reason,
    )
    result = await handler.handle(command)

    match result:
        case Success(value=request_id):
            return PersonalRequestCreateResponse(id=request_id)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error,
                request=request,
                trace_id=get_trace_id() or "",
            )


@router.get(
    "/getPendingRequests",
    response_model=list[PersonalRequestResponse],
    responses={
        401: {"description": "Not authenticated", "model": ProblemDetails},
        500: {"description": "Store failure", "model": ProblemDetails},
    },
    summary="List pending requests",
)
async def list_pending_requests(
    request: Request,
    current_user: AuthenticatedUser,
    handler: ListPendingRequestsHandler = Depends(get_list_pending_requests_handler),
) -> list[PersonalRequestResponse] | JSONResponse:
    """List every pending request, newest first.

    GET /getPendingRequests → 200 OK
    """
    result = await handler.handle(ListPendingRequests(caller=current_user.as_caller()))

    match result:
        case Success(value=pending):
            return [PersonalRequestResponse.from_entity(item) for item in pending]
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error,
                request=request,
                trace_id=get_trace_id() or "",
            )


@router.put(
    "/updateRequestStatus",
    response_model=RequestStatusUpdateResponse,
    responses={
        400: {"description": "Invalid status or missing fields", "model": ProblemDetails},
        401: {"description": "Not authenticated", "model": ProblemDetails},
        403: {"description": "Not allowed to decide", "model": ProblemDetails},
        404: {"description": "Request not found", "model": ProblemDetails},
        500: {"description": "Store failure", "model": ProblemDetails},
    },
    summary="Update request status",
)
async def update_request_status(
    request: Request,
    data: RequestStatusUpdateRequest,
    current_user: AuthenticatedUser,
    handler: UpdateRequestStatusHandler = Depends(get_update_request_status_handler),
) -> RequestStatusUpdateResponse | JSONResponse:
    """Move a request to pending, approved or rejected.

    PUT /updateRequestStatus → 200 OK

    Args:
        request: FastAPI request object.
        data: Request ID and new status (case-insensitive).
        current_user: Authenticated caller.
        handler: UpdateRequestStatus handler (injected).

    Returns:
        RequestStatusUpdateResponse with the updated record.
        JSONResponse with Problem Details on failure (400/403/404/500).
    """
    command = UpdateRequestStatus(
        caller=current_user.as_caller(),
        request_id=data.request_id,
        status=data.status,
    )
    result = await handler.handle(command)

    match result:
        case Success(value=updated):
            return RequestStatusUpdateResponse(
                message=f"Request marked as {updated.status.value}",
                data=PersonalRequestResponse.from_entity(updated),
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error,
                request=request,
                trace_id=get_trace_id() or "",
            )
