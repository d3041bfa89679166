"""Directory router.

Endpoints:
    GET /getLegacyData - Directory minus the caller's approved personal contacts
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from directory_gate.application.queries.directory_queries import ListVisibleContacts
from directory_gate.application.queries.handlers.list_visible_contacts_handler import (
    ListVisibleContactsHandler,
)
from directory_gate.core.container import get_list_visible_contacts_handler
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
from directory_gate.schemas.directory_schemas import DirectoryContactResponse

router = APIRouter(tags=["Directory"])


@router.get(
    "/getLegacyData",
    response_model=list[DirectoryContactResponse],
    responses={
        401: {"description": "Not authenticated", "model": ProblemDetails},
        500: {"description": "Store failure", "model": ProblemDetails},
    },
    summary="Visible directory",
)
async def get_legacy_data(
    request: Request,
    current_user: AuthenticatedUser,
    handler: ListVisibleContactsHandler = Depends(get_list_visible_contacts_handler),
) -> list[DirectoryContactResponse] | JSONResponse:
    """GET /getLegacyData → 200 OK (store order)."""
    result = await handler.handle(ListVisibleContacts(caller=current_user.as_caller()))

    match result:
        case Success(value=contacts):
            return [DirectoryContactResponse.from_dto(contact) for contact in contacts]
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error,
                request=request,
                trace_id=get_trace_id() or "",
            )
