"""Delegated login router (Zoho).

Flow:
    1. Frontend calls GET /auth/zoho?redirect=<return url>
       → Backend answers with the Zoho authorization URL (signed state)
    2. User authorizes at Zoho → Zoho redirects to GET /auth/zoho/callback
    3. Callback exchanges the code, resolves the employee, mints a bearer
       credential and redirects (302) to the return URL with ``token=<jwt>``

Any failure in step 3 redirects to the return URL with ``login=failed``.
The cause is logged server-side only.
"""

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import JSONResponse, RedirectResponse

from directory_gate.application.commands.handlers.begin_authorization_handler import (
    BeginAuthorizationHandler,
)
from directory_gate.application.commands.handlers.complete_authorization_handler import (
    CompleteAuthorizationHandler,
)
from directory_gate.application.commands.identity_commands import (
    BeginAuthorization,
    CompleteAuthorization,
)
from directory_gate.application.services.redirect_urls import with_query_param
from directory_gate.core.container import (
    get_begin_authorization_handler,
    get_complete_authorization_handler,
)
from directory_gate.core.result import Failure, Success
from directory_gate.presentation.routers.api.errors import ErrorResponseBuilder
from directory_gate.presentation.routers.api.middleware.trace_middleware import (
    get_trace_id,
)
from directory_gate.schemas.auth_schemas import AuthorizationUrlResponse

TOKEN_PARAM = "token"
FAILURE_PARAM = "login"
FAILURE_VALUE = "failed"

auth_router = APIRouter(prefix="/auth/zoho", tags=["Authentication"])


@auth_router.get(
    "",
    response_model=AuthorizationUrlResponse,
    summary="Begin Zoho login",
    description="Build the Zoho authorization URL for the frontend to open.",
)
async def begin_zoho_login(
    request: Request,
    redirect: str | None = Query(
        default=None,
        description="Frontend URL to return to after login",
    ),
    handler: BeginAuthorizationHandler = Depends(get_begin_authorization_handler),
) -> AuthorizationUrlResponse | JSONResponse:
    """Start a delegated login.

    GET /auth/zoho?redirect=... → 200 OK
    """
    result = await handler.handle(BeginAuthorization(return_url=redirect))

    match result:
        case Success(value=auth_url):
            return AuthorizationUrlResponse(auth_url=auth_url)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error,
                request=request,
                trace_id=get_trace_id() or "",
            )


@auth_router.get(
    "/callback",
    status_code=status.HTTP_302_FOUND,
    response_class=RedirectResponse,
    summary="Zoho login callback",
    description="Complete the login and redirect back to the frontend.",
)
async def zoho_callback(
    code: str | None = Query(default=None),
    state: str | None = Query(default=None),
    error: str | None = Query(default=None),
    handler: CompleteAuthorizationHandler = Depends(
        get_complete_authorization_handler
    ),
) -> RedirectResponse:
    """Handle the Zoho redirect.

    GET /auth/zoho/callback?code=...&state=... → 302 Found

    Args:
        code: Authorization code.
        state: Signed state issued by begin_zoho_login.
        error: Provider error (user denied consent, etc.).
        handler: CompleteAuthorization handler (injected).

    Returns:
        RedirectResponse to the return URL carrying either the bearer
        credential or the failure marker.
    """
    result = await handler.handle(
        CompleteAuthorization(code=code, state=state, provider_error=error)
    )

    match result:
        case Success(value=completed):
            location = with_query_param(
                completed.return_url, TOKEN_PARAM, completed.access_token
            )
        case Failure(error=failed):
            location = with_query_param(failed.return_url, FAILURE_PARAM, FAILURE_VALUE)

    return RedirectResponse(url=location, status_code=status.HTTP_302_FOUND)
