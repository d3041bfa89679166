"""Global exception handlers for the FastAPI application.

Handlers:
    http_exception_handler: HTTPException → RFC 9457
    validation_exception_handler: RequestValidationError → RFC 9457 (400)
    generic_exception_handler: Anything unhandled → RFC 9457 (500), logged

Exports:
    register_exception_handlers: Register all exception handlers with FastAPI app
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from directory_gate.core.config import settings
from directory_gate.core.container import get_logger
from directory_gate.presentation.routers.api.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)
from directory_gate.presentation.routers.api.middleware.trace_middleware import (
    get_trace_id,
)

# HTTP status code to (title, slug) mapping
_HTTP_STATUS_INFO: dict[int, tuple[str, str]] = {
    400: ("Bad Request", "bad-request"),
    401: ("Authentication Required", "unauthorized"),
    403: ("Access Denied", "forbidden"),
    404: ("Resource Not Found", "not-found"),
    405: ("Method Not Allowed", "method-not-allowed"),
    415: ("Unsupported Media Type", "unsupported-media-type"),
    500: ("Internal Server Error", "internal-server-error"),
    502: ("Bad Gateway", "bad-gateway"),
    503: ("Service Unavailable", "service-unavailable"),
}


def _status_info(status_code: int) -> tuple[str, str]:
    return _HTTP_STATUS_INFO.get(status_code, ("Error", "error"))


def _trace_id(request: Request) -> str | None:
    return get_trace_id() or getattr(request.state, "trace_id", None)


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Convert HTTPException to RFC 9457 Problem Details response.

    Headers on the exception (e.g. WWW-Authenticate) are preserved.
    """
    assert isinstance(exc, StarletteHTTPException)

    title, slug = _status_info(exc.status_code)
    problem = ProblemDetails(
        type=f"{settings.api_base_url}/errors/{slug}",
        title=title,
        status=exc.status_code,
        detail=exc.detail if isinstance(exc.detail, str) else str(exc.detail),
        instance=str(request.url.path),
        errors=None,
        trace_id=_trace_id(request),
    )

    return JSONResponse(
        status_code=exc.status_code,
        content=problem.model_dump(exclude_none=True),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """Convert RequestValidationError to a 400 Problem Details response.

    Missing or blank fields are client errors reported with per-field
    ``errors`` (field names as the client sent them).
    """
    assert isinstance(exc, RequestValidationError)

    field_errors: list[ErrorDetail] = []
    for error in exc.errors():
        loc = error.get("loc", [])
        field_parts = [str(p) for p in loc if p not in ("body", "query")]
        field_errors.append(
            ErrorDetail(
                field=".".join(field_parts) if field_parts else "unknown",
                code=error.get("type", "validation_error"),
                message=error.get("msg", "Validation failed"),
            )
        )

    problem = ProblemDetails(
        type=f"{settings.api_base_url}/errors/validation-failed",
        title="Validation Failed",
        status=status.HTTP_400_BAD_REQUEST,
        detail="Request validation failed. Check 'errors' for details.",
        instance=str(request.url.path),
        errors=field_errors or None,
        trace_id=_trace_id(request),
    )

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=problem.model_dump(exclude_none=True),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log an unhandled exception and return a generic 500.

    No internal detail reaches the client; the trace ID links the response
    to the log line.
    """
    trace_id = _trace_id(request)

    get_logger().error(
        "unhandled_exception",
        error=exc,
        trace_id=trace_id,
        request_path=request.url.path,
        request_method=request.method,
    )

    problem = ProblemDetails(
        type=f"{settings.api_base_url}/errors/internal-server-error",
        title="Internal Server Error",
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An unexpected error occurred. Please contact support with the trace ID.",
        instance=str(request.url.path),
        errors=None,
        trace_id=trace_id,
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=problem.model_dump(exclude_none=True),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI application."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
