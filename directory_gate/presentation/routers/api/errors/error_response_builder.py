"""Build RFC 9457 Problem Details responses from ApplicationError.

Exports:
    ErrorResponseBuilder: Utility class for building RFC 9457 responses
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from directory_gate.application.errors import ApplicationError, ApplicationErrorCode
from directory_gate.core.config import settings
from directory_gate.core.errors import ValidationError
from directory_gate.presentation.routers.api.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

_STATUS_CODES: dict[ApplicationErrorCode, int] = {
    ApplicationErrorCode.COMMAND_VALIDATION_FAILED: status.HTTP_400_BAD_REQUEST,
    ApplicationErrorCode.COMMAND_EXECUTION_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ApplicationErrorCode.QUERY_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ApplicationErrorCode.EXTERNAL_SERVICE_ERROR: status.HTTP_502_BAD_GATEWAY,
    ApplicationErrorCode.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ApplicationErrorCode.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ApplicationErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
}

_TITLES: dict[ApplicationErrorCode, str] = {
    ApplicationErrorCode.COMMAND_VALIDATION_FAILED: "Validation Failed",
    ApplicationErrorCode.COMMAND_EXECUTION_FAILED: "Command Execution Failed",
    ApplicationErrorCode.QUERY_FAILED: "Query Failed",
    ApplicationErrorCode.EXTERNAL_SERVICE_ERROR: "External Service Error",
    ApplicationErrorCode.UNAUTHORIZED: "Authentication Required",
    ApplicationErrorCode.FORBIDDEN: "Access Denied",
    ApplicationErrorCode.NOT_FOUND: "Resource Not Found",
}


class ErrorResponseBuilder:
    """Build RFC 9457 Problem Details error responses.

    Example:
        >>> response = ErrorResponseBuilder.from_application_error(
        ...     error=result.error,
        ...     request=request,
        ...     trace_id=get_trace_id() or "",
        ... )
    """

    @staticmethod
    def from_application_error(
        error: ApplicationError,
        request: Request,
        trace_id: str,
    ) -> JSONResponse:
        """Convert ApplicationError to an RFC 9457 JSON response.

        Args:
            error: Application layer error.
            request: Request (for the instance path).
            trace_id: Request trace ID.

        Returns:
            JSONResponse with ProblemDetails content.
        """
        status_code = ErrorResponseBuilder.get_status_code(error.code)

        problem = ProblemDetails(
            type=f"{settings.api_base_url}/errors/{error.code.value}",
            title=_TITLES.get(error.code, "Internal Server Error"),
            status=status_code,
            detail=error.message,
            instance=str(request.url.path),
            errors=None,
            trace_id=trace_id or None,
        )

        if isinstance(error.domain_error, ValidationError):
            problem.errors = [
                ErrorDetail(
                    field=error.domain_error.field or "unknown",
                    code=error.domain_error.code.value,
                    message=error.domain_error.message,
                )
            ]

        return JSONResponse(
            status_code=status_code,
            content=problem.model_dump(exclude_none=True),
        )

    @staticmethod
    def get_status_code(code: ApplicationErrorCode) -> int:
        """Map application error code to HTTP status code.

        Example:
            >>> ErrorResponseBuilder.get_status_code(ApplicationErrorCode.NOT_FOUND)
            404
        """
        return _STATUS_CODES.get(code, status.HTTP_500_INTERNAL_SERVER_ERROR)
