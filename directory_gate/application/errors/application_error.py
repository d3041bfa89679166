"""Application layer error types.

Handlers return ``Result[T, ApplicationError]``. An ApplicationError wraps
the domain error that caused it and carries the application-level code the
presentation layer maps to an HTTP status.

Exports:
    ApplicationErrorCode: Application-level error code enum
    ApplicationError: Application layer error dataclass
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from directory_gate.core.errors import (
    AuthenticationError,
    AuthorizationError,
    DomainError,
    NotFoundError,
    StoreError,
    ValidationError,
)


class ApplicationErrorCode(Enum):
    """Application-level error codes."""

    COMMAND_VALIDATION_FAILED = "command_validation_failed"
    COMMAND_EXECUTION_FAILED = "command_execution_failed"
    QUERY_FAILED = "query_failed"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    EXTERNAL_SERVICE_ERROR = "external_service_error"


_DOMAIN_ERROR_CODES: list[tuple[type[DomainError], ApplicationErrorCode]] = [
    (ValidationError, ApplicationErrorCode.COMMAND_VALIDATION_FAILED),
    (NotFoundError, ApplicationErrorCode.NOT_FOUND),
    (AuthenticationError, ApplicationErrorCode.UNAUTHORIZED),
    (AuthorizationError, ApplicationErrorCode.FORBIDDEN),
    (StoreError, ApplicationErrorCode.COMMAND_EXECUTION_FAILED),
]


@dataclass(frozen=True, slots=True, kw_only=True)
class ApplicationError:
    """Application layer error.

    Attributes:
        code: Application error code.
        message: Human-readable message (becomes the Problem Details ``detail``).
        domain_error: Original domain error, if any.
        details: Additional context.

    Examples:
        >>> error = ApplicationError.from_domain_error(
        ...     NotFoundError(
        ...         code=ErrorCode.REQUEST_NOT_FOUND,
        ...         message="Request not found",
        ...         resource_type="PersonalRequest",
        ...         resource_id="42",
        ...     )
        ... )
        >>> error.code
        <ApplicationErrorCode.NOT_FOUND: 'not_found'>
    """

    code: ApplicationErrorCode
    message: str
    domain_error: DomainError | None = None
    details: dict[str, Any] | None = None

    @classmethod
    def from_domain_error(
        cls,
        error: DomainError,
        code: ApplicationErrorCode | None = None,
    ) -> "ApplicationError":
        """Wrap a domain error, deriving the application code from its type.

        Store failures keep their underlying cause in the message.
        """
        if code is None:
            code = next(
                (
                    app_code
                    for error_type, app_code in _DOMAIN_ERROR_CODES
                    if isinstance(error, error_type)
                ),
                ApplicationErrorCode.COMMAND_EXECUTION_FAILED,
            )

        message = error.message
        if isinstance(error, StoreError) and error.cause:
            message = f"{error.message}: {error.cause}"

        return cls(
            code=code,
            message=message,
            domain_error=error,
            details=error.details,
        )
