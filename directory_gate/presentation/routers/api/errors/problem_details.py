"""RFC 9457 Problem Details for HTTP APIs.

Exports:
    ErrorDetail: Individual field-specific error
    ProblemDetails: RFC 9457 compliant error response schema
"""

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Individual field-specific error.

    Examples:
        >>> error = ErrorDetail(
        ...     field="requestedContact",
        ...     code="missing",
        ...     message="Field required",
        ... )
    """

    field: str = Field(..., description="Field name")
    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")


class ProblemDetails(BaseModel):
    """RFC 9457 Problem Details error body.

    Attributes:
        type: URI reference identifying the problem type
        title: Short, human-readable summary of the problem type
        status: HTTP status code for this occurrence
        detail: Human-readable explanation specific to this occurrence
        instance: Request path of this occurrence
        errors: Field-specific errors (validation failures only)
        trace_id: Request trace ID
    """

    type: str = Field(
        ...,
        description="URI reference identifying the problem type",
        examples=["http://localhost:8000/errors/not_found"],
    )
    title: str = Field(..., description="Short, human-readable summary")
    status: int = Field(..., description="HTTP status code", examples=[404])
    detail: str = Field(
        ...,
        description="Human-readable explanation",
        examples=["Request not found"],
    )
    instance: str = Field(
        ...,
        description="Request path",
        examples=["/updateRequestStatus"],
    )
    errors: list[ErrorDetail] | None = Field(
        None,
        description="List of field-specific errors",
    )
    trace_id: str | None = Field(None, description="Request trace ID")
