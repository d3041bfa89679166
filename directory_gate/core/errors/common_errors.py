"""Common error classes used across all domains and layers.

Error Types:
- ValidationError: Caller-supplied field missing or malformed
- NotFoundError: Referenced record absent
- AuthenticationError: Credential missing or invalid
- AuthorizationError: Caller not allowed to perform the operation
- StoreError: Persistence-layer failure

Usage:
    from directory_gate.core.errors import ValidationError
    from directory_gate.core.enums import ErrorCode
    from directory_gate.core.result import Failure

    return Failure(error=ValidationError(
        code=ErrorCode.INVALID_REQUEST_STATUS,
        message="Invalid status value",
        field="status",
    ))
"""

from dataclasses import dataclass

from directory_gate.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        field: Field name that failed validation.
        details: Additional context.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        resource_type: Type of resource (PersonalRequest, VersionInfo, ...).
        resource_id: ID of the resource that was not found.
        details: Additional context.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationError(DomainError):
    """Authentication failure (missing, invalid or expired credential)."""

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthorizationError(DomainError):
    """Authorization failure (no permission).

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        required_permission: Permission that was required.
        details: Additional context.
    """

    required_permission: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class StoreError(DomainError):
    """Persistence-layer failure.

    Surfaced to clients as a generic server error. The underlying cause is
    kept in ``cause`` for logging and for the response detail.

    Attributes:
        code: ErrorCode enum (typically STORE_OPERATION_FAILED).
        message: Human-readable message.
        cause: String form of the underlying exception.
    """

    cause: str | None = None
