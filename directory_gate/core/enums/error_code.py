"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Validation errors (INVALID_*, VALIDATION_*)
- Resource errors (*_NOT_FOUND)
- Authentication errors (TOKEN_*, AUTHENTICATION_FAILED)
- Authorization errors (PERMISSION_DENIED)
- Identity provider errors (IDENTITY_*)
- Persistence errors (STORE_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Validation errors
    VALIDATION_FAILED = "validation_failed"
    INVALID_REQUEST_STATUS = "invalid_request_status"
    INVALID_CALL_TIMESTAMP = "invalid_call_timestamp"

    # Resource errors
    REQUEST_NOT_FOUND = "request_not_found"
    VERSION_NOT_FOUND = "version_not_found"
    RESOURCE_NOT_FOUND = "resource_not_found"

    # Authentication errors
    TOKEN_INVALID = "token_invalid"
    AUTHENTICATION_FAILED = "authentication_failed"

    # Authorization errors
    PERMISSION_DENIED = "permission_denied"

    # Identity provider errors
    IDENTITY_CODE_EXCHANGE_FAILED = "identity_code_exchange_failed"
    IDENTITY_TOKEN_INVALID = "identity_token_invalid"
    IDENTITY_EMPLOYEE_NOT_FOUND = "identity_employee_not_found"
    IDENTITY_EMPLOYEE_AMBIGUOUS = "identity_employee_ambiguous"
    IDENTITY_PROVIDER_UNAVAILABLE = "identity_provider_unavailable"
    IDENTITY_INVALID_RESPONSE = "identity_invalid_response"
    IDENTITY_ACCESS_DENIED = "identity_access_denied"

    # Persistence errors
    STORE_OPERATION_FAILED = "store_operation_failed"
