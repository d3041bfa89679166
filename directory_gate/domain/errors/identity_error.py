"""Identity provider error types.

These errors are part of the IdentityProviderProtocol contract. Every one of
them ends the login with the same browser-visible outcome (redirect with a
failure marker); the subtype and ``stage`` exist so the server log records
what actually went wrong.

Architecture:
- Domain layer errors (part of protocol contract)
- Inherit from DomainError (core layer)
- Used in Result types (railway-oriented programming)

Usage:
    from directory_gate.domain.errors import IdentityCodeExchangeError

    return Failure(error=IdentityCodeExchangeError(
        code=ErrorCode.IDENTITY_CODE_EXCHANGE_FAILED,
        message="Zoho rejected the authorization code: invalid_code",
        provider_name="zoho",
    ))
"""

from dataclasses import dataclass

from directory_gate.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class IdentityProviderError(DomainError):
    """Base delegated-authentication failure.

    Attributes:
        code: Domain ErrorCode.
        message: Human-readable message (server-side only).
        provider_name: Identity provider slug ("zoho").
        stage: Login stage that failed (code_exchange, id_token,
            directory_lookup, user_store).
    """

    provider_name: str
    stage: str = "unknown"


@dataclass(frozen=True, slots=True, kw_only=True)
class IdentityAccessDeniedError(IdentityProviderError):
    """The provider redirected back with an error instead of a code."""

    stage: str = "authorization"


@dataclass(frozen=True, slots=True, kw_only=True)
class IdentityCodeExchangeError(IdentityProviderError):
    """Authorization code rejected (invalid, expired or already used).

    Codes are single-use; a rejected code is never retried.
    """

    stage: str = "code_exchange"


@dataclass(frozen=True, slots=True, kw_only=True)
class IdentityTokenError(IdentityProviderError):
    """Identity token failed verification or carries no usable email claim."""

    stage: str = "id_token"


@dataclass(frozen=True, slots=True, kw_only=True)
class IdentityEmployeeLookupError(IdentityProviderError):
    """Employee directory returned zero or ambiguous matches for the email."""

    stage: str = "directory_lookup"
    match_count: int = 0


@dataclass(frozen=True, slots=True, kw_only=True)
class IdentityProviderUnavailableError(IdentityProviderError):
    """Provider unreachable, timed out, or returned a server error."""

    status_code: int | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class IdentityInvalidResponseError(IdentityProviderError):
    """Provider returned a body that does not match the expected shape.

    Attributes:
        response_body: Truncated raw body for debugging.
    """

    response_body: str | None = None
