"""Domain errors package.

Usage:
    from directory_gate.domain.errors import IdentityProviderError
"""

from directory_gate.domain.errors.identity_error import (
    IdentityAccessDeniedError,
    IdentityCodeExchangeError,
    IdentityEmployeeLookupError,
    IdentityInvalidResponseError,
    IdentityProviderError,
    IdentityProviderUnavailableError,
    IdentityTokenError,
)

__all__ = [
    "IdentityProviderError",
    "IdentityAccessDeniedError",
    "IdentityCodeExchangeError",
    "IdentityEmployeeLookupError",
    "IdentityInvalidResponseError",
    "IdentityProviderUnavailableError",
    "IdentityTokenError",
]
