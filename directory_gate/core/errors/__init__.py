"""Core errors package.

Exports all core-level error classes for convenient importing.

Usage:
    from directory_gate.core.errors import DomainError, ValidationError, NotFoundError
"""

from directory_gate.core.errors.common_errors import (
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    StoreError,
    ValidationError,
)
from directory_gate.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "AuthenticationError",
    "AuthorizationError",
    "StoreError",
]
