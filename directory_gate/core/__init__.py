"""Core shared kernel.

This module provides foundational utilities used across all architectural layers:
- Result types for railway-oriented programming
- Base error classes for domain-level error handling

The core module has NO dependencies on other application layers.
"""

from directory_gate.core.errors import (
    AuthenticationError,
    AuthorizationError,
    DomainError,
    NotFoundError,
    StoreError,
    ValidationError,
)
from directory_gate.core.enums import ErrorCode
from directory_gate.core.result import Failure, Result, Success

__all__ = [
    "AuthenticationError",
    "AuthorizationError",
    "DomainError",
    "ErrorCode",
    "Failure",
    "NotFoundError",
    "Result",
    "StoreError",
    "Success",
    "ValidationError",
]
