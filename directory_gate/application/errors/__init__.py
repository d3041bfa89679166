"""Application layer errors."""

from directory_gate.application.errors.application_error import (
    ApplicationError,
    ApplicationErrorCode,
)

__all__ = ["ApplicationError", "ApplicationErrorCode"]
