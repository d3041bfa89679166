"""LoggerProtocol definition for structured logging.

Implementations MUST keep logs structured (message + key-value context) and
MUST NOT log bearer credentials, authorization codes or provider tokens.

Usage:
    from directory_gate.core.container import get_logger

    logger: LoggerProtocol = get_logger()
    logger.info("personal_request_submitted", request_id=str(request_id))

    request_logger = logger.bind(trace_id=trace_id)
    request_logger.info("directory_read")  # trace_id auto-included
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters."""

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message."""
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Event name or short message.
            error: Optional exception; adapters add error_type and error_message.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return a new logger with permanently bound context."""
        ...

    def with_context(self, **context: Any) -> LoggerProtocol:
        """Alias of bind() for call-site readability."""
        ...
