"""Trace middleware to inject a trace_id per request.

- Honors an inbound X-Trace-Id header, otherwise generates one
- Adds X-Trace-Id response header
- Binds trace_id into structlog context variables for every log line
- Exposes get_trace_id() for error responses
"""

from __future__ import annotations

from contextvars import ContextVar
from typing import Awaitable, Callable

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from uuid_extensions import uuid7

TRACE_HEADER = "X-Trace-Id"

trace_id_context: ContextVar[str | None] = ContextVar("trace_id", default=None)


def get_trace_id() -> str | None:
    """Return the current trace ID, or None outside a request."""
    return trace_id_context.get()


class TraceMiddleware(BaseHTTPMiddleware):
    """Starlette middleware that injects a trace ID into each request context."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        trace_id = request.headers.get(TRACE_HEADER) or str(uuid7())
        token = trace_id_context.set(trace_id)
        request.state.trace_id = trace_id
        structlog.contextvars.bind_contextvars(trace_id=trace_id)
        try:
            response = await call_next(request)
            response.headers[TRACE_HEADER] = trace_id
            return response
        finally:
            structlog.contextvars.unbind_contextvars("trace_id")
            trace_id_context.reset(token)
