"""Application services."""

from directory_gate.application.services.redirect_urls import (
    is_allowed_return_url,
    resolve_return_url,
    with_query_param,
)
from directory_gate.application.services.request_access_policy import (
    PermissiveRequestAccessPolicy,
    RequestAccessPolicy,
)

__all__ = [
    "PermissiveRequestAccessPolicy",
    "RequestAccessPolicy",
    "is_allowed_return_url",
    "resolve_return_url",
    "with_query_param",
]
