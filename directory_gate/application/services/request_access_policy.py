"""Access policy for the personal request workflow.

Listing pending requests and deciding on them are gated by one predicate
each. The shipped policy allows every authenticated caller; a stricter
policy (e.g. an admin list) can be injected through the container without
touching the handlers.

Usage:
    policy: RequestAccessPolicy = get_request_access_policy()
    if not policy.can_update_status(caller, request_id):
        return Failure(error=...)
"""

from typing import Protocol
from uuid import UUID

from directory_gate.domain.value_objects import AuthenticatedCaller


class RequestAccessPolicy(Protocol):
    """Per-operation authorization predicates."""

    def can_list_pending(self, caller: AuthenticatedCaller) -> bool:
        """Whether the caller may see all pending requests."""
        ...

    def can_update_status(self, caller: AuthenticatedCaller, request_id: UUID) -> bool:
        """Whether the caller may approve or reject the request."""
        ...


class PermissiveRequestAccessPolicy:
    """Any authenticated caller may list and decide on requests."""

    def can_list_pending(self, caller: AuthenticatedCaller) -> bool:
        return True

    def can_update_status(self, caller: AuthenticatedCaller, request_id: UUID) -> bool:
        return True
