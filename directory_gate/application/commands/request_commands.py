"""Personal request commands (CQRS write operations).

All commands are immutable (frozen=True) and keyword-only (kw_only=True).
Field presence and non-blank values are enforced by the request schemas
before a command is built.
"""

from dataclasses import dataclass

from directory_gate.domain.value_objects import AuthenticatedCaller


@dataclass(frozen=True, kw_only=True)
class SubmitPersonalRequest:
    """Ask for a directory contact to be treated as personal.

    State Transition: (none) → PENDING

    Attributes:
        caller: Authenticated caller submitting the request.
        requested_contact: Directory contact name.
        requested_by: Requester display name as sent by the client.
        reason: Justification.

    Example:
        >>> command = SubmitPersonalRequest(
        ...     caller=caller,
        ...     requested_contact="Jane Doe",
        ...     requested_by="Alice Smith",
        ...     reason="Family member",
        ... )
        >>> result = await handler.handle(command)
    """

    caller: AuthenticatedCaller
    requested_contact: str
    requested_by: str
    reason: str


@dataclass(frozen=True, kw_only=True)
class UpdateRequestStatus:
    """Approve, reject or reopen a personal request.

    State Transition: any → any of PENDING, APPROVED, REJECTED

    Attributes:
        caller: Authenticated caller deciding on the request.
        request_id: Raw request ID (malformed IDs are reported as not found).
        status: Raw status string (matched case-insensitively).
    """

    caller: AuthenticatedCaller
    request_id: str
    status: str
