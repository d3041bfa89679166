"""Commands (CQRS write operations)."""

from directory_gate.application.commands.call_log_commands import UploadCallLog
from directory_gate.application.commands.identity_commands import (
    BeginAuthorization,
    CompleteAuthorization,
)
from directory_gate.application.commands.request_commands import (
    SubmitPersonalRequest,
    UpdateRequestStatus,
)

__all__ = [
    "BeginAuthorization",
    "CompleteAuthorization",
    "SubmitPersonalRequest",
    "UpdateRequestStatus",
    "UploadCallLog",
]
