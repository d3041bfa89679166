"""SQLAlchemy repository adapters."""

from directory_gate.infrastructure.persistence.repositories.call_log_repository import (
    CallLogRepository,
)
from directory_gate.infrastructure.persistence.repositories.directory_repository import (
    DirectoryRepository,
)
from directory_gate.infrastructure.persistence.repositories.personal_request_repository import (
    PersonalRequestRepository,
)
from directory_gate.infrastructure.persistence.repositories.user_repository import (
    UserRepository,
)
from directory_gate.infrastructure.persistence.repositories.version_repository import (
    VersionRepository,
)

__all__ = [
    "CallLogRepository",
    "DirectoryRepository",
    "PersonalRequestRepository",
    "UserRepository",
    "VersionRepository",
]
