"""Database models for the persistence layer.

Models Organization:
    - user.py: Staff users (created on first login)
    - personal_request.py: Personal-contact requests
    - call_log.py: Uploaded call logs
    - app_version.py: Published client releases
    - legacy_directory.py: Pre-existing shared directory table (read-only)

Note:
    Domain entities (dataclasses) live in directory_gate/domain/entities/.
    They are separate from these models and mapped via the repository layer.
"""

from directory_gate.infrastructure.persistence.models.app_version import AppVersion
from directory_gate.infrastructure.persistence.models.call_log import CallLog
from directory_gate.infrastructure.persistence.models.legacy_directory import (
    mint_db,
)
from directory_gate.infrastructure.persistence.models.personal_request import (
    PersonalRequest,
)
from directory_gate.infrastructure.persistence.models.user import User

__all__ = [
    "AppVersion",
    "CallLog",
    "PersonalRequest",
    "User",
    "mint_db",
]
