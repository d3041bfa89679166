"""Domain entities package."""

from directory_gate.domain.entities.call_log import CallLog
from directory_gate.domain.entities.directory_contact import DirectoryContact
from directory_gate.domain.entities.personal_request import PersonalRequest
from directory_gate.domain.entities.user import User
from directory_gate.domain.entities.version_info import VersionInfo

__all__ = [
    "CallLog",
    "DirectoryContact",
    "PersonalRequest",
    "User",
    "VersionInfo",
]
