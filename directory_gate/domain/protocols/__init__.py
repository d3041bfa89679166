"""Domain protocols (ports) package.

Protocol definitions the application layer depends on. Infrastructure
adapters implement these protocols without inheritance.

IMPORTANT: Re-exports are ONLY for protocols defined in this package.

Usage:
    from directory_gate.domain.protocols import PersonalRequestRepository
    from directory_gate.domain.protocols import TokenGenerationProtocol
"""

# Service protocols
from directory_gate.domain.protocols.identity_provider_protocol import (
    EmployeeRecord,
    IdentityProviderProtocol,
    IdentityTokens,
    IdTokenVerifierProtocol,
)
from directory_gate.domain.protocols.logger_protocol import LoggerProtocol
from directory_gate.domain.protocols.state_token_protocol import StateTokenProtocol
from directory_gate.domain.protocols.token_generation_protocol import (
    TokenGenerationProtocol,
)

# Repository protocols
from directory_gate.domain.protocols.call_log_repository import CallLogRepository
from directory_gate.domain.protocols.directory_repository import DirectoryRepository
from directory_gate.domain.protocols.personal_request_repository import (
    PersonalRequestRepository,
)
from directory_gate.domain.protocols.user_repository import UserRepository
from directory_gate.domain.protocols.version_repository import VersionRepository

__all__ = [
    # Service protocols
    "EmployeeRecord",
    "IdentityProviderProtocol",
    "IdentityTokens",
    "IdTokenVerifierProtocol",
    "LoggerProtocol",
    "StateTokenProtocol",
    "TokenGenerationProtocol",
    # Repository protocols
    "CallLogRepository",
    "DirectoryRepository",
    "PersonalRequestRepository",
    "UserRepository",
    "VersionRepository",
]
