"""Pytest configuration.

Settings are read from the environment when ``directory_gate.core.config``
is first imported, so test defaults are set here before anything from the
package is imported.
"""

import os

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key-0123456789abcdefghijklmnop")
os.environ.setdefault("DEFAULT_FRONTEND_URL", "https://app.example.com")
os.environ.setdefault("ZOHO_CLIENT_ID", "test-client-id")
os.environ.setdefault("ZOHO_CLIENT_SECRET", "test-client-secret")
os.environ.setdefault("ZOHO_REDIRECT_URI", "https://api.example.com/auth/zoho/callback")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from datetime import UTC, datetime  # noqa: E402
from unittest.mock import Mock  # noqa: E402
from uuid import UUID  # noqa: E402

import pytest  # noqa: E402
from uuid_extensions import uuid7  # noqa: E402

from directory_gate.domain.entities.personal_request import PersonalRequest  # noqa: E402
from directory_gate.domain.enums import RequestStatus  # noqa: E402
from directory_gate.domain.value_objects import AuthenticatedCaller  # noqa: E402


# =============================================================================
# Test helper functions for domain objects
# =============================================================================


def create_caller(
    name: str = "Alice Smith",
    email: str = "alice@example.com",
    user_id: UUID | None = None,
) -> AuthenticatedCaller:
    """Helper to create an AuthenticatedCaller for testing."""
    return AuthenticatedCaller(user_id=user_id or uuid7(), email=email, name=name)


def create_personal_request(
    requested_contact: str = "Jane Doe",
    requested_by: str = "Alice Smith",
    reason: str = "Family member",
    status: RequestStatus = RequestStatus.PENDING,
    created_at: datetime | None = None,
) -> PersonalRequest:
    """Helper to create a PersonalRequest entity for testing."""
    now = created_at or datetime.now(UTC)
    return PersonalRequest(
        id=uuid7(),
        requested_contact=requested_contact,
        requested_by=requested_by,
        reason=reason,
        status=status,
        created_at=now,
        updated_at=now,
    )


@pytest.fixture
def mock_logger() -> Mock:
    """Logger double satisfying LoggerProtocol."""
    return Mock()
