"""Fixtures for HTTP tests through the FastAPI application.

Handlers are replaced via ``app.dependency_overrides`` so no database is
needed. Bearer credentials are minted with the real token service.
"""

from collections.abc import Iterator
from typing import Any

import pytest
from fastapi.testclient import TestClient
from uuid_extensions import uuid7

from directory_gate.core.container import get_token_service
from directory_gate.main import app


class StubHandler:
    """Handler double returning a canned Result and recording commands."""

    def __init__(self, result: Any) -> None:
        self.result = result
        self.commands: list[Any] = []

    async def handle(self, command: Any) -> Any:
        self.commands.append(command)
        return self.result


@pytest.fixture
def client() -> Iterator[TestClient]:
    """Test client without lifespan; overrides are cleared after each test."""
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def override():
    """Install a StubHandler for a handler dependency factory."""

    def _override(dependency, result: Any) -> StubHandler:
        stub = StubHandler(result)
        app.dependency_overrides[dependency] = lambda: stub
        return stub

    return _override


@pytest.fixture
def auth_headers() -> dict[str, str]:
    token = get_token_service().generate_access_token(
        user_id=uuid7(), email="alice@example.com", name="Alice Smith"
    )
    return {"Authorization": f"Bearer {token}"}
