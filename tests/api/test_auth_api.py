"""API tests for the Zoho login endpoints.

Tests cover:
- GET /auth/zoho returns the authorization URL with a signed state
- Callback success redirects with ``token=<jwt>``
- Callback failure redirects with ``login=failed`` and no detail
"""

from datetime import UTC, datetime
from urllib.parse import parse_qs, urlparse

import pytest
from uuid_extensions import uuid7

from directory_gate.application.commands.handlers.complete_authorization_handler import (
    CompletedAuthorization,
    FailedAuthorization,
)
from directory_gate.core.container import (
    get_complete_authorization_handler,
    get_state_codec,
)
from directory_gate.core.enums import ErrorCode
from directory_gate.core.result import Failure, Success
from directory_gate.domain.entities.user import User
from directory_gate.domain.errors import IdentityCodeExchangeError


@pytest.mark.api
class TestBeginZohoLogin:
    def test_returns_authorization_url(self, client):
        response = client.get(
            "/auth/zoho", params={"redirect": "https://app.example.com/home"}
        )

        assert response.status_code == 200
        auth_url = urlparse(response.json()["authUrl"])
        params = parse_qs(auth_url.query)
        assert auth_url.netloc == "accounts.zoho.com"
        assert params["client_id"] == ["test-client-id"]
        assert params["response_type"] == ["code"]
        assert (
            get_state_codec().decode(params["state"][0])
            == "https://app.example.com/home"
        )

    def test_without_redirect_uses_default(self, client):
        response = client.get("/auth/zoho")

        params = parse_qs(urlparse(response.json()["authUrl"]).query)
        assert get_state_codec().decode(params["state"][0]) == "https://app.example.com"


@pytest.mark.api
class TestZohoCallback:
    def test_success_redirects_with_token(self, client, override):
        user = User(
            id=uuid7(),
            email="alice@example.com",
            name="Alice Smith",
            created_at=datetime.now(UTC),
        )
        stub = override(
            get_complete_authorization_handler,
            Success(
                value=CompletedAuthorization(
                    return_url="https://app.example.com/home?tab=1",
                    access_token="header.payload.signature",
                    user=user,
                )
            ),
        )

        response = client.get(
            "/auth/zoho/callback",
            params={"code": "abc", "state": "signed"},
            follow_redirects=False,
        )

        assert response.status_code == 302
        location = urlparse(response.headers["location"])
        assert location.netloc == "app.example.com"
        assert location.path == "/home"
        assert parse_qs(location.query) == {
            "tab": ["1"],
            "token": ["header.payload.signature"],
        }
        assert stub.commands[0].code == "abc"
        assert stub.commands[0].state == "signed"

    def test_failure_redirects_with_marker_only(self, client, override):
        stub = override(
            get_complete_authorization_handler,
            Failure(
                error=FailedAuthorization(
                    return_url="https://app.example.com",
                    error=IdentityCodeExchangeError(
                        code=ErrorCode.IDENTITY_CODE_EXCHANGE_FAILED,
                        message="Zoho rejected the authorization code: invalid_code",
                        provider_name="zoho",
                    ),
                )
            ),
        )

        response = client.get(
            "/auth/zoho/callback",
            params={"error": "access_denied"},
            follow_redirects=False,
        )

        assert response.status_code == 302
        location = urlparse(response.headers["location"])
        assert parse_qs(location.query) == {"login": ["failed"]}
        assert "invalid_code" not in response.headers["location"]
        assert stub.commands[0].provider_error == "access_denied"
