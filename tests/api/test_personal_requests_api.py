"""API tests for personal request endpoints.

Tests cover:
- Bearer credential enforcement (uniform 401)
- Submit: 201 with ID, 400 on blank fields (client field names)
- Pending list: camelCase records
- Status update: success message, 404 and 400 as Problem Details
"""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient
from uuid_extensions import uuid7

from directory_gate.application.errors import ApplicationError
from directory_gate.core.container import (
    get_list_pending_requests_handler,
    get_submit_personal_request_handler,
    get_update_request_status_handler,
)
from directory_gate.core.enums import ErrorCode
from directory_gate.core.errors import NotFoundError, ValidationError
from directory_gate.core.result import Failure, Success
from directory_gate.domain.enums import RequestStatus
from directory_gate.main import app
from tests.conftest import create_personal_request

VALID_BODY = {
    "requestedContact": "Jane Doe",
    "requestedBy": "Alice Smith",
    "reason": "Family member",
}


@pytest.mark.api
class TestAuthentication:
    def test_missing_credential_returns_401(self, client, override):
        stub = override(get_submit_personal_request_handler, Success(value=uuid7()))

        response = client.post("/requestAsPersonal", json=VALID_BODY)

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"
        assert stub.commands == []

    def test_tampered_credential_returns_same_401(self, client, override, auth_headers):
        override(get_list_pending_requests_handler, Success(value=[]))
        tampered = {"Authorization": auth_headers["Authorization"] + "x"}

        missing = client.get("/getPendingRequests")
        bad = client.get("/getPendingRequests", headers=tampered)

        assert missing.status_code == bad.status_code == 401
        assert missing.json()["detail"] == bad.json()["detail"]

    def test_non_bearer_scheme_returns_401(self, client, override):
        override(get_list_pending_requests_handler, Success(value=[]))

        response = client.get(
            "/getPendingRequests", headers={"Authorization": "Basic abc"}
        )

        assert response.status_code == 401


@pytest.mark.api
class TestSubmitPersonalRequest:
    def test_created(self, client, override, auth_headers):
        request_id = uuid7()
        stub = override(get_submit_personal_request_handler, Success(value=request_id))

        response = client.post("/requestAsPersonal", json=VALID_BODY, headers=auth_headers)

        assert response.status_code == 201
        assert response.json() == {
            "message": "Request submitted successfully",
            "id": str(request_id),
        }
        command = stub.commands[0]
        assert command.requested_contact == "Jane Doe"
        assert command.requested_by == "Alice Smith"
        assert command.caller.email == "alice@example.com"

    def test_values_reach_command_as_sent(self, client, override, auth_headers):
        stub = override(get_submit_personal_request_handler, Success(value=uuid7()))

        response = client.post(
            "/requestAsPersonal",
            json={**VALID_BODY, "requestedContact": " Jane Doe  ", "reason": "Family "},
            headers=auth_headers,
        )

        assert response.status_code == 201
        command = stub.commands[0]
        assert command.requested_contact == " Jane Doe  "
        assert command.reason == "Family "

    def test_blank_field_returns_400(self, client, override, auth_headers):
        stub = override(get_submit_personal_request_handler, Success(value=uuid7()))

        response = client.post(
            "/requestAsPersonal",
            json={**VALID_BODY, "requestedContact": "   "},
            headers=auth_headers,
        )

        assert response.status_code == 400
        fields = [error["field"] for error in response.json()["errors"]]
        assert fields == ["requestedContact"]
        assert stub.commands == []

    def test_missing_field_returns_400(self, client, override, auth_headers):
        override(get_submit_personal_request_handler, Success(value=uuid7()))

        response = client.post(
            "/requestAsPersonal",
            json={"requestedContact": "Jane Doe", "requestedBy": "Alice Smith"},
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert [e["field"] for e in response.json()["errors"]] == ["reason"]


@pytest.mark.api
class TestListPendingRequests:
    def test_returns_camel_case_records(self, client, override, auth_headers):
        pending = create_personal_request()
        override(get_list_pending_requests_handler, Success(value=[pending]))

        response = client.get("/getPendingRequests", headers=auth_headers)

        assert response.status_code == 200
        [record] = response.json()
        assert record["id"] == str(pending.id)
        assert record["requestedContact"] == "Jane Doe"
        assert record["requestedBy"] == "Alice Smith"
        assert record["status"] == "pending"
        assert "createdAt" in record
        assert "updatedAt" in record

    def test_empty_list(self, client, override, auth_headers):
        override(get_list_pending_requests_handler, Success(value=[]))

        response = client.get("/getPendingRequests", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == []


@pytest.mark.api
class TestUpdateRequestStatus:
    def test_success_message_uses_new_status(self, client, override, auth_headers):
        updated = create_personal_request(status=RequestStatus.APPROVED)
        stub = override(get_update_request_status_handler, Success(value=updated))

        response = client.put(
            "/updateRequestStatus",
            json={"requestId": str(updated.id), "status": "Approved"},
            headers=auth_headers,
        )

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Request marked as approved"
        assert body["data"]["status"] == "approved"
        assert stub.commands[0].status == "Approved"

    def test_unknown_request_returns_404(self, client, override, auth_headers):
        override(
            get_update_request_status_handler,
            Failure(
                error=ApplicationError.from_domain_error(
                    NotFoundError(
                        code=ErrorCode.REQUEST_NOT_FOUND,
                        message="Request not found",
                        resource_type="PersonalRequest",
                        resource_id="missing",
                    )
                )
            ),
        )

        response = client.put(
            "/updateRequestStatus",
            json={"requestId": "missing", "status": "approved"},
            headers=auth_headers,
        )

        assert response.status_code == 404
        body = response.json()
        assert body["status"] == 404
        assert body["detail"] == "Request not found"
        assert body["instance"] == "/updateRequestStatus"
        assert body["trace_id"] == response.headers["X-Trace-Id"]

    def test_invalid_status_returns_400(self, client, override, auth_headers):
        override(
            get_update_request_status_handler,
            Failure(
                error=ApplicationError.from_domain_error(
                    ValidationError(
                        code=ErrorCode.INVALID_REQUEST_STATUS,
                        message="Invalid status",
                        field="status",
                    )
                )
            ),
        )

        response = client.put(
            "/updateRequestStatus",
            json={"requestId": str(uuid7()), "status": "maybe"},
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "status"

    def test_unexpected_error_returns_500_without_detail(self, auth_headers):
        handler = AsyncMock()
        handler.handle.side_effect = RuntimeError("connection reset")
        app.dependency_overrides[get_update_request_status_handler] = lambda: handler
        try:
            response = TestClient(app, raise_server_exceptions=False).put(
                "/updateRequestStatus",
                json={"requestId": str(uuid7()), "status": "approved"},
                headers=auth_headers,
            )
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 500
        assert "connection reset" not in response.text
