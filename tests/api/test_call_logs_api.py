"""API tests for call log upload."""

import pytest
from uuid_extensions import uuid7

from directory_gate.core.container import get_upload_call_log_handler
from directory_gate.core.result import Success


@pytest.mark.api
class TestUploadCallLog:
    def test_uploader_comes_from_credential(self, client, override, auth_headers):
        call_log_id = uuid7()
        stub = override(get_upload_call_log_handler, Success(value=call_log_id))

        response = client.post(
            "/uploadCallLog",
            json={
                "callerName": "Jane Doe",
                "rshipManagerName": "Bob Lee",
                "type": "Incoming",
                "timestamp": 1767225600000,
                "duration": 42,
                "uploadedBy": "Mallory",
            },
            headers=auth_headers,
        )

        assert response.status_code == 201
        assert response.json() == {
            "message": "Call log saved successfully",
            "id": str(call_log_id),
        }
        command = stub.commands[0]
        assert command.uploaded_by == "Alice Smith"
        assert command.call_type == "Incoming"
        assert command.timestamp_ms == 1767225600000
        assert command.duration_seconds == 42

    def test_optional_fields_default(self, client, override, auth_headers):
        stub = override(get_upload_call_log_handler, Success(value=uuid7()))

        response = client.post(
            "/uploadCallLog",
            json={"callerName": "Jane Doe", "type": "missed", "timestamp": 0},
            headers=auth_headers,
        )

        assert response.status_code == 201
        command = stub.commands[0]
        assert command.rship_manager_name == "N/A"
        assert command.duration_seconds == 0

    def test_fractional_duration_is_accepted(self, client, override, auth_headers):
        stub = override(get_upload_call_log_handler, Success(value=uuid7()))

        response = client.post(
            "/uploadCallLog",
            json={
                "callerName": "Jane Doe",
                "type": "outgoing",
                "timestamp": 0,
                "duration": 12.6,
            },
            headers=auth_headers,
        )

        assert response.status_code == 201
        assert stub.commands[0].duration_seconds == 13

    def test_missing_caller_name_returns_400(self, client, override, auth_headers):
        stub = override(get_upload_call_log_handler, Success(value=uuid7()))

        response = client.post(
            "/uploadCallLog",
            json={"type": "missed", "timestamp": 0},
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert [e["field"] for e in response.json()["errors"]] == ["callerName"]
        assert stub.commands == []

    def test_requires_credential(self, client, override):
        override(get_upload_call_log_handler, Success(value=uuid7()))

        response = client.post(
            "/uploadCallLog",
            json={"callerName": "Jane Doe", "type": "missed", "timestamp": 0},
        )

        assert response.status_code == 401
