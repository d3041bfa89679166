"""API tests for the directory endpoint."""

import pytest

from directory_gate.application.errors import ApplicationError, ApplicationErrorCode
from directory_gate.application.queries.handlers.list_visible_contacts_handler import (
    VisibleContact,
)
from directory_gate.core.container import get_list_visible_contacts_handler
from directory_gate.core.enums import ErrorCode
from directory_gate.core.errors import StoreError
from directory_gate.core.result import Failure, Success


@pytest.mark.api
class TestGetLegacyData:
    def test_requires_credential(self, client, override):
        override(get_list_visible_contacts_handler, Success(value=[]))

        response = client.get("/getLegacyData")

        assert response.status_code == 401

    def test_returns_visible_contacts(self, client, override, auth_headers):
        stub = override(
            get_list_visible_contacts_handler,
            Success(
                value=[
                    VisibleContact(
                        name="Jane Doe",
                        number="12345",
                        type="work",
                        pan="",
                        rship_manager="Bob Lee",
                        family_head="",
                    )
                ]
            ),
        )

        response = client.get("/getLegacyData", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == [
            {
                "name": "Jane Doe",
                "number": "12345",
                "type": "work",
                "pan": "",
                "rshipManager": "Bob Lee",
                "familyHead": "",
            }
        ]
        assert stub.commands[0].caller.name == "Alice Smith"

    def test_store_failure_returns_500(self, client, override, auth_headers):
        override(
            get_list_visible_contacts_handler,
            Failure(
                error=ApplicationError.from_domain_error(
                    StoreError(
                        code=ErrorCode.STORE_OPERATION_FAILED,
                        message="Failed to fetch directory",
                        cause="timeout",
                    ),
                    code=ApplicationErrorCode.QUERY_FAILED,
                )
            ),
        )

        response = client.get("/getLegacyData", headers=auth_headers)

        assert response.status_code == 500
        assert response.json()["title"] == "Query Failed"
