"""API tests for the latest client version endpoint."""

from datetime import UTC, datetime

import pytest
from uuid_extensions import uuid7

from directory_gate.application.errors import ApplicationError
from directory_gate.core.container import get_get_latest_version_handler
from directory_gate.core.enums import ErrorCode
from directory_gate.core.errors import NotFoundError
from directory_gate.core.result import Failure, Success
from directory_gate.domain.entities.version_info import VersionInfo


@pytest.mark.api
class TestLatestVersion:
    def test_public_and_camel_case(self, client, override):
        override(
            get_get_latest_version_handler,
            Success(
                value=VersionInfo(
                    id=uuid7(),
                    version="1.4.2",
                    update_type="mandatory",
                    changelog="Bug fixes",
                    download_url="https://downloads.example.com/1.4.2.apk",
                    created_at=datetime.now(UTC),
                )
            ),
        )

        response = client.get("/version/latest")

        assert response.status_code == 200
        assert response.json() == {
            "latestVersion": "1.4.2",
            "updateType": "mandatory",
            "changelog": "Bug fixes",
            "downloadUrl": "https://downloads.example.com/1.4.2.apk",
        }

    def test_no_release_returns_404(self, client, override):
        override(
            get_get_latest_version_handler,
            Failure(
                error=ApplicationError.from_domain_error(
                    NotFoundError(
                        code=ErrorCode.VERSION_NOT_FOUND,
                        message="No version published",
                        resource_type="VersionInfo",
                        resource_id="latest",
                    )
                )
            ),
        )

        response = client.get("/version/latest")

        assert response.status_code == 404
        assert response.json()["detail"] == "No version published"
