"""Unit tests for the PersonalRequest entity."""

import pytest

from directory_gate.domain.entities.personal_request import PersonalRequest
from directory_gate.domain.enums import RequestStatus


@pytest.mark.unit
class TestPersonalRequestEntity:
    """Creation and status replacement."""

    def test_submit_starts_pending(self):
        request = PersonalRequest.submit(
            requested_contact="Jane Doe",
            requested_by="Alice Smith",
            reason="Family member",
        )

        assert request.status == RequestStatus.PENDING
        assert request.created_at == request.updated_at
        assert not request.is_approved

    def test_submit_generates_distinct_ids(self):
        first = PersonalRequest.submit(
            requested_contact="Jane Doe", requested_by="Alice", reason="x"
        )
        second = PersonalRequest.submit(
            requested_contact="Jane Doe", requested_by="Alice", reason="x"
        )

        assert first.id != second.id

    def test_with_status_returns_copy(self):
        request = PersonalRequest.submit(
            requested_contact="Jane Doe", requested_by="Alice", reason="x"
        )

        approved = request.with_status(RequestStatus.APPROVED)

        assert approved.is_approved
        assert approved.id == request.id
        assert approved.requested_by == request.requested_by
        assert request.status == RequestStatus.PENDING
        assert approved.updated_at >= request.updated_at

    def test_any_status_can_follow_any_other(self):
        request = PersonalRequest.submit(
            requested_contact="Jane Doe", requested_by="Alice", reason="x"
        )

        reopened = (
            request.with_status(RequestStatus.REJECTED)
            .with_status(RequestStatus.APPROVED)
            .with_status(RequestStatus.PENDING)
        )

        assert reopened.status == RequestStatus.PENDING
