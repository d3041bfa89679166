"""End-to-end directory visibility against a real database.

A request approved for one requester hides the contact from that requester
only. Each repository gets its own session, as in the application.
"""

import pytest
from sqlalchemy import insert

from directory_gate.application.commands.handlers.submit_personal_request_handler import (
    SubmitPersonalRequestHandler,
)
from directory_gate.application.commands.handlers.update_request_status_handler import (
    UpdateRequestStatusHandler,
)
from directory_gate.application.commands.request_commands import (
    SubmitPersonalRequest,
    UpdateRequestStatus,
)
from directory_gate.application.queries.directory_queries import ListVisibleContacts
from directory_gate.application.queries.handlers.list_visible_contacts_handler import (
    ListVisibleContactsHandler,
)
from directory_gate.application.services.request_access_policy import (
    PermissiveRequestAccessPolicy,
)
from directory_gate.core.result import Success
from directory_gate.infrastructure.persistence.models import mint_db
from directory_gate.infrastructure.persistence.repositories import (
    DirectoryRepository,
    PersonalRequestRepository,
)
from tests.conftest import create_caller


async def _seed_directory(database) -> None:
    async with database.get_session() as session:
        await session.execute(
            insert(mint_db),
            [
                {
                    "NAME": "Jane Doe",
                    "MOBILE": '"12345"',
                    "PAN": None,
                    "RELATIONSHIP  MANAGER": None,
                    "FAMILY HEAD": None,
                },
                {
                    "NAME": "Max Poe",
                    "MOBILE": "67890",
                    "PAN": None,
                    "RELATIONSHIP  MANAGER": None,
                    "FAMILY HEAD": None,
                },
            ],
        )


async def _visible_names(database, caller, mock_logger) -> list[str]:
    async with database.get_session() as directory_session:
        async with database.get_session() as request_session:
            handler = ListVisibleContactsHandler(
                directory_repo=DirectoryRepository(directory_session),
                request_repo=PersonalRequestRepository(request_session),
                logger=mock_logger,
            )
            result = await handler.handle(ListVisibleContacts(caller=caller))

    assert isinstance(result, Success)
    return [contact.name for contact in result.value]


@pytest.mark.integration
class TestDirectoryVisibilityFlow:
    @pytest.mark.asyncio
    async def test_approval_hides_contact_from_requester_only(
        self, database, mock_logger
    ):
        await _seed_directory(database)
        alice = create_caller(name="Alice Smith")
        bob = create_caller(name="Bob Lee", email="bob@example.com")

        async with database.get_session() as session:
            submitted = await SubmitPersonalRequestHandler(
                request_repo=PersonalRequestRepository(session), logger=mock_logger
            ).handle(
                SubmitPersonalRequest(
                    caller=alice,
                    requested_contact="jane doe",
                    requested_by="Alice Smith",
                    reason="Sister",
                )
            )
        assert isinstance(submitted, Success)

        # Pending requests do not hide anything.
        assert await _visible_names(database, alice, mock_logger) == [
            "Jane Doe",
            "Max Poe",
        ]

        async with database.get_session() as session:
            approved = await UpdateRequestStatusHandler(
                request_repo=PersonalRequestRepository(session),
                access_policy=PermissiveRequestAccessPolicy(),
                logger=mock_logger,
            ).handle(
                UpdateRequestStatus(
                    caller=bob, request_id=str(submitted.value), status="Approved"
                )
            )
        assert isinstance(approved, Success)

        assert await _visible_names(database, alice, mock_logger) == ["Max Poe"]
        assert await _visible_names(database, bob, mock_logger) == [
            "Jane Doe",
            "Max Poe",
        ]

    @pytest.mark.asyncio
    async def test_visible_contact_fields_are_cleaned(self, database, mock_logger):
        await _seed_directory(database)

        async with database.get_session() as directory_session:
            async with database.get_session() as request_session:
                result = await ListVisibleContactsHandler(
                    directory_repo=DirectoryRepository(directory_session),
                    request_repo=PersonalRequestRepository(request_session),
                    logger=mock_logger,
                ).handle(ListVisibleContacts(caller=create_caller(name="Bob Lee")))

        assert isinstance(result, Success)
        jane = next(c for c in result.value if c.name == "Jane Doe")
        assert jane.number == "12345"
        assert jane.type == "work"
        assert jane.pan == ""
