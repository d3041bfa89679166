"""ListVisibleContacts query handler (directory visibility).

Steps:
1. Read the directory projection and the caller's approved requested
   contacts concurrently (two independent sessions)
2. Build the exclusion set from the approved names
3. Drop every directory contact whose normalized name is excluded
4. Strip embedded double quotes from the remaining fields, default
   missing values to "", and tag each survivor as a work contact

Exclusions are recomputed on every call; nothing is cached. Output keeps
the directory's store order.
"""

import asyncio
from dataclasses import dataclass

from directory_gate.application.errors import ApplicationError, ApplicationErrorCode
from directory_gate.application.queries.directory_queries import ListVisibleContacts
from directory_gate.core.enums import ErrorCode
from directory_gate.core.errors import StoreError
from directory_gate.core.result import Failure, Result, Success
from directory_gate.domain.entities.directory_contact import DirectoryContact
from directory_gate.domain.enums import RequestStatus
from directory_gate.domain.protocols import (
    DirectoryRepository,
    LoggerProtocol,
    PersonalRequestRepository,
)
from directory_gate.domain.value_objects import NormalizedNameMatcher

WORK_CONTACT_TYPE = "work"


@dataclass(frozen=True, kw_only=True)
class VisibleContact:
    """Directory contact as returned to the caller.

    Attributes:
        name: Contact name (as stored).
        number: Mobile number, quotes stripped.
        type: Always "work".
        pan: Tax identifier, quotes stripped.
        rship_manager: Relationship manager, quotes stripped.
        family_head: Family head, quotes stripped.
    """

    name: str
    number: str
    type: str
    pan: str
    rship_manager: str
    family_head: str


def _clean(value: str | None) -> str:
    if value is None:
        return ""
    return str(value).replace('"', "")


class ListVisibleContactsHandler:
    """Handler for ListVisibleContacts query."""

    def __init__(
        self,
        directory_repo: DirectoryRepository,
        request_repo: PersonalRequestRepository,
        logger: LoggerProtocol,
        matcher: NormalizedNameMatcher | None = None,
    ) -> None:
        """Initialize handler.

        Args:
            directory_repo: Legacy directory reader.
            request_repo: Personal request repository. Must not share a
                session with directory_repo (both are queried concurrently).
            logger: Structured logger.
            matcher: Name matcher (defaults to NormalizedNameMatcher).
        """
        self._directory_repo = directory_repo
        self._request_repo = request_repo
        self._logger = logger
        self._matcher = matcher or NormalizedNameMatcher()

    async def handle(
        self, query: ListVisibleContacts
    ) -> Result[list[VisibleContact], ApplicationError]:
        try:
            contacts, approved_names = await asyncio.gather(
                self._directory_repo.list_contacts(),
                self._request_repo.list_requested_contacts(
                    query.caller.name, RequestStatus.APPROVED
                ),
            )
        except Exception as e:
            self._logger.error(
                "directory_read_failed",
                error=e,
                user_id=str(query.caller.user_id),
            )
            return Failure(
                error=ApplicationError.from_domain_error(
                    StoreError(
                        code=ErrorCode.STORE_OPERATION_FAILED,
                        message="Failed to fetch directory",
                        cause=str(e),
                    ),
                    code=ApplicationErrorCode.QUERY_FAILED,
                )
            )

        exclusions = self._matcher.build_exclusions(approved_names)
        visible = [
            self._to_visible(contact)
            for contact in contacts
            if not self._matcher.is_excluded(contact.name, exclusions)
        ]

        self._logger.debug(
            "directory_read",
            user_id=str(query.caller.user_id),
            contact_count=len(contacts),
            hidden_count=len(contacts) - len(visible),
        )
        return Success(value=visible)

    @staticmethod
    def _to_visible(contact: DirectoryContact) -> VisibleContact:
        return VisibleContact(
            name=contact.name if contact.name is not None else "",
            number=_clean(contact.mobile),
            type=WORK_CONTACT_TYPE,
            pan=_clean(contact.pan),
            rship_manager=_clean(contact.relationship_manager),
            family_head=_clean(contact.family_head),
        )
