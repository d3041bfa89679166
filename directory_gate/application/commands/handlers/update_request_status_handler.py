"""UpdateRequestStatus command handler.

Flow:
1. Parse the status (case-insensitive); unknown → validation failure
2. Parse the request ID; malformed → not found
3. Ask the access policy
4. Overwrite the status; missing record → not found

Validation runs before any store access, so an invalid status never
touches the record.
"""

from uuid import UUID

from directory_gate.application.commands.request_commands import UpdateRequestStatus
from directory_gate.application.errors import ApplicationError
from directory_gate.application.services.request_access_policy import (
    RequestAccessPolicy,
)
from directory_gate.core.enums import ErrorCode
from directory_gate.core.errors import (
    AuthorizationError,
    NotFoundError,
    StoreError,
    ValidationError,
)
from directory_gate.core.result import Failure, Result, Success
from directory_gate.domain.entities.personal_request import PersonalRequest
from directory_gate.domain.enums import RequestStatus
from directory_gate.domain.protocols import LoggerProtocol, PersonalRequestRepository


class UpdateRequestStatusError:
    """UpdateRequestStatus-specific errors."""

    INVALID_STATUS = "Invalid status value"
    REQUEST_NOT_FOUND = "Request not found"
    NOT_ALLOWED = "Not allowed to update request status"
    UPDATE_FAILED = "Failed to update request"


class UpdateRequestStatusHandler:
    """Handler for UpdateRequestStatus command."""

    def __init__(
        self,
        request_repo: PersonalRequestRepository,
        access_policy: RequestAccessPolicy,
        logger: LoggerProtocol,
    ) -> None:
        self._request_repo = request_repo
        self._access_policy = access_policy
        self._logger = logger

    async def handle(
        self, cmd: UpdateRequestStatus
    ) -> Result[PersonalRequest, ApplicationError]:
        """Handle UpdateRequestStatus command.

        Returns:
            Success(PersonalRequest) with the stored status.
            Failure(ApplicationError) for invalid status (400), unknown or
            malformed ID (404), policy denial (403) or store failure (500).
        """
        status = RequestStatus.parse(cmd.status)
        if status is None:
            return Failure(
                error=ApplicationError.from_domain_error(
                    ValidationError(
                        code=ErrorCode.INVALID_REQUEST_STATUS,
                        message=UpdateRequestStatusError.INVALID_STATUS,
                        field="status",
                        details={"allowed": [s.value for s in RequestStatus]},
                    )
                )
            )

        request_id = self._parse_id(cmd.request_id)
        if request_id is None:
            return Failure(error=self._not_found(cmd.request_id))

        if not self._access_policy.can_update_status(cmd.caller, request_id):
            return Failure(
                error=ApplicationError.from_domain_error(
                    AuthorizationError(
                        code=ErrorCode.PERMISSION_DENIED,
                        message=UpdateRequestStatusError.NOT_ALLOWED,
                        required_permission="personal_requests:update_status",
                    )
                )
            )

        try:
            updated = await self._request_repo.update_status(request_id, status)
        except Exception as e:
            self._logger.error(
                "personal_request_update_failed",
                error=e,
                request_id=str(request_id),
            )
            return Failure(
                error=ApplicationError.from_domain_error(
                    StoreError(
                        code=ErrorCode.STORE_OPERATION_FAILED,
                        message=UpdateRequestStatusError.UPDATE_FAILED,
                        cause=str(e),
                    )
                )
            )

        if updated is None:
            return Failure(error=self._not_found(str(request_id)))

        self._logger.info(
            "personal_request_status_updated",
            request_id=str(request_id),
            status=status.value,
            user_id=str(cmd.caller.user_id),
        )
        return Success(value=updated)

    @staticmethod
    def _parse_id(raw: str) -> UUID | None:
        try:
            return UUID(raw.strip())
        except (AttributeError, ValueError):
            return None

    @staticmethod
    def _not_found(request_id: str) -> ApplicationError:
        return ApplicationError.from_domain_error(
            NotFoundError(
                code=ErrorCode.REQUEST_NOT_FOUND,
                message=UpdateRequestStatusError.REQUEST_NOT_FOUND,
                resource_type="PersonalRequest",
                resource_id=request_id,
            )
        )
