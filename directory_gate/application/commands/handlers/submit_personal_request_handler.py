"""SubmitPersonalRequest command handler.

Flow:
1. Create a PENDING PersonalRequest
2. Persist it
3. Return Success(request_id)

No duplicate detection: the same contact can be requested any number of
times.
"""

from uuid import UUID

from directory_gate.application.commands.request_commands import SubmitPersonalRequest
from directory_gate.application.errors import ApplicationError
from directory_gate.core.enums import ErrorCode
from directory_gate.core.errors import StoreError
from directory_gate.core.result import Failure, Result, Success
from directory_gate.domain.entities.personal_request import PersonalRequest
from directory_gate.domain.protocols import LoggerProtocol, PersonalRequestRepository


class SubmitPersonalRequestError:
    """SubmitPersonalRequest-specific errors."""

    SAVE_FAILED = "Failed to submit request"


class SubmitPersonalRequestHandler:
    """Handler for SubmitPersonalRequest command."""

    def __init__(
        self,
        request_repo: PersonalRequestRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._request_repo = request_repo
        self._logger = logger

    async def handle(
        self, cmd: SubmitPersonalRequest
    ) -> Result[UUID, ApplicationError]:
        """Handle SubmitPersonalRequest command.

        Returns:
            Success(request_id) once stored.
            Failure(ApplicationError) wrapping a StoreError if the write fails.
        """
        request = PersonalRequest.submit(
            requested_contact=cmd.requested_contact,
            requested_by=cmd.requested_by,
            reason=cmd.reason,
        )

        try:
            await self._request_repo.save(request)
        except Exception as e:
            self._logger.error(
                "personal_request_submit_failed",
                error=e,
                user_id=str(cmd.caller.user_id),
            )
            return Failure(
                error=ApplicationError.from_domain_error(
                    StoreError(
                        code=ErrorCode.STORE_OPERATION_FAILED,
                        message=SubmitPersonalRequestError.SAVE_FAILED,
                        cause=str(e),
                    )
                )
            )

        self._logger.info(
            "personal_request_submitted",
            request_id=str(request.id),
            user_id=str(cmd.caller.user_id),
        )
        return Success(value=request.id)
