"""ListPendingRequests query handler."""

from directory_gate.application.errors import ApplicationError, ApplicationErrorCode
from directory_gate.application.queries.request_queries import ListPendingRequests
from directory_gate.application.services.request_access_policy import (
    RequestAccessPolicy,
)
from directory_gate.core.enums import ErrorCode
from directory_gate.core.errors import AuthorizationError, StoreError
from directory_gate.core.result import Failure, Result, Success
from directory_gate.domain.entities.personal_request import PersonalRequest
from directory_gate.domain.enums import RequestStatus
from directory_gate.domain.protocols import LoggerProtocol, PersonalRequestRepository


class ListPendingRequestsError:
    """ListPendingRequests-specific errors."""

    NOT_ALLOWED = "Not allowed to list pending requests"
    QUERY_FAILED = "Failed to fetch pending requests"


class ListPendingRequestsHandler:
    """Handler for ListPendingRequests query.

    Returns every pending request, newest first.
    """

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
        self, query: ListPendingRequests
    ) -> Result[list[PersonalRequest], ApplicationError]:
        if not self._access_policy.can_list_pending(query.caller):
            return Failure(
                error=ApplicationError.from_domain_error(
                    AuthorizationError(
                        code=ErrorCode.PERMISSION_DENIED,
                        message=ListPendingRequestsError.NOT_ALLOWED,
                        required_permission="personal_requests:list_pending",
                    )
                )
            )

        try:
            requests = await self._request_repo.list_by_status(RequestStatus.PENDING)
        except Exception as e:
            self._logger.error("pending_requests_query_failed", error=e)
            return Failure(
                error=ApplicationError.from_domain_error(
                    StoreError(
                        code=ErrorCode.STORE_OPERATION_FAILED,
                        message=ListPendingRequestsError.QUERY_FAILED,
                        cause=str(e),
                    ),
                    code=ApplicationErrorCode.QUERY_FAILED,
                )
            )

        return Success(value=requests)
