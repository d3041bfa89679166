"""GetLatestVersion query handler."""

from directory_gate.application.errors import ApplicationError, ApplicationErrorCode
from directory_gate.application.queries.version_queries import GetLatestVersion
from directory_gate.core.enums import ErrorCode
from directory_gate.core.errors import NotFoundError, StoreError
from directory_gate.core.result import Failure, Result, Success
from directory_gate.domain.entities.version_info import VersionInfo
from directory_gate.domain.protocols import LoggerProtocol, VersionRepository


class GetLatestVersionError:
    """GetLatestVersion-specific errors."""

    NOT_FOUND = "No version info found"
    QUERY_FAILED = "Failed to fetch version info"


class GetLatestVersionHandler:
    """Handler for GetLatestVersion query."""

    def __init__(self, version_repo: VersionRepository, logger: LoggerProtocol) -> None:
        self._version_repo = version_repo
        self._logger = logger

    async def handle(
        self, query: GetLatestVersion
    ) -> Result[VersionInfo, ApplicationError]:
        try:
            latest = await self._version_repo.find_latest()
        except Exception as e:
            self._logger.error("version_query_failed", error=e)
            return Failure(
                error=ApplicationError.from_domain_error(
                    StoreError(
                        code=ErrorCode.STORE_OPERATION_FAILED,
                        message=GetLatestVersionError.QUERY_FAILED,
                        cause=str(e),
                    ),
                    code=ApplicationErrorCode.QUERY_FAILED,
                )
            )

        if latest is None:
            return Failure(
                error=ApplicationError.from_domain_error(
                    NotFoundError(
                        code=ErrorCode.VERSION_NOT_FOUND,
                        message=GetLatestVersionError.NOT_FOUND,
                        resource_type="VersionInfo",
                        resource_id="latest",
                    )
                )
            )

        return Success(value=latest)
