"""UploadCallLog command handler."""

from datetime import UTC, datetime
from uuid import UUID

from uuid_extensions import uuid7

from directory_gate.application.commands.call_log_commands import UploadCallLog
from directory_gate.application.errors import ApplicationError
from directory_gate.core.enums import ErrorCode
from directory_gate.core.errors import StoreError, ValidationError
from directory_gate.core.result import Failure, Result, Success
from directory_gate.domain.entities.call_log import CallLog
from directory_gate.domain.protocols import CallLogRepository, LoggerProtocol


class UploadCallLogError:
    """UploadCallLog-specific errors."""

    INVALID_TIMESTAMP = "Timestamp is not a valid epoch milliseconds value"
    SAVE_FAILED = "Failed to save call log"


class UploadCallLogHandler:
    """Handler for UploadCallLog command.

    The call type is stored lower-cased and the epoch-millisecond timestamp
    is converted to a UTC datetime.
    """

    def __init__(self, call_log_repo: CallLogRepository, logger: LoggerProtocol) -> None:
        self._call_log_repo = call_log_repo
        self._logger = logger

    async def handle(self, cmd: UploadCallLog) -> Result[UUID, ApplicationError]:
        try:
            called_at = datetime.fromtimestamp(cmd.timestamp_ms / 1000, tz=UTC)
        except (OverflowError, OSError, ValueError):
            return Failure(
                error=ApplicationError.from_domain_error(
                    ValidationError(
                        code=ErrorCode.INVALID_CALL_TIMESTAMP,
                        message=UploadCallLogError.INVALID_TIMESTAMP,
                        field="timestamp",
                    )
                )
            )

        call_log = CallLog(
            id=uuid7(),
            caller_name=cmd.caller_name,
            rship_manager_name=cmd.rship_manager_name,
            call_type=cmd.call_type.lower(),
            called_at=called_at,
            duration_seconds=cmd.duration_seconds,
            uploaded_by=cmd.uploaded_by,
            created_at=datetime.now(UTC),
        )

        try:
            await self._call_log_repo.save(call_log)
        except Exception as e:
            self._logger.error("call_log_save_failed", error=e)
            return Failure(
                error=ApplicationError.from_domain_error(
                    StoreError(
                        code=ErrorCode.STORE_OPERATION_FAILED,
                        message=UploadCallLogError.SAVE_FAILED,
                        cause=str(e),
                    )
                )
            )

        self._logger.info(
            "call_log_saved",
            call_log_id=str(call_log.id),
            call_type=call_log.call_type,
        )
        return Success(value=call_log.id)
