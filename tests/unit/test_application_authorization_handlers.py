"""Unit tests for the delegated login handlers.

Tests cover:
- BeginAuthorizationHandler: return URL resolution and state wrapping
- CompleteAuthorizationHandler: success path, every failure stage,
  first-login user creation, concurrent-insert recovery, return URL recovery

Architecture:
- Provider, verifier and repository are AsyncMock doubles
- State codec and token service are Mock doubles
"""

from datetime import UTC, datetime
from unittest.mock import AsyncMock, Mock

import pytest
from sqlalchemy.exc import IntegrityError
from uuid_extensions import uuid7

from directory_gate.application.commands.handlers.begin_authorization_handler import (
    BeginAuthorizationHandler,
)
from directory_gate.application.commands.handlers.complete_authorization_handler import (
    CompleteAuthorizationHandler,
)
from directory_gate.application.commands.identity_commands import (
    BeginAuthorization,
    CompleteAuthorization,
)
from directory_gate.core.enums import ErrorCode
from directory_gate.core.result import Failure, Success
from directory_gate.domain.entities.user import User
from directory_gate.domain.errors import (
    IdentityCodeExchangeError,
    IdentityEmployeeLookupError,
    IdentityTokenError,
)
from directory_gate.domain.protocols.identity_provider_protocol import (
    EmployeeRecord,
    IdentityTokens,
)

DEFAULT_URL = "https://app.example.com"


def create_user(email: str = "jane@example.com", name: str = "Jane Doe") -> User:
    return User(id=uuid7(), email=email, name=name, created_at=datetime.now(UTC))


@pytest.mark.unit
class TestBeginAuthorizationHandler:
    def _handler(self, allowlist=()) -> tuple:
        provider = Mock()
        provider.build_authorization_url.side_effect = (
            lambda state: f"https://accounts.zoho.com/oauth/v2/auth?state={state}"
        )
        codec = Mock()
        codec.encode.side_effect = lambda url: f"signed({url})"
        handler = BeginAuthorizationHandler(
            identity_provider=provider,
            state_codec=codec,
            default_return_url=DEFAULT_URL,
            return_url_allowlist=allowlist,
        )
        return handler, provider, codec

    @pytest.mark.asyncio
    async def test_wraps_requested_return_url_in_state(self):
        handler, _, codec = self._handler()

        result = await handler.handle(
            BeginAuthorization(return_url="myapp://login-complete")
        )

        assert isinstance(result, Success)
        assert result.value.endswith("state=signed(myapp://login-complete)")
        codec.encode.assert_called_once_with("myapp://login-complete")

    @pytest.mark.asyncio
    async def test_missing_return_url_uses_default(self):
        handler, _, codec = self._handler()

        await handler.handle(BeginAuthorization())

        codec.encode.assert_called_once_with(DEFAULT_URL)

    @pytest.mark.asyncio
    async def test_disallowed_return_url_uses_default(self):
        handler, _, codec = self._handler(allowlist=["https://app.example.com"])

        await handler.handle(BeginAuthorization(return_url="https://evil.example.net/x"))

        codec.encode.assert_called_once_with(DEFAULT_URL)


class CompleteAuthorizationFixture:
    """Wires a CompleteAuthorizationHandler with happy-path doubles."""

    def __init__(self) -> None:
        self.provider = AsyncMock()
        self.provider.provider_name = "zoho"
        self.provider.exchange_code.return_value = Success(
            value=IdentityTokens(access_token="zoho-at", id_token="zoho-idt")
        )
        self.provider.lookup_employee.return_value = Success(
            value=EmployeeRecord(email="jane@example.com", name="Jane Doe")
        )
        self.verifier = AsyncMock()
        self.verifier.extract_email.return_value = Success(value="jane@example.com")
        self.codec = Mock()
        self.codec.decode.return_value = "https://app.example.com/dashboard"
        self.user_repo = AsyncMock()
        self.user_repo.find_by_email.return_value = None
        self.token_service = Mock()
        self.token_service.generate_access_token.return_value = "minted.jwt.token"
        self.logger = Mock()
        self.handler = CompleteAuthorizationHandler(
            identity_provider=self.provider,
            id_token_verifier=self.verifier,
            state_codec=self.codec,
            user_repo=self.user_repo,
            token_service=self.token_service,
            logger=self.logger,
            default_return_url=DEFAULT_URL,
        )


@pytest.fixture
def flow() -> CompleteAuthorizationFixture:
    return CompleteAuthorizationFixture()


@pytest.mark.unit
class TestCompleteAuthorizationHandlerSuccess:
    @pytest.mark.asyncio
    async def test_first_login_creates_user_and_mints_credential(self, flow):
        result = await flow.handler.handle(
            CompleteAuthorization(code="auth-code", state="signed-state")
        )

        assert isinstance(result, Success)
        completed = result.value
        assert completed.access_token == "minted.jwt.token"
        assert completed.return_url == "https://app.example.com/dashboard"
        assert completed.user.email == "jane@example.com"
        assert completed.user.name == "Jane Doe"
        flow.user_repo.save.assert_awaited_once()
        flow.token_service.generate_access_token.assert_called_once_with(
            user_id=completed.user.id,
            email="jane@example.com",
            name="Jane Doe",
        )
        flow.provider.exchange_code.assert_awaited_once_with("auth-code")
        flow.verifier.extract_email.assert_awaited_once_with("zoho-idt")
        flow.provider.lookup_employee.assert_awaited_once_with(
            "zoho-at", "jane@example.com"
        )

    @pytest.mark.asyncio
    async def test_returning_user_is_not_recreated(self, flow):
        existing = create_user(name="Jane Original")
        flow.user_repo.find_by_email.return_value = existing

        result = await flow.handler.handle(
            CompleteAuthorization(code="auth-code", state="signed-state")
        )

        assert isinstance(result, Success)
        assert result.value.user == existing
        flow.user_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_concurrent_first_login_uses_winning_row(self, flow):
        winner = create_user()
        flow.user_repo.find_by_email.side_effect = [None, winner]
        flow.user_repo.save.side_effect = IntegrityError("insert", {}, Exception("dup"))

        result = await flow.handler.handle(
            CompleteAuthorization(code="auth-code", state="signed-state")
        )

        assert isinstance(result, Success)
        assert result.value.user == winner

    @pytest.mark.asyncio
    async def test_invalid_state_falls_back_to_default_url(self, flow):
        flow.codec.decode.return_value = None

        result = await flow.handler.handle(
            CompleteAuthorization(code="auth-code", state="tampered")
        )

        assert isinstance(result, Success)
        assert result.value.return_url == DEFAULT_URL


@pytest.mark.unit
class TestCompleteAuthorizationHandlerFailures:
    """Every failure yields FailedAuthorization and mints nothing."""

    def _assert_no_side_effects(self, flow) -> None:
        flow.user_repo.save.assert_not_called()
        flow.token_service.generate_access_token.assert_not_called()

    @pytest.mark.asyncio
    async def test_provider_error_short_circuits(self, flow):
        result = await flow.handler.handle(
            CompleteAuthorization(state="signed-state", provider_error="access_denied")
        )

        assert isinstance(result, Failure)
        assert result.error.error.code == ErrorCode.IDENTITY_ACCESS_DENIED
        assert result.error.return_url == "https://app.example.com/dashboard"
        flow.provider.exchange_code.assert_not_called()
        self._assert_no_side_effects(flow)

    @pytest.mark.asyncio
    async def test_missing_code_fails(self, flow):
        result = await flow.handler.handle(CompleteAuthorization(state="signed-state"))

        assert isinstance(result, Failure)
        assert isinstance(result.error.error, IdentityCodeExchangeError)
        flow.provider.exchange_code.assert_not_called()

    @pytest.mark.asyncio
    async def test_rejected_code_creates_no_user(self, flow):
        flow.provider.exchange_code.return_value = Failure(
            error=IdentityCodeExchangeError(
                code=ErrorCode.IDENTITY_CODE_EXCHANGE_FAILED,
                message="Zoho rejected the authorization code: invalid_code",
                provider_name="zoho",
            )
        )

        result = await flow.handler.handle(
            CompleteAuthorization(code="used-code", state="signed-state")
        )

        assert isinstance(result, Failure)
        assert result.error.error.stage == "code_exchange"
        flow.user_repo.find_by_email.assert_not_called()
        self._assert_no_side_effects(flow)
        flow.logger.warning.assert_called_once()
        assert flow.logger.warning.call_args.args[0] == "zoho_login_failed"
        assert flow.logger.warning.call_args.kwargs["stage"] == "code_exchange"

    @pytest.mark.asyncio
    async def test_bad_identity_token_fails(self, flow):
        flow.verifier.extract_email.return_value = Failure(
            error=IdentityTokenError(
                code=ErrorCode.IDENTITY_TOKEN_INVALID,
                message="Identity token carries no email claim",
                provider_name="zoho",
            )
        )

        result = await flow.handler.handle(
            CompleteAuthorization(code="auth-code", state="signed-state")
        )

        assert isinstance(result, Failure)
        assert result.error.error.stage == "id_token"
        flow.provider.lookup_employee.assert_not_called()
        self._assert_no_side_effects(flow)

    @pytest.mark.asyncio
    async def test_unknown_employee_fails(self, flow):
        flow.provider.lookup_employee.return_value = Failure(
            error=IdentityEmployeeLookupError(
                code=ErrorCode.IDENTITY_EMPLOYEE_NOT_FOUND,
                message="User not found in Zoho People",
                provider_name="zoho",
            )
        )

        result = await flow.handler.handle(
            CompleteAuthorization(code="auth-code", state="signed-state")
        )

        assert isinstance(result, Failure)
        assert result.error.error.stage == "directory_lookup"
        self._assert_no_side_effects(flow)

    @pytest.mark.asyncio
    async def test_store_failure_fails_at_user_store(self, flow):
        flow.user_repo.find_by_email.side_effect = RuntimeError("db down")

        result = await flow.handler.handle(
            CompleteAuthorization(code="auth-code", state="signed-state")
        )

        assert isinstance(result, Failure)
        assert result.error.error.stage == "user_store"
        assert result.error.error.code == ErrorCode.STORE_OPERATION_FAILED
        flow.token_service.generate_access_token.assert_not_called()

    @pytest.mark.asyncio
    async def test_insert_failure_without_winner_fails(self, flow):
        flow.user_repo.find_by_email.side_effect = [None, None]
        flow.user_repo.save.side_effect = RuntimeError("constraint")

        result = await flow.handler.handle(
            CompleteAuthorization(code="auth-code", state="signed-state")
        )

        assert isinstance(result, Failure)
        assert result.error.error.stage == "user_store"
        flow.token_service.generate_access_token.assert_not_called()
