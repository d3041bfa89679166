"""CompleteAuthorization command handler (provider callback).

Flow:
1. Recover the return URL from the state token (default on any problem)
2. Exchange the authorization code for provider tokens (single attempt)
3. Verify the identity token and read its email
4. Confirm exactly one employee directory record for that email
5. Get or create the local user (first login creates it)
6. Mint the bearer credential

Every failure produces the same caller-visible outcome (a redirect with a
failure marker). The cause is only logged, as ``zoho_login_failed`` with
the failing stage.

Architecture:
- Application layer only; provider, verifier, repositories and token
  service are injected via protocols
"""

from dataclasses import dataclass
from datetime import UTC, datetime

from uuid_extensions import uuid7

from directory_gate.application.commands.identity_commands import (
    CompleteAuthorization,
)
from directory_gate.core.enums import ErrorCode
from directory_gate.core.result import Failure, Result, Success
from directory_gate.domain.entities.user import User
from directory_gate.domain.errors import (
    IdentityAccessDeniedError,
    IdentityCodeExchangeError,
    IdentityProviderError,
)
from directory_gate.domain.protocols import (
    EmployeeRecord,
    IdentityProviderProtocol,
    IdTokenVerifierProtocol,
    LoggerProtocol,
    StateTokenProtocol,
    TokenGenerationProtocol,
    UserRepository,
)


@dataclass(frozen=True, kw_only=True)
class CompletedAuthorization:
    """Successful login.

    Attributes:
        return_url: Frontend URL to send the browser to.
        access_token: Freshly minted bearer credential.
        user: Local user the credential was issued for.
    """

    return_url: str
    access_token: str
    user: User


@dataclass(frozen=True, kw_only=True)
class FailedAuthorization:
    """Failed login.

    Attributes:
        return_url: Frontend URL to send the browser to.
        error: What went wrong (server-side only).
    """

    return_url: str
    error: IdentityProviderError


class CompleteAuthorizationHandler:
    """Handler for CompleteAuthorization command."""

    def __init__(
        self,
        identity_provider: IdentityProviderProtocol,
        id_token_verifier: IdTokenVerifierProtocol,
        state_codec: StateTokenProtocol,
        user_repo: UserRepository,
        token_service: TokenGenerationProtocol,
        logger: LoggerProtocol,
        default_return_url: str,
    ) -> None:
        self._identity_provider = identity_provider
        self._id_token_verifier = id_token_verifier
        self._state_codec = state_codec
        self._user_repo = user_repo
        self._token_service = token_service
        self._logger = logger
        self._default_return_url = default_return_url

    async def handle(
        self, cmd: CompleteAuthorization
    ) -> Result[CompletedAuthorization, FailedAuthorization]:
        """Handle the provider callback.

        Returns:
            Success(CompletedAuthorization) with the credential and return URL.
            Failure(FailedAuthorization) with the return URL and the cause.
        """
        return_url = self._state_codec.decode(cmd.state) or self._default_return_url

        result = await self._authenticate(cmd)

        match result:
            case Success(value=user):
                access_token = self._token_service.generate_access_token(
                    user_id=user.id,
                    email=user.email,
                    name=user.name,
                )
                self._logger.info(
                    "zoho_login_succeeded",
                    provider=self._identity_provider.provider_name,
                    user_id=str(user.id),
                )
                return Success(
                    value=CompletedAuthorization(
                        return_url=return_url,
                        access_token=access_token,
                        user=user,
                    )
                )
            case Failure(error=error):
                self._logger.warning(
                    "zoho_login_failed",
                    provider=error.provider_name,
                    stage=error.stage,
                    error_code=error.code.value,
                    error_message=error.message,
                )
                return Failure(
                    error=FailedAuthorization(return_url=return_url, error=error)
                )

    async def _authenticate(
        self, cmd: CompleteAuthorization
    ) -> Result[User, IdentityProviderError]:
        provider_name = self._identity_provider.provider_name

        if cmd.provider_error:
            return Failure(
                error=IdentityAccessDeniedError(
                    code=ErrorCode.IDENTITY_ACCESS_DENIED,
                    message=f"Provider returned error: {cmd.provider_error}",
                    provider_name=provider_name,
                )
            )

        if not cmd.code:
            return Failure(
                error=IdentityCodeExchangeError(
                    code=ErrorCode.IDENTITY_CODE_EXCHANGE_FAILED,
                    message="Callback carried no authorization code",
                    provider_name=provider_name,
                )
            )

        tokens_result = await self._identity_provider.exchange_code(cmd.code)
        if isinstance(tokens_result, Failure):
            return tokens_result
        tokens = tokens_result.value

        email_result = await self._id_token_verifier.extract_email(tokens.id_token)
        if isinstance(email_result, Failure):
            return email_result

        employee_result = await self._identity_provider.lookup_employee(
            tokens.access_token, email_result.value
        )
        if isinstance(employee_result, Failure):
            return employee_result

        return await self._get_or_create_user(employee_result.value)

    async def _get_or_create_user(
        self, employee: EmployeeRecord
    ) -> Result[User, IdentityProviderError]:
        try:
            existing = await self._user_repo.find_by_email(employee.email)
            if existing is not None:
                return Success(value=existing)

            user = User(
                id=uuid7(),
                email=employee.email,
                name=employee.name,
                created_at=datetime.now(UTC),
            )
            try:
                await self._user_repo.save(user)
            except Exception:
                # Lost a concurrent first-login race: the winner's row is authoritative.
                winner = await self._user_repo.find_by_email(employee.email)
                if winner is None:
                    raise
                return Success(value=winner)
        except Exception as e:
            return Failure(
                error=IdentityProviderError(
                    code=ErrorCode.STORE_OPERATION_FAILED,
                    message=f"Failed to resolve local user: {e}",
                    provider_name=self._identity_provider.provider_name,
                    stage="user_store",
                )
            )

        self._logger.info("user_created", user_id=str(user.id))
        return Success(value=user)
