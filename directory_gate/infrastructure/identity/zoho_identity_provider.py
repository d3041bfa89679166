"""Zoho identity provider implementing IdentityProviderProtocol.

Handles the authorization redirect, the authorization-code exchange at Zoho
Accounts, and the employee lookup in Zoho People.

Zoho API Documentation:
    - OAuth: https://www.zoho.com/accounts/protocol/oauth/web-server-applications.html
    - People forms API: https://www.zoho.com/people/api/get-records.html

Configuration is passed in as ZohoIdentityConfig (built by the container
from settings):
    - client_id / client_secret / redirect_uri
    - accounts_url: e.g. https://accounts.zoho.com
    - people_url: e.g. https://people.zoho.com
    - scopes, timeout_seconds

Every outbound call is a single attempt bounded by timeout_seconds.
"""

from dataclasses import dataclass
from typing import Any
from urllib.parse import urlencode

import httpx
import structlog

from directory_gate.core.enums import ErrorCode
from directory_gate.core.result import Failure, Result, Success
from directory_gate.domain.errors import (
    IdentityCodeExchangeError,
    IdentityEmployeeLookupError,
    IdentityInvalidResponseError,
    IdentityProviderError,
    IdentityProviderUnavailableError,
)
from directory_gate.domain.protocols.identity_provider_protocol import (
    EmployeeRecord,
    IdentityTokens,
)

logger = structlog.get_logger(__name__)

EMPLOYEE_VIEW_PATH = "/people/api/forms/P_EmployeeView/records"
EMPLOYEE_EMAIL_FIELD = "Email ID"
EMPLOYEE_SEARCH_COLUMN = "EMPLOYEEMAILALIAS"


@dataclass(frozen=True, kw_only=True)
class ZohoIdentityConfig:
    """Zoho OAuth client configuration.

    Attributes:
        client_id: OAuth client ID.
        client_secret: OAuth client secret.
        redirect_uri: Registered callback URL.
        accounts_url: Zoho Accounts base URL (no trailing slash).
        people_url: Zoho People base URL (no trailing slash).
        scopes: Comma-separated scopes.
        timeout_seconds: Per-call timeout.
    """

    client_id: str
    client_secret: str
    redirect_uri: str
    accounts_url: str = "https://accounts.zoho.com"
    people_url: str = "https://people.zoho.com"
    scopes: str = "profile,email,ZOHOPEOPLE.forms.ALL"
    timeout_seconds: float = 10.0

    @property
    def authorize_url(self) -> str:
        return f"{self.accounts_url}/oauth/v2/auth"

    @property
    def token_url(self) -> str:
        return f"{self.accounts_url}/oauth/v2/token"

    @property
    def jwks_url(self) -> str:
        return f"{self.accounts_url}/oauth/v2/keys"

    @property
    def employee_view_url(self) -> str:
        return f"{self.people_url}{EMPLOYEE_VIEW_PATH}"


class ZohoIdentityProvider:
    """Zoho adapter implementing IdentityProviderProtocol.

    Example:
        >>> provider = ZohoIdentityProvider(config=config)
        >>> url = provider.build_authorization_url(state)
        >>> result = await provider.exchange_code(code)
    """

    def __init__(self, *, config: ZohoIdentityConfig) -> None:
        """Initialize Zoho provider.

        Args:
            config: Zoho client configuration.
        """
        self._config = config
        self._timeout = httpx.Timeout(config.timeout_seconds)

    @property
    def provider_name(self) -> str:
        return "zoho"

    def build_authorization_url(self, state: str) -> str:
        """Build the Zoho authorization URL (no network call)."""
        params = {
            "response_type": "code",
            "client_id": self._config.client_id,
            "scope": self._config.scopes,
            "redirect_uri": self._config.redirect_uri,
            "access_type": "offline",
            "state": state,
        }
        return f"{self._config.authorize_url}?{urlencode(params)}"

    async def exchange_code(
        self, code: str
    ) -> Result[IdentityTokens, IdentityProviderError]:
        """Exchange an authorization code for an access token and identity token.

        Returns:
            Success(IdentityTokens) on a 200 response with both tokens.
            Failure(IdentityCodeExchangeError): Code rejected (400/401, or an
                ``error`` field in a 200 body).
            Failure(IdentityProviderUnavailableError): Timeout, connection
                error or 5xx.
            Failure(IdentityInvalidResponseError): Anything else unexpected.
        """
        logger.info("zoho_token_exchange_started", provider=self.provider_name)

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.post(
                    self._config.token_url,
                    params={
                        "grant_type": "authorization_code",
                        "client_id": self._config.client_id,
                        "client_secret": self._config.client_secret,
                        "redirect_uri": self._config.redirect_uri,
                        "code": code,
                    },
                )
        except httpx.TimeoutException as e:
            logger.warning(
                "zoho_token_exchange_timeout",
                provider=self.provider_name,
                error=str(e),
            )
            return Failure(
                error=self._unavailable("Zoho token request timed out", "code_exchange")
            )
        except httpx.RequestError as e:
            logger.warning(
                "zoho_token_exchange_connection_error",
                provider=self.provider_name,
                error=str(e),
            )
            return Failure(
                error=self._unavailable(
                    f"Failed to connect to Zoho Accounts: {e}", "code_exchange"
                )
            )

        return self._handle_token_response(response)

    def _handle_token_response(
        self, response: httpx.Response
    ) -> Result[IdentityTokens, IdentityProviderError]:
        if response.status_code in (400, 401):
            logger.warning(
                "zoho_token_exchange_rejected",
                provider=self.provider_name,
                status_code=response.status_code,
            )
            return Failure(
                error=IdentityCodeExchangeError(
                    code=ErrorCode.IDENTITY_CODE_EXCHANGE_FAILED,
                    message=f"Zoho rejected the authorization code: {response.text[:200]}",
                    provider_name=self.provider_name,
                )
            )

        if response.status_code >= 500:
            logger.warning(
                "zoho_token_exchange_server_error",
                provider=self.provider_name,
                status_code=response.status_code,
            )
            return Failure(
                error=self._unavailable(
                    f"Zoho Accounts server error: {response.status_code}",
                    "code_exchange",
                    status_code=response.status_code,
                )
            )

        if response.status_code != 200:
            logger.warning(
                "zoho_token_exchange_unexpected_status",
                provider=self.provider_name,
                status_code=response.status_code,
            )
            return Failure(
                error=self._invalid_response(
                    f"Unexpected response from Zoho Accounts: {response.status_code}",
                    "code_exchange",
                    response,
                )
            )

        data = self._parse_json(response)
        if not isinstance(data, dict):
            return Failure(
                error=self._invalid_response(
                    "Invalid JSON response from Zoho Accounts", "code_exchange", response
                )
            )

        # Zoho reports a bad code with HTTP 200 and an error field.
        if "error" in data:
            logger.warning(
                "zoho_token_exchange_rejected",
                provider=self.provider_name,
                provider_error=str(data["error"]),
            )
            return Failure(
                error=IdentityCodeExchangeError(
                    code=ErrorCode.IDENTITY_CODE_EXCHANGE_FAILED,
                    message=f"Zoho rejected the authorization code: {data['error']}",
                    provider_name=self.provider_name,
                )
            )

        try:
            tokens = IdentityTokens(
                access_token=data["access_token"],
                id_token=data["id_token"],
                expires_in=data.get("expires_in"),
            )
        except KeyError as e:
            logger.error(
                "zoho_token_exchange_missing_field",
                provider=self.provider_name,
                missing_field=str(e),
            )
            return Failure(
                error=self._invalid_response(
                    f"Missing required field in Zoho token response: {e}",
                    "code_exchange",
                    response,
                )
            )

        logger.info(
            "zoho_token_exchange_succeeded",
            provider=self.provider_name,
            expires_in=tokens.expires_in,
        )
        return Success(value=tokens)

    async def lookup_employee(
        self, access_token: str, email: str
    ) -> Result[EmployeeRecord, IdentityProviderError]:
        """Find the single Zoho People employee record for an email.

        Records returned by the search are matched on ``Email ID``
        (case-insensitive). Exactly one match is required.

        Returns:
            Success(EmployeeRecord) with the directory's email and "First Last" name.
            Failure(IdentityEmployeeLookupError): Zero or several matches.
            Failure(IdentityProviderUnavailableError): Timeout, connection
                error or 5xx.
            Failure(IdentityInvalidResponseError): Unexpected status or body.
        """
        logger.info("zoho_employee_lookup_started", provider=self.provider_name)

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.get(
                    self._config.employee_view_url,
                    headers={"Authorization": f"Zoho-oauthtoken {access_token}"},
                    params={
                        "searchColumn": EMPLOYEE_SEARCH_COLUMN,
                        "searchValue": email,
                    },
                )
        except httpx.TimeoutException as e:
            logger.warning(
                "zoho_employee_lookup_timeout",
                provider=self.provider_name,
                error=str(e),
            )
            return Failure(
                error=self._unavailable("Zoho People request timed out", "directory_lookup")
            )
        except httpx.RequestError as e:
            logger.warning(
                "zoho_employee_lookup_connection_error",
                provider=self.provider_name,
                error=str(e),
            )
            return Failure(
                error=self._unavailable(
                    f"Failed to connect to Zoho People: {e}", "directory_lookup"
                )
            )

        if response.status_code >= 500:
            return Failure(
                error=self._unavailable(
                    f"Zoho People server error: {response.status_code}",
                    "directory_lookup",
                    status_code=response.status_code,
                )
            )

        if response.status_code != 200:
            logger.warning(
                "zoho_employee_lookup_unexpected_status",
                provider=self.provider_name,
                status_code=response.status_code,
            )
            return Failure(
                error=self._invalid_response(
                    f"Unexpected response from Zoho People: {response.status_code}",
                    "directory_lookup",
                    response,
                )
            )

        data = self._parse_json(response)
        if not isinstance(data, list):
            return Failure(
                error=self._invalid_response(
                    "Zoho People did not return a record list",
                    "directory_lookup",
                    response,
                )
            )

        return self._match_employee(data, email)

    def _match_employee(
        self, records: list[Any], email: str
    ) -> Result[EmployeeRecord, IdentityProviderError]:
        """Pick the employee record for a login email.

        The search already matches aliases, so a single hit is accepted even
        when its primary ``Email ID`` differs from the login email. Several
        hits are narrowed to the one whose ``Email ID`` equals the login
        email, if exactly one does.
        """
        matches = [record for record in records if isinstance(record, dict)]
        if len(matches) > 1:
            wanted = email.strip().lower()
            matches = [
                record
                for record in matches
                if str(record.get(EMPLOYEE_EMAIL_FIELD, "")).strip().lower() == wanted
            ] or matches

        if len(matches) != 1:
            logger.warning(
                "zoho_employee_lookup_no_unique_match",
                provider=self.provider_name,
                record_count=len(records),
                match_count=len(matches),
            )
            return Failure(
                error=IdentityEmployeeLookupError(
                    code=(
                        ErrorCode.IDENTITY_EMPLOYEE_NOT_FOUND
                        if not matches
                        else ErrorCode.IDENTITY_EMPLOYEE_AMBIGUOUS
                    ),
                    message=(
                        "User not found in Zoho People"
                        if not matches
                        else "Several Zoho People records share this email"
                    ),
                    provider_name=self.provider_name,
                    match_count=len(matches),
                )
            )

        record = matches[0]
        first_name = str(record.get("First Name") or "")
        last_name = str(record.get("Last Name") or "")
        primary_email = str(record.get(EMPLOYEE_EMAIL_FIELD) or "").strip()

        logger.info("zoho_employee_lookup_succeeded", provider=self.provider_name)
        return Success(
            value=EmployeeRecord(
                email=primary_email or email.strip(),
                name=f"{first_name} {last_name}".strip(),
            )
        )

    def _parse_json(self, response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            logger.error(
                "zoho_invalid_json",
                provider=self.provider_name,
                error=str(e),
            )
            return None

    def _unavailable(
        self, message: str, stage: str, status_code: int | None = None
    ) -> IdentityProviderUnavailableError:
        return IdentityProviderUnavailableError(
            code=ErrorCode.IDENTITY_PROVIDER_UNAVAILABLE,
            message=message,
            provider_name=self.provider_name,
            stage=stage,
            status_code=status_code,
        )

    def _invalid_response(
        self, message: str, stage: str, response: httpx.Response
    ) -> IdentityInvalidResponseError:
        return IdentityInvalidResponseError(
            code=ErrorCode.IDENTITY_INVALID_RESPONSE,
            message=message,
            provider_name=self.provider_name,
            stage=stage,
            response_body=response.text[:500],
        )
