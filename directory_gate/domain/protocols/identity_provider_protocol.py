"""Identity provider protocol for delegated staff login.

Login is a three-step exchange with an external identity provider:

1. build_authorization_url: where to send the browser (no network call)
2. exchange_code: trade the authorization code for provider tokens
3. lookup_employee: confirm the person is in the employee directory

Identity token verification is a separate port (IdTokenVerifierProtocol)
so key discovery can be swapped or disabled independently.

All failures are returned as IdentityProviderError subtypes in a Result;
adapters never raise for provider-side problems.

Reference:
    - directory_gate/domain/errors/identity_error.py
"""

from dataclasses import dataclass
from typing import Protocol

from directory_gate.core.result import Result
from directory_gate.domain.errors import IdentityProviderError


@dataclass(frozen=True, kw_only=True)
class IdentityTokens:
    """Tokens returned by the provider's token endpoint.

    Attributes:
        access_token: Provider API access token (used for the directory lookup).
        id_token: Signed OpenID Connect identity token.
        expires_in: Access token lifetime in seconds, if reported.
    """

    access_token: str
    id_token: str
    expires_in: int | None = None


@dataclass(frozen=True, kw_only=True)
class EmployeeRecord:
    """Employee directory entry confirming eligibility.

    Attributes:
        email: Email exactly as held by the employee directory.
        name: Display name ("First Last", trimmed).
    """

    email: str
    name: str


class IdentityProviderProtocol(Protocol):
    """Delegated identity provider port."""

    @property
    def provider_name(self) -> str:
        """Provider slug used in logs and errors (e.g. "zoho")."""
        ...

    def build_authorization_url(self, state: str) -> str:
        """Build the provider authorization URL for the browser redirect.

        Args:
            state: Opaque state token to round-trip.

        Returns:
            Full authorization URL.
        """
        ...

    async def exchange_code(
        self, code: str
    ) -> Result[IdentityTokens, IdentityProviderError]:
        """Exchange an authorization code for provider tokens.

        Single attempt; authorization codes are single-use.
        """
        ...

    async def lookup_employee(
        self, access_token: str, email: str
    ) -> Result[EmployeeRecord, IdentityProviderError]:
        """Find exactly one employee directory record for the email."""
        ...


class IdTokenVerifierProtocol(Protocol):
    """Identity token verification port."""

    async def extract_email(self, id_token: str) -> Result[str, IdentityProviderError]:
        """Verify the identity token and return its email claim.

        Returns:
            Success with the email, or Failure(IdentityTokenError) if the token
            is invalid, the email is missing, or the email is unverified.
        """
        ...
