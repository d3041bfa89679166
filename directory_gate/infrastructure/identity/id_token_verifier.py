"""Identity token verification (IdTokenVerifierProtocol adapters).

JwksIdTokenVerifier checks the RS256 signature against the provider's
published JWKS, plus audience (client ID) and issuer (accounts URL).
UnverifiedIdTokenDecoder only decodes the payload; it exists for
environments that cannot reach the JWKS endpoint
(``ZOHO_VERIFY_ID_TOKEN=false``).

Both reject a token without an ``email`` claim or with
``email_verified`` set to false.
"""

import asyncio
from typing import Any

import jwt
import structlog
from jwt import PyJWKClient
from jwt.exceptions import PyJWTError

from directory_gate.core.enums import ErrorCode
from directory_gate.core.result import Failure, Result, Success
from directory_gate.domain.errors import IdentityProviderError, IdentityTokenError

logger = structlog.get_logger(__name__)

PROVIDER_NAME = "zoho"
SIGNING_ALGORITHMS = ["RS256"]


def _token_error(message: str) -> IdentityTokenError:
    return IdentityTokenError(
        code=ErrorCode.IDENTITY_TOKEN_INVALID,
        message=message,
        provider_name=PROVIDER_NAME,
    )


def _email_from_claims(claims: dict[str, Any]) -> Result[str, IdentityProviderError]:
    email = claims.get("email")
    if not isinstance(email, str) or not email.strip():
        return Failure(error=_token_error("Identity token carries no email claim"))

    verified = claims.get("email_verified")
    if verified is False or (isinstance(verified, str) and verified.lower() == "false"):
        return Failure(error=_token_error("Identity token email is not verified"))

    return Success(value=email.strip())


class JwksIdTokenVerifier:
    """Verify identity tokens against a JWKS endpoint.

    Signing keys are fetched and cached by PyJWKClient. The fetch is
    blocking, so verification runs in a worker thread.

    Args:
        jwks_url: Provider JWKS URL.
        audience: Expected ``aud`` (OAuth client ID).
        issuer: Expected ``iss`` (accounts base URL).
        timeout_seconds: JWKS fetch timeout.
        jwks_client: Pre-built client (tests).
    """

    def __init__(
        self,
        *,
        jwks_url: str,
        audience: str,
        issuer: str,
        timeout_seconds: float = 10.0,
        jwks_client: PyJWKClient | None = None,
    ) -> None:
        self._audience = audience
        self._issuer = issuer
        self._jwks_client = jwks_client or PyJWKClient(
            jwks_url, timeout=int(timeout_seconds)
        )

    async def extract_email(self, id_token: str) -> Result[str, IdentityProviderError]:
        try:
            claims = await asyncio.to_thread(self._decode, id_token)
        except PyJWTError as e:
            logger.warning(
                "id_token_verification_failed",
                provider=PROVIDER_NAME,
                error_type=type(e).__name__,
                error=str(e),
            )
            return Failure(error=_token_error(f"Identity token rejected: {e}"))

        return _email_from_claims(claims)

    def _decode(self, id_token: str) -> dict[str, Any]:
        signing_key = self._jwks_client.get_signing_key_from_jwt(id_token)
        claims: dict[str, Any] = jwt.decode(
            id_token,
            signing_key.key,
            algorithms=SIGNING_ALGORITHMS,
            audience=self._audience,
            issuer=self._issuer,
        )
        return claims


class UnverifiedIdTokenDecoder:
    """Decode identity tokens without checking the signature."""

    async def extract_email(self, id_token: str) -> Result[str, IdentityProviderError]:
        try:
            claims: dict[str, Any] = jwt.decode(
                id_token, options={"verify_signature": False}
            )
        except PyJWTError as e:
            return Failure(error=_token_error(f"Identity token is malformed: {e}"))

        return _email_from_claims(claims)
