"""JWT bearer credential service (adapter).

Implements TokenGenerationProtocol using PyJWT with HMAC-SHA256.

Security:
    - HS256, 256-bit secret key minimum
    - Fixed lifetime (one hour by default), no refresh, no revocation
    - Unique JWT ID (jti) per credential
"""

from datetime import UTC, datetime, timedelta
from typing import Any
from uuid import UUID

import jwt
from jwt.exceptions import InvalidTokenError
from uuid_extensions import uuid7

from directory_gate.core.result import Failure, Result, Success

INVALID_TOKEN = "Invalid or expired token"

_REQUIRED_CLAIMS = ["sub", "email", "name", "exp", "iat"]


class JWTService:
    """Bearer credential generation and validation.

    Usage:
        token_service: TokenGenerationProtocol = get_token_service()

        token = token_service.generate_access_token(
            user_id=user.id, email=user.email, name=user.name
        )
        result = token_service.validate_access_token(token)
    """

    def __init__(self, secret_key: str, expiration_minutes: int = 60) -> None:
        """Initialize JWT service.

        Args:
            secret_key: HMAC secret, at least 32 bytes.
            expiration_minutes: Credential lifetime.

        Raises:
            ValueError: If secret_key is shorter than 32 bytes.
        """
        if len(secret_key.encode("utf-8")) < 32:
            msg = "JWT secret key must be at least 32 bytes (256 bits)"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._expiration_minutes = expiration_minutes
        self._algorithm = "HS256"

    def generate_access_token(self, user_id: UUID, email: str, name: str) -> str:
        """Mint a bearer credential.

        Example:
            >>> service = JWTService(secret_key="x" * 32)
            >>> token = service.generate_access_token(
            ...     user_id=uuid7(), email="jane@example.com", name="Jane Doe"
            ... )
            >>> len(token.split("."))
            3
        """
        now = datetime.now(UTC)
        expires_at = now + timedelta(minutes=self._expiration_minutes)

        payload = {
            "sub": str(user_id),
            "email": email,
            "name": name,
            "iat": int(now.timestamp()),
            "exp": int(expires_at.timestamp()),
            "jti": str(uuid7()),
        }

        token: str = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        return token

    def validate_access_token(self, token: str) -> Result[dict[str, Any], str]:
        """Validate a bearer credential and extract its payload.

        Signature, expiry and presence of the identity claims are checked.
        Every failure yields the same error string.
        """
        try:
            payload: dict[str, Any] = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": _REQUIRED_CLAIMS},
            )
        except InvalidTokenError:
            return Failure(error=INVALID_TOKEN)

        return Success(value=payload)
