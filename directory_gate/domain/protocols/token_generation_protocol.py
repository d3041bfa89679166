"""Token generation protocol for the bearer session credential.

Architecture:
    - Domain defines protocol (port)
    - Infrastructure implements adapter (JWTService)
    - No framework dependencies in domain

Token Strategy:
    - Self-contained HS256 JWT with a fixed one-hour lifetime
    - No refresh, no revocation, no database lookup on validation
"""

from typing import Any, Protocol
from uuid import UUID

from directory_gate.core.result import Result


class TokenGenerationProtocol(Protocol):
    """Bearer credential generation and validation interface.

    Usage:
        token = token_service.generate_access_token(
            user_id=user.id,
            email=user.email,
            name=user.name,
        )

        match token_service.validate_access_token(token):
            case Success(value=payload):
                user_id = payload["sub"]
            case Failure(error=error):
                # Invalid, expired or tampered
                pass
    """

    def generate_access_token(self, user_id: UUID, email: str, name: str) -> str:
        """Mint a bearer credential.

        Args:
            user_id: Local user ID (stored in 'sub' claim).
            email: User's email address.
            name: User's display name.

        Returns:
            Encoded JWT.
        """
        ...

    def validate_access_token(self, token: str) -> Result[dict[str, Any], str]:
        """Validate a bearer credential and extract its payload.

        Args:
            token: Encoded JWT.

        Returns:
            Success with the payload ("sub", "email", "name", "iat", "exp",
            "jti") or Failure with a short reason string. Never raises.
        """
        ...
