"""Bearer credential authentication dependencies.

Every protected route depends on ``AuthenticatedUser``. Verification is a
pure function of the credential and the signing secret: no database
lookup, no revocation list. Any failure is reported as the same 401.

Usage:
    @router.get("/getLegacyData")
    async def get_legacy_data(current_user: AuthenticatedUser):
        ...
"""

from dataclasses import dataclass
from typing import Annotated
from uuid import UUID

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from directory_gate.core.container import get_token_service
from directory_gate.core.result import Failure, Success
from directory_gate.domain.protocols.token_generation_protocol import (
    TokenGenerationProtocol,
)
from directory_gate.domain.value_objects import AuthenticatedCaller

UNAUTHENTICATED_DETAIL = "Invalid or missing authentication credentials"

# auto_error=False so a missing header yields our 401, not FastAPI's 403
bearer_scheme = HTTPBearer(auto_error=False)


@dataclass(frozen=True, slots=True, kw_only=True)
class CurrentUser:
    """Authenticated user information from the bearer credential.

    Attributes:
        user_id: Local user ID ('sub' claim).
        email: Email ('email' claim).
        name: Display name ('name' claim).
        token_jti: Credential ID ('jti' claim), if present.
    """

    user_id: UUID
    email: str
    name: str
    token_jti: str | None = None

    def as_caller(self) -> AuthenticatedCaller:
        """Caller identity passed into commands and queries."""
        return AuthenticatedCaller(user_id=self.user_id, email=self.email, name=self.name)


def _unauthenticated() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=UNAUTHENTICATED_DETAIL,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ],
    token_service: Annotated[TokenGenerationProtocol, Depends(get_token_service)],
) -> CurrentUser:
    """Get current authenticated user from the bearer credential.

    Raises:
        HTTPException 401: Missing, malformed, expired or tampered credential.
    """
    if credentials is None or not credentials.credentials:
        raise _unauthenticated()

    match token_service.validate_access_token(credentials.credentials):
        case Success(value=payload):
            try:
                jti_raw = payload.get("jti")
                return CurrentUser(
                    user_id=UUID(str(payload["sub"])),
                    email=str(payload["email"]),
                    name=str(payload["name"]),
                    token_jti=str(jti_raw) if jti_raw else None,
                )
            except (KeyError, ValueError) as e:
                raise _unauthenticated() from e
        case Failure():
            raise _unauthenticated()


AuthenticatedUser = Annotated[CurrentUser, Depends(get_current_user)]
