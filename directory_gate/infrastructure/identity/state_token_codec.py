"""Signed OAuth state token (StateTokenProtocol adapter).

The return URL rides through the provider round trip inside a short-lived
HS256 JWT. The ``aud`` claim keeps state tokens and bearer credentials
from being accepted in each other's place.
"""

from datetime import UTC, datetime, timedelta

import jwt
from jwt.exceptions import InvalidTokenError
from uuid_extensions import uuid7

STATE_AUDIENCE = "directory-gate:oauth-state"


class StateTokenCodec:
    """Encode/decode the return URL carried in the OAuth ``state`` parameter.

    Args:
        secret_key: HMAC secret (the application secret key).
        ttl_seconds: State lifetime; a callback arriving later falls back
            to the default return URL.
    """

    def __init__(self, secret_key: str, ttl_seconds: int = 600) -> None:
        self._secret_key = secret_key
        self._ttl_seconds = ttl_seconds
        self._algorithm = "HS256"

    def encode(self, return_url: str) -> str:
        now = datetime.now(UTC)
        payload = {
            "redirect_url": return_url,
            "aud": STATE_AUDIENCE,
            "iat": int(now.timestamp()),
            "exp": int((now + timedelta(seconds=self._ttl_seconds)).timestamp()),
            "nonce": str(uuid7()),
        }
        token: str = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        return token

    def decode(self, state: str | None) -> str | None:
        if not state:
            return None

        try:
            payload = jwt.decode(
                state,
                self._secret_key,
                algorithms=[self._algorithm],
                audience=STATE_AUDIENCE,
            )
        except InvalidTokenError:
            return None

        redirect_url = payload.get("redirect_url")
        if not isinstance(redirect_url, str) or not redirect_url:
            return None
        return redirect_url
