"""OAuth state token protocol.

The state parameter is the only thing that survives the browser round trip
to the identity provider. It carries the frontend return URL; there is no
server-side login session.
"""

from typing import Protocol


class StateTokenProtocol(Protocol):
    """Encode and recover the return URL carried through the OAuth state."""

    def encode(self, return_url: str) -> str:
        """Wrap a return URL into an opaque, signed, short-lived state token."""
        ...

    def decode(self, state: str | None) -> str | None:
        """Recover the return URL.

        Returns:
            The return URL, or None if the state is missing, malformed,
            expired or tampered with.
        """
        ...
