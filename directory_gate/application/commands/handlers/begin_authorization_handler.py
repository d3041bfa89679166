"""BeginAuthorization command handler.

Builds the provider authorization URL. The requested return URL is checked
against the allow-list, wrapped in a signed state token and sent through
the provider round trip. Nothing is stored and the provider is not
contacted.
"""

from collections.abc import Sequence

from directory_gate.application.commands.identity_commands import BeginAuthorization
from directory_gate.application.errors import ApplicationError
from directory_gate.application.services.redirect_urls import resolve_return_url
from directory_gate.core.result import Result, Success
from directory_gate.domain.protocols import IdentityProviderProtocol, StateTokenProtocol


class BeginAuthorizationHandler:
    """Handler for BeginAuthorization command."""

    def __init__(
        self,
        identity_provider: IdentityProviderProtocol,
        state_codec: StateTokenProtocol,
        default_return_url: str,
        return_url_allowlist: Sequence[str] = (),
    ) -> None:
        """Initialize handler.

        Args:
            identity_provider: Provider adapter (builds the URL).
            state_codec: Signs the return URL into the state parameter.
            default_return_url: Used when no acceptable return URL is given.
            return_url_allowlist: Allowed return origins (empty = any).
        """
        self._identity_provider = identity_provider
        self._state_codec = state_codec
        self._default_return_url = default_return_url
        self._return_url_allowlist = return_url_allowlist

    async def handle(self, cmd: BeginAuthorization) -> Result[str, ApplicationError]:
        """Return Success(authorization_url). This operation cannot fail."""
        return_url = resolve_return_url(
            cmd.return_url, self._default_return_url, self._return_url_allowlist
        )
        state = self._state_codec.encode(return_url)
        return Success(value=self._identity_provider.build_authorization_url(state))
