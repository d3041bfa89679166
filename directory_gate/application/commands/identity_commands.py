"""Delegated login commands."""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class BeginAuthorization:
    """Start a login.

    Attributes:
        return_url: Where the frontend wants to land afterwards (optional).
    """

    return_url: str | None = None


@dataclass(frozen=True, kw_only=True)
class CompleteAuthorization:
    """Finish a login from the provider callback.

    Attributes:
        code: Authorization code (absent when the provider reports an error).
        state: Opaque state token issued by BeginAuthorization.
        provider_error: ``error`` query parameter sent by the provider, if any.
    """

    code: str | None = None
    state: str | None = None
    provider_error: str | None = None
