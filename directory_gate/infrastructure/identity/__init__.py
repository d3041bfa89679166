"""Identity provider adapters (Zoho Accounts and Zoho People)."""

from directory_gate.infrastructure.identity.id_token_verifier import (
    JwksIdTokenVerifier,
    UnverifiedIdTokenDecoder,
)
from directory_gate.infrastructure.identity.state_token_codec import StateTokenCodec
from directory_gate.infrastructure.identity.zoho_identity_provider import (
    ZohoIdentityConfig,
    ZohoIdentityProvider,
)

__all__ = [
    "JwksIdTokenVerifier",
    "StateTokenCodec",
    "UnverifiedIdTokenDecoder",
    "ZohoIdentityConfig",
    "ZohoIdentityProvider",
]
