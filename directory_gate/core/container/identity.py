"""Identity provider dependency factories (Zoho).

Provider configuration is built once from settings and injected into the
adapters; nothing in the application layer reads settings directly.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from directory_gate.core.config import settings

if TYPE_CHECKING:
    from directory_gate.domain.protocols.identity_provider_protocol import (
        IdentityProviderProtocol,
        IdTokenVerifierProtocol,
    )
    from directory_gate.infrastructure.identity import ZohoIdentityConfig


@lru_cache()
def get_zoho_config() -> "ZohoIdentityConfig":
    """Get Zoho client configuration singleton."""
    from directory_gate.infrastructure.identity import ZohoIdentityConfig

    return ZohoIdentityConfig(
        client_id=settings.zoho_client_id,
        client_secret=settings.zoho_client_secret,
        redirect_uri=settings.zoho_redirect_uri,
        accounts_url=settings.zoho_accounts_url,
        people_url=settings.zoho_people_url,
        scopes=settings.zoho_scopes,
        timeout_seconds=settings.zoho_timeout_seconds,
    )


@lru_cache()
def get_identity_provider() -> "IdentityProviderProtocol":
    """Get identity provider adapter singleton (Zoho)."""
    from directory_gate.infrastructure.identity import ZohoIdentityProvider

    return ZohoIdentityProvider(config=get_zoho_config())


@lru_cache()
def get_id_token_verifier() -> "IdTokenVerifierProtocol":
    """Get identity token verifier singleton.

    Verifies against the Zoho JWKS unless ZOHO_VERIFY_ID_TOKEN is false.
    The JWKS client caches signing keys, so it must stay a singleton.
    """
    from directory_gate.infrastructure.identity import (
        JwksIdTokenVerifier,
        UnverifiedIdTokenDecoder,
    )

    if not settings.zoho_verify_id_token:
        return UnverifiedIdTokenDecoder()

    config = get_zoho_config()
    return JwksIdTokenVerifier(
        jwks_url=config.jwks_url,
        audience=config.client_id,
        issuer=config.accounts_url,
        timeout_seconds=config.timeout_seconds,
    )
