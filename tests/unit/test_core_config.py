"""Unit tests for Settings parsing."""

import pytest

from directory_gate.core.config import Settings
from directory_gate.core.enums import Environment

REQUIRED = {
    "database_url": "sqlite+aiosqlite:///:memory:",
    "secret_key": "s" * 32,
    "default_frontend_url": "https://app.example.com/",
    "zoho_client_id": "cid",
    "zoho_client_secret": "csecret",
    "zoho_redirect_uri": "https://api.example.com/auth/zoho/callback",
}


def make_settings(**overrides) -> Settings:
    return Settings(**{**REQUIRED, **overrides})


@pytest.mark.unit
class TestSettings:
    def test_url_fields_drop_trailing_slash(self):
        settings = make_settings(zoho_accounts_url="https://accounts.zoho.eu/")

        assert settings.default_frontend_url == "https://app.example.com"
        assert settings.zoho_accounts_url == "https://accounts.zoho.eu"

    def test_cors_origin_list_is_split_and_trimmed(self):
        settings = make_settings(cors_origins="https://a.example.com, https://b.example.com,")

        assert settings.cors_origin_list == [
            "https://a.example.com",
            "https://b.example.com",
        ]

    def test_empty_redirect_allowlist_means_any(self):
        assert make_settings(redirect_allowlist="").redirect_allowlist_origins == []

    def test_redirect_allowlist_is_parsed(self):
        settings = make_settings(redirect_allowlist="https://app.example.com/, myapp://x")

        assert settings.redirect_allowlist_origins == [
            "https://app.example.com",
            "myapp://x",
        ]

    def test_defaults(self):
        settings = make_settings(environment=Environment.PRODUCTION)

        assert settings.access_token_expire_minutes == 60
        assert settings.oauth_state_ttl_seconds == 600
        assert settings.zoho_verify_id_token is True
        assert settings.zoho_timeout_seconds == 10.0
        assert settings.is_production
        assert not settings.is_development
