"""Unit tests for settings."""

import pytest
from pydantic import ValidationError

from dealerdesk.config import Settings
from dealerdesk.core.constants import DEFAULT_INSECURE_SECRET


class TestSettings:
    def test_base_domains_are_normalized(self):
        settings = Settings(tenant_base_domains=[" .App.Example ", "", "localhost"])

        assert settings.tenant_base_domains == ["app.example", "localhost"]
        assert settings.primary_base_domain == "app.example"

    def test_primary_base_domain_fallback(self):
        assert Settings(tenant_base_domains=[]).primary_base_domain == "localhost"

    def test_short_secret_key_rejected(self):
        with pytest.raises(ValidationError):
            Settings(secret_key="too-short")

    def test_insecure_secret_rejected_in_production(self):
        settings = Settings(environment="production", secret_key=DEFAULT_INSECURE_SECRET)

        with pytest.raises(ValueError, match="SECRET_KEY"):
            _ = settings.is_production

    def test_async_database_url(self):
        settings = Settings(database_url="postgresql://u:p@db:5432/dealerdesk")

        assert settings.async_database_url == "postgresql+asyncpg://u:p@db:5432/dealerdesk"
