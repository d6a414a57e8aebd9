"""Tests for application settings."""

from veloraswap.config import Settings, get_settings


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self):
        settings = Settings(_env_file=None, velora_api_url="https://api.velora.xyz")

        assert settings.velora_api_version == "6.2"
        assert settings.default_slippage == 0.5
        assert settings.http_timeout == 30.0
        assert settings.velora_ignore_checks is False

    def test_is_production(self):
        assert Settings(environment="Production").is_production
        assert not Settings(environment="test").is_production

    def test_environment_overrides(self):
        settings = get_settings()

        assert settings.environment == "test"
        assert settings.velora_api_url == "https://velora.test"

    def test_safe_dict(self):
        data = Settings(velora_partner="acme").get_safe_dict()

        assert data["velora"]["partner"] == "acme"
        assert data["default_slippage"] == 0.5
