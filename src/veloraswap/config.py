"""Application configuration using pydantic-settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ======================
    # API
    # ======================
    api_host: str = Field(default="0.0.0.0", description="API server host")
    api_port: int = Field(default=8000, description="API server port")

    # ======================
    # Environment
    # ======================
    environment: str = Field(default="development", description="Runtime environment")
    debug: bool = Field(default=True, description="Enable debug mode")

    # ======================
    # Velora (ParaSwap) aggregator
    # ======================
    velora_api_url: str = Field(
        default="https://api.velora.xyz", description="Velora REST API base URL"
    )
    velora_api_version: str = Field(
        default="6.2", description="Velora contracts version used for pricing"
    )
    velora_partner: str = Field(
        default="veloraswap", description="Partner name reported to Velora"
    )
    velora_ignore_checks: bool = Field(
        default=False,
        description="Skip balance/allowance checks when building swap calldata",
    )
    http_timeout: float = Field(default=30.0, description="Outbound HTTP timeout in seconds")

    # ======================
    # Swap defaults
    # ======================
    default_slippage: float = Field(
        default=0.5, description="Default slippage tolerance in percent (0.5%)"
    )

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    def get_safe_dict(self) -> dict:
        """Return settings dict suitable for health output."""
        return {
            "environment": self.environment,
            "debug": self.debug,
            "api_host": self.api_host,
            "api_port": self.api_port,
            "velora": {
                "api_url": self.velora_api_url,
                "version": self.velora_api_version,
                "partner": self.velora_partner,
                "ignore_checks": self.velora_ignore_checks,
            },
            "http_timeout": self.http_timeout,
            "default_slippage": self.default_slippage,
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
