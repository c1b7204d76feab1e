"""Application settings using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Luna configuration from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra env vars
    )

    # Application
    app_name: str = Field(default="Luna", description="Application name")
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Minimum log level"
    )

    # Helius
    helius_api_key: SecretStr = Field(default=SecretStr(""), description="Helius API key")
    helius_cluster: Literal["mainnet", "devnet", "testnet"] = Field(
        default="mainnet", description="Solana cluster served by Helius"
    )

    # HTTP transport
    rpc_timeout: float = Field(default=30.0, gt=0, description="Request timeout in seconds")
    rpc_max_retries: int = Field(default=3, ge=1, description="Attempts per RPC request")

    # Circuit Breaker
    circuit_breaker_threshold: int = Field(
        default=5, ge=1, description="Failures before circuit opens"
    )
    circuit_breaker_cooldown: int = Field(
        default=30, ge=1, description="Seconds before half-open"
    )

    # Transaction confirmation polling
    confirmation_timeout_ms: int = Field(
        default=60_000, ge=0, description="Max wait for confirmation in milliseconds"
    )
    confirmation_interval_ms: int = Field(
        default=2_000, ge=1, description="Delay between status lookups in milliseconds"
    )

    # Jito
    jito_tip_floor_url: str = Field(
        default="https://bundles.jito.wtf/api/v1/bundles/tip_floor",
        description="Jito tip floor endpoint",
    )

    @field_validator("jito_tip_floor_url")
    @classmethod
    def validate_jito_tip_floor_url(cls, v: str) -> str:
        """Validate Jito tip floor URL format."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("Jito tip floor URL must start with http:// or https://")
        return v


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
