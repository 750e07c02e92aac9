"""
Global configuration using Pydantic Settings.
All secrets loaded from environment variables.
"""

from dotenv import load_dotenv
from typing import Literal, Optional
from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env file
load_dotenv()


MAINNET_API_URL = "https://api.hyperliquid.xyz"
TESTNET_API_URL = "https://api.hyperliquid-testnet.xyz"


class ExchangeConfig(BaseSettings):
    """Exchange API configuration."""

    model_config = SettingsConfigDict(env_prefix="EXCHANGE_", extra="ignore")

    base_url: str = Field(
        default=MAINNET_API_URL,
        description="Exchange API base URL"
    )
    timeout_seconds: float = Field(default=10.0, description="HTTP request timeout")

    @property
    def is_mainnet(self) -> bool:
        """Mainnet and testnet sign with different phantom agent sources."""
        return self.base_url.rstrip("/") == MAINNET_API_URL


class SigningConfig(BaseSettings):
    """Signing key configuration."""

    model_config = SettingsConfigDict(env_prefix="SIGNING_", extra="ignore")

    # Wallet credentials (from environment)
    private_key: SecretStr = Field(
        default=SecretStr(""),
        description="Hex-encoded wallet private key"
    )
    vault_address: Optional[str] = Field(
        default=None,
        description="Vault or subaccount address to trade on behalf of"
    )


class LoggingConfig(BaseSettings):
    """Structured logging configuration."""

    model_config = SettingsConfigDict(env_prefix="LOG_", extra="ignore")

    level: Literal["debug", "info", "warning", "error"] = Field(
        default="info",
        description="Minimum log level"
    )
    json_output: bool = Field(default=True, description="Render logs as JSON")


class OrderwireConfig(BaseSettings):
    """Master configuration aggregating all sub-configs."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    environment: Literal["development", "staging", "production"] = Field(
        default="development"
    )
    debug: bool = Field(default=False)

    # Sub-configurations
    exchange: ExchangeConfig = Field(default_factory=ExchangeConfig)
    signing: SigningConfig = Field(default_factory=SigningConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


# Global config instance
config = OrderwireConfig()


__all__ = [
    "OrderwireConfig",
    "ExchangeConfig",
    "SigningConfig",
    "LoggingConfig",
    "MAINNET_API_URL",
    "TESTNET_API_URL",
    "config",
]
