"""Application configuration using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from md2resume.models.deployment import DeploymentMode

# Load .env file and override existing env vars
load_dotenv(override=True)

DEFAULT_GATEWAY_TEMPLATES = [
    "https://ipfs.io/ipfs/{cid}",
    "https://{cid}.ipfs.dweb.link",
    "https://gateway.pinata.cloud/ipfs/{cid}",
]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_env: Literal["development", "staging", "production"] = "development"
    app_debug: bool = True

    # API Server
    api_host: str = "0.0.0.0"
    api_port: int = 3001

    # PinMe CLI
    pinme_command: str = "pinme"
    pinme_mock_mode: bool = False  # Set to True to simulate deployments without the CLI
    pinme_probe_timeout: float = Field(default=10.0, gt=0)
    pinme_upload_timeout: float = Field(default=60.0, gt=0)
    pinme_list_timeout: float = Field(default=30.0, gt=0)
    pinme_settle_delay: float = Field(default=2.0, ge=0)

    # Mirror URLs, "{cid}" is replaced by the content identifier
    gateway_templates: list[str] = Field(
        default_factory=lambda: list(DEFAULT_GATEWAY_TEMPLATES)
    )

    # Deployment history
    history_capacity: int = Field(default=50, ge=1)

    # Files
    temp_directory: str = "temp"
    max_upload_bytes: int = 5 * 1024 * 1024

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["console", "json"] = "console"
    log_directory: str = "logs"
    log_file_name: str = "md2resume.log"

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.app_env == "development"

    @property
    def deployment_mode(self) -> DeploymentMode:
        """Deployment mode selected by PINME_MOCK_MODE."""
        return DeploymentMode.MOCK if self.pinme_mock_mode else DeploymentMode.REAL

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.app_env == "production"


def load_settings() -> Settings:
    """Read a fresh settings instance.

    Deployment settings go through here so that flipping ``PINME_MOCK_MODE``
    takes effect on the next call without a restart.
    """
    return Settings()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
