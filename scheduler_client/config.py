# scheduler_client/config.py
"""Client configuration using pydantic-settings.

Provides a centralized Settings class for the scheduler service address,
the owning service name and the default trigger timeout.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Scheduler client settings loaded from environment variables.

    All settings are loaded from .env file and environment variables.
    Environment variables take precedence over .env file values.
    """

    # Scheduler service address
    scheduler_service_host: str = Field("localhost", min_length=1)
    scheduler_service_port: int = Field(48085, ge=1, le=65535)

    # Name of the service using this client
    owning_service: str = ""

    # Default timeout for trigger pings (duration string, e.g. "5s", "500ms")
    trigger_timeout: str = "5s"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore unknown env vars
        case_sensitive=False,  # Allow case-insensitive env var names
    )

    @property
    def scheduler_base_url(self) -> str:
        """Base URL of the scheduler service.

        Returns:
            URL in the form http://{host}:{port}.
        """
        return f"http://{self.scheduler_service_host}:{self.scheduler_service_port}"


# Singleton instance - import this in your code
settings = Settings()
