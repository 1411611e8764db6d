"""Application settings management."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Global settings loaded from environment variables."""

    app_name: str = "Message Dispatcher"
    app_version: str = "0.1.0"
    environment: str = "development"
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Simulated network latency applied to every channel send.
    send_delay_seconds: float = Field(default=1.0, ge=0, alias="SEND_DELAY_SECONDS")
    timestamp_format: str = Field(default="%Y-%m-%d %H:%M:%S UTC", alias="TIMESTAMP_FORMAT")

    demo_channel: str = Field(default="whatsapp", alias="DEMO_CHANNEL")
    demo_recipient: str = Field(default="+5511999999999", alias="DEMO_RECIPIENT")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )


settings = Settings()


def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return settings
