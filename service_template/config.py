"""Configuration management using pydantic-settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Process settings, read from ``SERVICE_TEMPLATE_*`` variables or ``.env``."""

    model_config = SettingsConfigDict(
        env_prefix="SERVICE_TEMPLATE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Which preset to run when none is given on the command line
    service: str = "template-1"

    # Server
    host: str = "0.0.0.0"
    port: int | None = None  # Falls back to the preset's port
    log_level: str = "info"

    # Expose /docs and /openapi.json
    docs_enabled: bool = False


# Global settings instance
settings = Settings()
