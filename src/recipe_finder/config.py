"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Edamam credentials stay on the server; the browser only ever talks to
    the proxy endpoints.
    """

    edamam_app_id: str
    edamam_app_key: str
    edamam_base_url: str = "https://api.edamam.com"
    edamam_timeout_seconds: float = 15
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
