"""
service_gateway.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for all layers.
- Read `PORT` the way hosting platforms inject it.
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="GATEWAY_",
        env_file=".env",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
    )

    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "service-gateway"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    # Platforms (Heroku, Cloud Run, ...) inject a bare PORT.
    api_port: int = Field(
        default=3000,
        validation_alias=AliasChoices("PORT", "GATEWAY_API_PORT"),
    )

    # Outbound backend calls
    backend_timeout_seconds: float = 30.0

    # "Processed: " selects the simplified mock variant.
    mock_output_prefix: str = "Mock: "

    # Front-end bundle served at "/"
    static_dir: str = "marketplace"
    cors_allow_origins: list[str] = Field(default_factory=lambda: ["*"])


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


# --- Module Notes -----------------------------------------------------------
# The service table itself is not configuration; it lives in `service_gateway.catalog`.
