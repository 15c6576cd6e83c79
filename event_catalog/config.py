"""Application configuration loaded from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "event-catalog"
    debug: bool = False
    log_level: str = "INFO"

    # Anchor of the synthetic data generator (Wrocław market square)
    anchor_description: str = "test"
    anchor_latitude: float = 51.1079
    anchor_longitude: float = 17.0385

    # Browser origins allowed to call the API
    cors_origins: list[str] = [
        "http://localhost:8080",
        "http://127.0.0.1:8080",
    ]

    model_config = {"env_prefix": "EVENTS_"}


settings = Settings()
