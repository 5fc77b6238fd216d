"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    env: str = "development"
    log_level: str = "info"

    # Batch directories
    input_dir: str = "input"
    output_dir: str = "output"

    # Default target values; unset ones are prompted for by the CLI
    size: str | None = None
    stroke_width: str | None = None
    stroke_colour: str | None = None

    # Legacy root-tag duplication in the size transducer
    duplicate_root_attributes: bool = False

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    model_config = SettingsConfigDict(
        env_prefix="RESTYLE_", env_file=".env", env_file_encoding="utf-8"
    )


settings = Settings()
