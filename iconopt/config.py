"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    iconopt_env: str = "development"
    iconopt_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Optimizer defaults for API and CLI requests
    iconopt_multipass: bool = True
    iconopt_id_prefix: str = "svgID"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
