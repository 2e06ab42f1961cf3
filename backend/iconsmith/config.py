"""Application configuration from environment variables."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    iconsmith_env: str = "development"
    iconsmith_log_level: str = "info"

    # Parser strategy: "auto" | "dom" | "regex"
    iconsmith_parser: Literal["auto", "dom", "regex"] = "auto"
    iconsmith_license_header: str = "(c) Copyright 2025. All rights reserved."

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
