"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class APIConfig(BaseSettings):
    """HTTP API configuration."""

    model_config = {"env_prefix": "ELBONIAN_API_"}

    host: str = "127.0.0.1"
    port: int = 8000
    title: str = "Elbonian Numeral Converter"


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "ELBONIAN_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: LogLevel = "INFO"
    log_format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"

    api: APIConfig = APIConfig()

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value
