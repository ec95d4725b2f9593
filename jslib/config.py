"""Configuration for jslib, loaded from the environment."""

from functools import cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Settings loaded from JSLIB_* environment variables."""

    # Logging Configuration
    log_level: str = "WARNING"
    json_logs: bool = False

    # Decoding
    strict_json: bool = True

    model_config = {"env_prefix": "JSLIB_", "extra": "ignore"}


@cache
def get_settings() -> Settings:
    """Build settings on first use so importing jslib never reads the environment."""
    return Settings()
