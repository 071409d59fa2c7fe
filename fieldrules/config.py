"""Library configuration via environment variables."""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Settings loaded from FIELDRULES_* environment variables."""

    # Logging
    DEBUG: bool = False
    LOG_LEVEL: str = "info"

    # Registry
    WARN_ON_DUPLICATE_RULES: bool = True
    FREEZE_REGISTRY: bool = True

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "FIELDRULES_",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    return Settings()
