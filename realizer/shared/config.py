# realizer/shared/config.py
from enum import Enum
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class AppEnv(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class LogFormat(str, Enum):
    JSON = "json"
    CONSOLE = "console"


class Settings(BaseSettings):
    """
    Central Configuration Registry.
    Strictly typed and validated via Pydantic.
    """

    # --- Application Meta ---
    APP_NAME: str = "realizer"
    APP_ENV: AppEnv = AppEnv.DEVELOPMENT
    DEBUG: bool = False

    # --- Logging ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: LogFormat = LogFormat.JSON

    # --- Realisation ---
    DEFAULT_LANGUAGE: str = "en"
    # Lexicons warmed up by the container (JSON list in env, e.g. ["en","es"])
    PRELOAD_LANGUAGES: List[str] = []

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
