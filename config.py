from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="RUSSIAN_NOUNS_",
        env_file=".env",
        extra="ignore",
    )

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False  # True for JSON lines, False for console output

    # Paradigm export
    FORM_SEPARATOR: str = "/"  # Joins co-existing variants, e.g. "горой/горою"
    STRESS_FILE: Optional[str] = None  # CSV of stress overrides: text, gender, settings


@lru_cache
def get_settings() -> Settings:
    return Settings()
