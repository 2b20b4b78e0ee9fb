"""Service settings, read from the environment or a local .env file."""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "Contact Parser (Performer Contact Extraction Service)"
    app_version: str = "0.1.0"
    app_description: str = (
        "Deterministic parser that turns pasted performer contact blurbs into "
        "confidence-scored contact records with a manual-assignment fallback"
    )
    log_level: str = "INFO"

    # Pasted blurbs are a handful of lines; anything far larger is not a contact blurb
    max_text_length: int = 10_000

    model_config = SettingsConfigDict(
        env_file=str(Path(__file__).resolve().parent.parent.parent / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
