from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict


class MebcalSettings(BaseSettings):
    """
    Runtime settings, loaded from MEBCAL_* environment variables or .env:
      - MEBCAL_DB_URL
      - MEBCAL_HIJRI_CALENDAR
      - MEBCAL_LOG_LEVEL
    """

    db_url: str = Field(default="sqlite:///meb_calendar.sqlite", description="SQLAlchemy URL of the event store")
    hijri_calendar: str = Field(default="civil", description="Arithmetic Hijri variant: civil or astronomical")
    log_level: str = Field(default="WARNING", description="Root logging level for the CLI")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="mebcal_",
        extra="ignore",
    )
