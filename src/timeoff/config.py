from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine configuration, overridable through ``TIMEOFF_*`` variables."""

    model_config = SettingsConfigDict(env_prefix="TIMEOFF_", case_sensitive=False)

    # A standard workday; only used to present hours as days.
    hours_per_day: float = Field(default=7.75, gt=0.0)

    default_vacation_hours: float = Field(default=116.25, ge=0.0)
    default_personal_hours: float = Field(default=23.25, ge=0.0)
    default_floater_hours: float = Field(default=15.5, ge=0.0)

    # calendar-module convention: 0 = Monday ... 6 = Sunday
    first_weekday: int = Field(default=6, ge=0, le=6)

    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level {value!r}.")
        return level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Attach a stream handler to the package logger (idempotent)."""
    logger = logging.getLogger("timeoff")
    if not any(getattr(h, "_timeoff_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")
        )
        handler._timeoff_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    logger.setLevel((level or get_settings().log_level).upper())
    return logger
