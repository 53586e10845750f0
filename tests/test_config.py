"""
tests/test_config.py

Covers:
  - Settings defaults
  - Environment overrides with the TIMEOFF_ prefix
  - Validation of hours per day, first weekday and log level
  - configure_logging idempotence
"""

import logging

import pytest
from pydantic import ValidationError

from timeoff.config import Settings, configure_logging


class TestSettings:

    def test_defaults(self):
        settings = Settings()
        assert settings.hours_per_day == 7.75
        assert settings.default_vacation_hours == 116.25
        assert settings.default_personal_hours == 23.25
        assert settings.default_floater_hours == 15.5
        assert settings.first_weekday == 6

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("TIMEOFF_HOURS_PER_DAY", "8")
        monkeypatch.setenv("TIMEOFF_FIRST_WEEKDAY", "0")
        settings = Settings()
        assert settings.hours_per_day == 8.0
        assert settings.first_weekday == 0

    @pytest.mark.parametrize("hours", [0.0, -7.75])
    def test_hours_per_day_must_be_positive(self, hours):
        with pytest.raises(ValidationError):
            Settings(hours_per_day=hours)

    def test_first_weekday_range(self):
        with pytest.raises(ValidationError):
            Settings(first_weekday=7)

    def test_negative_default_allocation_rejected(self):
        with pytest.raises(ValidationError):
            Settings(default_personal_hours=-1)

    def test_log_level_normalised(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level_rejected(self):
        with pytest.raises(ValidationError):
            Settings(log_level="chatty")


class TestConfigureLogging:

    def test_sets_level_and_single_handler(self):
        logger = configure_logging("debug")
        configure_logging("info")
        assert logger.name == "timeoff"
        assert logger.level == logging.INFO
        marked = [h for h in logger.handlers if getattr(h, "_timeoff_handler", False)]
        assert len(marked) == 1
