"""
Tests for application configuration.
"""

from datetime import timedelta

import pytest
from pydantic import ValidationError

from workingdays.config import AppConfig, BusinessHoursConfig, HolidaySourceConfig
from workingdays.domain.models import BusinessHoursPolicy


class TestAppConfig:
    """Tests for AppConfig."""

    def test_defaults(self):
        config = AppConfig()

        assert config.utc_offset_hours == -5
        assert config.business_hours.to_policy() == BusinessHoursPolicy()
        assert config.holidays.use_remote
        assert config.holidays.cache_ttl() == timedelta(hours=24)

    def test_load_from_yaml(self, tmp_path):
        config_path = tmp_path / "config.yaml"
        config_path.write_text(
            "business_hours:\n"
            "  start_hour: 7\n"
            "  start_minute: 30\n"
            "holidays:\n"
            "  use_remote: false\n"
            "  cache_ttl_hours: 0\n",
            encoding="utf-8",
        )

        config = AppConfig.load_from_yaml(config_path)

        assert config.business_hours.start_hour == 7
        assert config.business_hours.start_minute == 30
        assert not config.holidays.use_remote
        assert config.holidays.cache_ttl() is None

    def test_empty_yaml_uses_defaults(self, tmp_path):
        config_path = tmp_path / "config.yaml"
        config_path.write_text("", encoding="utf-8")

        assert AppConfig.load_from_yaml(config_path) == AppConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            AppConfig.load_from_yaml(tmp_path / "missing.yaml")

    def test_non_mapping_root(self, tmp_path):
        config_path = tmp_path / "config.yaml"
        config_path.write_text("- 1\n- 2\n", encoding="utf-8")

        with pytest.raises(ValueError, match="mapping at the root"):
            AppConfig.load_from_yaml(config_path)

    def test_invalid_yaml(self, tmp_path):
        config_path = tmp_path / "config.yaml"
        config_path.write_text("business_hours: [unclosed\n", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid YAML"):
            AppConfig.load_from_yaml(config_path)

    def test_load_or_default_without_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr(
            "workingdays.config.get_default_config_path", lambda: tmp_path / "config.yaml"
        )

        assert AppConfig.load_or_default() == AppConfig()

    def test_invalid_offset(self):
        with pytest.raises(ValidationError):
            AppConfig(utc_offset_hours=20)


class TestBusinessHoursConfig:
    """Tests for BusinessHoursConfig."""

    def test_invalid_hour(self):
        with pytest.raises(ValidationError, match="Hour must be between 0 and 23"):
            BusinessHoursConfig(end_hour=24)

    def test_invalid_minute(self):
        with pytest.raises(ValidationError, match="Minute must be between 0 and 59"):
            BusinessHoursConfig(start_minute=60)

    def test_lunch_outside_day(self):
        with pytest.raises(ValidationError):
            BusinessHoursConfig(lunch_end_hour=18)


class TestHolidaySourceConfig:
    """Tests for HolidaySourceConfig."""

    def test_negative_ttl(self):
        with pytest.raises(ValidationError):
            HolidaySourceConfig(cache_ttl_hours=-1)

    def test_zero_timeout(self):
        with pytest.raises(ValidationError):
            HolidaySourceConfig(timeout_seconds=0)
