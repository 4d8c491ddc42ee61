"""
Configuration management using Pydantic models loaded from YAML.
"""

from datetime import timedelta
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from .adapters.holiday_client import DEFAULT_HOLIDAYS_URL
from .domain.models import BusinessHoursPolicy


class BusinessHoursConfig(BaseModel):
    """Business day and lunch window."""
    start_hour: int = 8
    start_minute: int = 0
    end_hour: int = 17
    end_minute: int = 0
    lunch_start_hour: int = 12
    lunch_start_minute: int = 0
    lunch_end_hour: int = 13
    lunch_end_minute: int = 0

    @field_validator("start_hour", "end_hour", "lunch_start_hour", "lunch_end_hour")
    @classmethod
    def validate_hour(cls, v: int) -> int:
        """Validate hour is between 0 and 23."""
        if not 0 <= v <= 23:
            raise ValueError(f"Hour must be between 0 and 23, got {v}")
        return v

    @field_validator("start_minute", "end_minute", "lunch_start_minute", "lunch_end_minute")
    @classmethod
    def validate_minute(cls, v: int) -> int:
        """Validate minute is between 0 and 59."""
        if not 0 <= v <= 59:
            raise ValueError(f"Minute must be between 0 and 59, got {v}")
        return v

    @model_validator(mode="after")
    def validate_order(self) -> "BusinessHoursConfig":
        """Ensure start <= lunch start < lunch end <= end."""
        self.to_policy()
        return self

    def to_policy(self) -> BusinessHoursPolicy:
        """Build the immutable domain policy."""
        return BusinessHoursPolicy(**self.model_dump())


class HolidaySourceConfig(BaseModel):
    """Where holidays come from and how long they are cached."""
    source_url: str = DEFAULT_HOLIDAYS_URL
    timeout_seconds: float = 10
    cache_ttl_hours: Optional[float] = 24
    use_remote: bool = True

    @field_validator("timeout_seconds")
    @classmethod
    def validate_timeout(cls, value: float) -> float:
        """Ensure the request timeout is positive."""
        if value <= 0:
            raise ValueError("timeout_seconds must be greater than zero")
        return value

    @field_validator("cache_ttl_hours")
    @classmethod
    def validate_ttl(cls, value: Optional[float]) -> Optional[float]:
        """Negative TTLs make no sense; 0 disables expiry."""
        if value is not None and value < 0:
            raise ValueError("cache_ttl_hours must not be negative")
        return value

    def cache_ttl(self) -> Optional[timedelta]:
        """Cache TTL, or None when expiry is disabled."""
        if not self.cache_ttl_hours:
            return None
        return timedelta(hours=self.cache_ttl_hours)


class AppConfig(BaseModel):
    """Application configuration."""
    business_hours: BusinessHoursConfig = Field(default_factory=BusinessHoursConfig)
    holidays: HolidaySourceConfig = Field(default_factory=HolidaySourceConfig)
    utc_offset_hours: int = -5
    timezone_label: str = "America/Bogota"

    @field_validator("utc_offset_hours")
    @classmethod
    def validate_offset(cls, value: int) -> int:
        """Validate the civil offset is a real-world UTC offset."""
        if not -12 <= value <= 14:
            raise ValueError(f"utc_offset_hours must be between -12 and 14, got {value}")
        return value

    @classmethod
    def load_from_yaml(cls, config_path: Path) -> "AppConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to the YAML config file

        Returns:
            AppConfig instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config is invalid
        """
        if not config_path.exists():
            raise FileNotFoundError(
                f"Config file not found: {config_path}\n"
                f"Please create a config.yaml file. See config.example.yaml for reference."
            )

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {config_path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ValueError("Config file must contain a mapping at the root level.")

        return cls(**data)

    @classmethod
    def load_or_default(cls, config_path: Optional[Path] = None) -> "AppConfig":
        """
        Load the config file if there is one, otherwise use the defaults.

        An explicitly given path must exist.
        """
        if config_path is not None:
            return cls.load_from_yaml(config_path)

        default_path = get_default_config_path()
        if default_path.exists():
            return cls.load_from_yaml(default_path)

        return cls()


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    # Look for config.yaml in current directory
    current_dir = Path.cwd()
    config_path = current_dir / "config.yaml"

    if not config_path.exists():
        # Try in the project root (parent of the package)
        project_root = Path(__file__).parent.parent
        config_path = project_root / "config.yaml"

    return config_path
