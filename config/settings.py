"""Application settings and configuration."""

import os
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from watering_model.domain.errors import ConfigError

# Seasonal calendar: which daily temperature to use and how much to weight it
SEASONAL_CALENDAR = {
    1: {"name": "January", "temperature_basis": "Low", "multiplier": 1.0},
    2: {"name": "February", "temperature_basis": "Low", "multiplier": 1.0},
    3: {"name": "March", "temperature_basis": "Avg", "multiplier": 1.0},
    4: {"name": "April", "temperature_basis": "Avg", "multiplier": 1.0},
    5: {"name": "May", "temperature_basis": "Avg", "multiplier": 1.0},
    6: {"name": "June", "temperature_basis": "High", "multiplier": 1.0},
    7: {"name": "July", "temperature_basis": "High", "multiplier": 1.0},
    8: {"name": "August", "temperature_basis": "High", "multiplier": 1.0},
    9: {"name": "September", "temperature_basis": "Avg", "multiplier": 1.0},
    10: {"name": "October", "temperature_basis": "Avg", "multiplier": 1.0},
    11: {"name": "November", "temperature_basis": "Avg", "multiplier": 1.0},
    12: {"name": "December", "temperature_basis": "Low", "multiplier": 1.0},
}

# Zone number -> minutes at 100F with a 1.0 multiplier
ZONE_RUNTIME_BASIS = {
    1: 8,  # Parkway
    2: 22,  # Front Yard
    3: 0,  # Office Garden
    4: 22,  # Back Yard
    5: 98,  # Fruit Trees
    6: 0,
    7: 0,
    8: 0,
}

# Decision model settings (raw values, coerced by ModelSettings.from_dict)
MODEL_SETTINGS = {
    "rain_check_days": os.getenv("RAIN_CHECK_DAYS", "2"),  # max 10
    "rain_delay_days": os.getenv("RAIN_DELAY_DAYS", "7"),  # max 7
    "dry_run_duration": os.getenv("DRY_RUN_DURATION") or None,
    "ignore_expired_device_delay": os.getenv("IGNORE_EXPIRED_DEVICE_DELAY", "true"),
}

# Irrigation controller API
RACHIO_SETTINGS = {
    "api_url": os.getenv("RACHIO_API_URL", "https://api.rach.io/1/public"),
    "api_token": os.getenv("RACHIO_API_TOKEN", ""),
}

# Weather API
WUNDERGROUND_SETTINGS = {
    "api_url": os.getenv("WUNDERGROUND_API_URL", "http://api.wunderground.com/api"),
    "api_key": os.getenv("WUNDERGROUND_API_KEY", ""),
}

HTTP_SETTINGS = {
    "timeout": os.getenv("HTTP_TIMEOUT", "30"),
}

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class ModelSettings:
    """Validated decision model settings."""

    rain_check_days: int = 2
    rain_delay_days: int = 7
    dry_run_duration: Optional[int] = None
    ignore_expired_device_delay: bool = True

    def __post_init__(self):
        if not 0 <= self.rain_check_days <= 10:
            raise ConfigError(f"rain_check_days must be 0-10, got {self.rain_check_days}")
        if not 0 <= self.rain_delay_days <= 7:
            raise ConfigError(f"rain_delay_days must be 0-7, got {self.rain_delay_days}")
        if self.dry_run_duration is not None and self.dry_run_duration < 0:
            raise ConfigError(f"dry_run_duration must not be negative, got {self.dry_run_duration}")

    @classmethod
    def from_dict(cls, settings: Mapping[str, Any]) -> "ModelSettings":
        """Create ModelSettings from the settings table, ignoring unset overrides."""
        values = {key: value for key, value in settings.items() if key in cls.__dataclass_fields__}
        for key in ("rain_check_days", "rain_delay_days", "dry_run_duration"):
            if key in values:
                values[key] = parse_int(key, values[key])
        if "ignore_expired_device_delay" in values:
            values["ignore_expired_device_delay"] = parse_bool(
                "ignore_expired_device_delay", values["ignore_expired_device_delay"]
            )
        return cls(**values)


def parse_int(name: str, value: Any) -> Optional[int]:
    """Coerce a setting to int; None stays None."""
    if value is None or isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError as e:
        raise ConfigError(f"{name} must be an integer, got {value!r}") from e


def parse_bool(name: str, value: Any) -> bool:
    """Coerce a 'true'/'false' setting to bool."""
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in ("true", "1", "yes"):
        return True
    if text in ("false", "0", "no"):
        return False
    raise ConfigError(f"{name} must be true or false, got {value!r}")


def parse_timeout(value: Any) -> float:
    """Coerce the HTTP timeout to a positive number of seconds."""
    try:
        timeout = float(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"HTTP timeout must be a number, got {value!r}") from e
    if timeout <= 0:
        raise ConfigError(f"HTTP timeout must be positive, got {timeout}")
    return timeout


def validate_runtime_basis(table: Mapping[int, int]) -> Dict[int, int]:
    """Check the zone runtime table and return a copy."""
    result = {}
    for zone_number, minutes in table.items():
        if int(minutes) < 0:
            raise ConfigError(f"Runtime basis for zone {zone_number} must not be negative")
        result[int(zone_number)] = int(minutes)
    return result
