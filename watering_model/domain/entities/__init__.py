"""Domain entities."""

from .temperature_basis import TemperatureBasis
from .forecast_day import ForecastDay
from .calendar_entry import CalendarEntry
from .seasonal_calendar import SeasonalCalendar
from .zone_config import ZoneConfig
from .rain_delay_state import RainDelayState
from .device_state import DeviceState
from .zone_start_command import ZoneStartCommand
from .run_outcome import DelayReason, RunOutcome, RunStatus

__all__ = [
    "TemperatureBasis",
    "ForecastDay",
    "CalendarEntry",
    "SeasonalCalendar",
    "ZoneConfig",
    "RainDelayState",
    "DeviceState",
    "ZoneStartCommand",
    "DelayReason",
    "RunOutcome",
    "RunStatus",
]
