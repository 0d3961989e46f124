"""Shared fixtures: in-memory controller and weather repositories."""

from datetime import date, datetime, timedelta
from typing import List, Sequence
from zoneinfo import ZoneInfo

import pytest

from watering_model.domain.entities.device_state import DeviceState
from watering_model.domain.entities.forecast_day import ForecastDay
from watering_model.domain.entities.rain_delay_state import RainDelayState
from watering_model.domain.entities.zone_config import ZoneConfig
from watering_model.domain.entities.zone_start_command import ZoneStartCommand
from watering_model.domain.repositories.controller_repository import ControllerRepository
from watering_model.domain.repositories.weather_repository import WeatherRepository

CHICAGO = "America/Chicago"

CALENDAR = {
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

RUNTIME_BASIS = {1: 8, 2: 22, 3: 0, 4: 22, 5: 98}


class FakeControllerRepository(ControllerRepository):
    """Records commands instead of sending them."""

    def __init__(self, device: DeviceState):
        self.device = device
        self.rain_delays = []
        self.started: List[List[ZoneStartCommand]] = []

    def fetch_device_state(self) -> DeviceState:
        return self.device

    def set_rain_delay(self, device_id: str, duration_seconds: int) -> None:
        self.rain_delays.append((device_id, duration_seconds))

    def start_zones(self, commands: Sequence[ZoneStartCommand]) -> None:
        self.started.append(list(commands))


class FakeWeatherRepository(WeatherRepository):
    """Serves a fixed forecast."""

    def __init__(self, days: List[ForecastDay]):
        super().__init__()
        self.days = days
        self.requests = []

    def fetch_forecast(self, location, timezone, now):
        self.requests.append((location, timezone, now))
        self._forecast = list(self.days)
        return list(self.days)


def make_forecast(start: date, temps, rain=()) -> List[ForecastDay]:
    """Consecutive forecast days from (high, low) pairs; ``rain`` lists rainy indexes."""
    return [
        ForecastDay(
            date=start + timedelta(days=i),
            high=high,
            low=low,
            rain_expected=i in rain,
        )
        for i, (high, low) in enumerate(temps)
    ]


@pytest.fixture
def zones():
    return [
        ZoneConfig(id="z1", zone_number=1, name="Zone 1 - Parkway", enabled=True),
        ZoneConfig(id="z2", zone_number=2, name="Zone 2 - Front Yard", enabled=True),
        ZoneConfig(id="z3", zone_number=3, name="Zone 3 - Office Garden", enabled=True),
        ZoneConfig(id="z4", zone_number=4, name="Zone 4 - Back Yard", enabled=False),
        ZoneConfig(id="z5", zone_number=5, name="Zone 5 - Fruit Trees", enabled=True),
    ]


@pytest.fixture
def device(zones):
    return DeviceState(
        device_id="device-1",
        timezone=CHICAGO,
        zip="60601",
        name="Rachio-Home",
        zones=zones,
        rain_delay=RainDelayState(),
    )


@pytest.fixture
def now():
    """Mid-July morning in Chicago."""
    return datetime(2015, 7, 15, 7, 0, tzinfo=ZoneInfo(CHICAGO))


@pytest.fixture
def dry_forecast(now):
    return make_forecast(now.date(), [(90, 70), (88, 68), (85, 65), (84, 66)])


@pytest.fixture
def controller(device):
    return FakeControllerRepository(device)


@pytest.fixture
def weather(dry_forecast):
    return FakeWeatherRepository(dry_forecast)
