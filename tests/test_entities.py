"""Tests for domain entities."""

import pytest
from datetime import date, datetime, timezone

from watering_model.domain.entities.calendar_entry import CalendarEntry
from watering_model.domain.entities.device_state import DeviceState
from watering_model.domain.entities.forecast_day import ForecastDay
from watering_model.domain.entities.rain_delay_state import RainDelayState
from watering_model.domain.entities.run_outcome import DelayReason, RunOutcome, RunStatus
from watering_model.domain.entities.temperature_basis import TemperatureBasis
from watering_model.domain.entities.zone_config import ZoneConfig
from watering_model.domain.entities.zone_start_command import ZoneStartCommand


def test_forecast_day_average_is_floored_midpoint():
    """Average is floor((high + low) / 2)."""
    assert ForecastDay(date(2015, 7, 15), high=90, low=70).average == 80
    assert ForecastDay(date(2015, 7, 15), high=91, low=70).average == 80
    assert ForecastDay(date(2015, 1, 15), high=3, low=-10).average == -4


def test_forecast_day_temperature_by_basis():
    """Each basis selects its field."""
    day = ForecastDay(date(2015, 7, 15), high=91, low=70)
    assert day.temperature(TemperatureBasis.LOW) == 70
    assert day.temperature(TemperatureBasis.AVERAGE) == 80
    assert day.temperature(TemperatureBasis.HIGH) == 91


def test_temperature_basis_parse():
    """Basis parses from its value or its name."""
    assert TemperatureBasis.parse("Avg") is TemperatureBasis.AVERAGE
    assert TemperatureBasis.parse("average") is TemperatureBasis.AVERAGE
    assert TemperatureBasis.parse("HIGH") is TemperatureBasis.HIGH
    assert str(TemperatureBasis.LOW) == "Low"
    with pytest.raises(ValueError):
        TemperatureBasis.parse("Median")


def test_calendar_entry():
    """Test CalendarEntry entity."""
    entry = CalendarEntry.from_dict(
        6, {"name": "June", "temperature_basis": "High", "multiplier": 1.2}
    )
    assert entry.month == 6
    assert entry.basis is TemperatureBasis.HIGH
    assert entry.multiplier == 1.2
    assert str(entry) == "June"


def test_zone_config():
    """Test ZoneConfig entity."""
    zone = ZoneConfig(id="abc", zone_number=2, name="Front Yard", enabled=True)
    assert zone.runtime_basis_minutes is None
    assert str(zone) == "Front Yard"


def test_rain_delay_equal_timestamps_is_active():
    """A window whose expiration equals its start counts as active."""
    assert RainDelayState(start=100, expiration=100).active


def test_rain_delay_states():
    """Inverted or missing windows are inactive."""
    assert not RainDelayState(start=200, expiration=100).active
    assert not RainDelayState().active
    assert not RainDelayState(start=100).active


def test_rain_delay_expired():
    """Expiration is compared against now in epoch milliseconds."""
    now = datetime(2015, 7, 15, tzinfo=timezone.utc)
    now_ms = int(now.timestamp() * 1000)
    assert RainDelayState(start=0, expiration=now_ms - 1).expired(now)
    assert not RainDelayState(start=0, expiration=now_ms).expired(now)
    assert RainDelayState(start=0, expiration=now_ms).expires_at == now


def test_zone_start_command():
    """Commands serialise to the controller format and reject negatives."""
    command = ZoneStartCommand("z1", 1140)
    assert command.to_payload() == {"id": "z1", "duration": 1140}
    with pytest.raises(ValueError):
        ZoneStartCommand("z1", -60)


def test_run_outcome():
    """Test RunOutcome helpers."""
    delayed = RunOutcome.delayed(DelayReason.FORECAST)
    assert delayed.is_delayed
    assert delayed.commands == ()

    watered = RunOutcome.watered([ZoneStartCommand("a", 60), ZoneStartCommand("b", 120)])
    assert watered.status is RunStatus.WATERED
    assert watered.total_seconds == 180


def test_device_state_enabled_zones():
    """Only enabled zones are listed."""
    device = DeviceState(
        device_id="d",
        timezone="UTC",
        zip="00000",
        zones=[
            ZoneConfig(id="a", zone_number=1, name="A", enabled=True),
            ZoneConfig(id="b", zone_number=2, name="B", enabled=False),
        ],
    )
    assert [zone.id for zone in device.enabled_zones] == ["a"]
