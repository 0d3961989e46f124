"""Tests for SeasonalCalendar."""

import pytest

from watering_model.domain.entities.seasonal_calendar import SeasonalCalendar
from watering_model.domain.entities.temperature_basis import TemperatureBasis
from watering_model.domain.errors import ConfigError
from config.settings import SEASONAL_CALENDAR


def test_every_month_is_defined():
    """All twelve months have a basis and a positive multiplier."""
    calendar = SeasonalCalendar.from_dict(SEASONAL_CALENDAR)
    assert len(calendar) == 12
    for month in range(1, 13):
        assert isinstance(calendar.basis_for(month), TemperatureBasis)
        assert calendar.multiplier_for(month) > 0


def test_default_seasons():
    """Winter uses lows, summer uses highs, shoulder months use averages."""
    calendar = SeasonalCalendar.from_dict(SEASONAL_CALENDAR)
    assert calendar.basis_for(1) is TemperatureBasis.LOW
    assert calendar.basis_for(12) is TemperatureBasis.LOW
    assert calendar.basis_for(4) is TemperatureBasis.AVERAGE
    assert calendar.basis_for(7) is TemperatureBasis.HIGH
    assert [entry.month for entry in calendar] == list(range(1, 13))


@pytest.mark.parametrize("month", [0, 13, -1])
def test_month_out_of_range(month):
    """Lookups outside 1-12 raise ConfigError."""
    calendar = SeasonalCalendar.from_dict(SEASONAL_CALENDAR)
    with pytest.raises(ConfigError):
        calendar.basis_for(month)
    with pytest.raises(ConfigError):
        calendar.multiplier_for(month)


def test_missing_month_rejected():
    """A calendar with a gap fails on construction."""
    definitions = {m: d for m, d in SEASONAL_CALENDAR.items() if m != 5}
    with pytest.raises(ConfigError, match="missing months"):
        SeasonalCalendar.from_dict(definitions)


@pytest.mark.parametrize("multiplier", [0, -0.5])
def test_non_positive_multiplier_rejected(multiplier):
    """Multipliers must be positive."""
    definitions = dict(SEASONAL_CALENDAR)
    definitions[3] = {**definitions[3], "multiplier": multiplier}
    with pytest.raises(ConfigError, match="positive"):
        SeasonalCalendar.from_dict(definitions)


def test_unknown_basis_rejected():
    """An unknown basis name is a configuration error."""
    definitions = dict(SEASONAL_CALENDAR)
    definitions[3] = {**definitions[3], "temperature_basis": "Median"}
    with pytest.raises(ConfigError):
        SeasonalCalendar.from_dict(definitions)
