"""Forecast day entity."""

from dataclasses import dataclass
from datetime import date

from .temperature_basis import TemperatureBasis


@dataclass(frozen=True)
class ForecastDay:
    """Represents one day of a normalized forecast."""

    date: date
    high: int  # Fahrenheit
    low: int  # Fahrenheit
    rain_expected: bool = False

    @property
    def average(self) -> int:
        """Integer midpoint of high and low."""
        return (self.high + self.low) // 2

    def temperature(self, basis: TemperatureBasis) -> int:
        """Get the temperature selected by a basis."""
        if basis is TemperatureBasis.LOW:
            return self.low
        if basis is TemperatureBasis.HIGH:
            return self.high
        return self.average
