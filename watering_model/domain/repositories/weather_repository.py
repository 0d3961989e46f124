"""Weather repository interface."""

from abc import ABC, abstractmethod
from datetime import date, datetime
from typing import List, Optional

from ..entities.forecast_day import ForecastDay
from ..entities.temperature_basis import TemperatureBasis
from ..errors import NotFoundError


class WeatherRepository(ABC):
    """Abstract repository for daily forecast access."""

    def __init__(self):
        self._forecast: Optional[List[ForecastDay]] = None

    @abstractmethod
    def fetch_forecast(
        self,
        location: str,
        timezone: str,
        now: datetime,
    ) -> List[ForecastDay]:
        """
        Retrieve the daily forecast for a location.

        Args:
            location: Location query understood by the provider (zip code)
            timezone: IANA timezone used to assign each forecast day its date
            now: Current time, used to drop days before today

        Returns:
            Chronological list of ForecastDay entities, today first
        """
        pass

    @property
    def forecast(self) -> List[ForecastDay]:
        """Forecast from the last successful fetch."""
        if self._forecast is None:
            raise NotFoundError("No forecast has been fetched")
        return list(self._forecast)

    def current_temperature(self, basis: TemperatureBasis, today: date) -> int:
        """
        Get today's temperature for a basis from the fetched forecast.

        Args:
            basis: Which of low/average/high to return
            today: The controller's local date

        Returns:
            Temperature in Fahrenheit

        Raises:
            NotFoundError: if today is not part of the fetched forecast
        """
        for day in self.forecast:
            if day.date == today:
                return day.temperature(basis)
        raise NotFoundError(f"No forecast entry for {today.isoformat()}")
