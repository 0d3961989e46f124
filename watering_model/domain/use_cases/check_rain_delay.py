"""Use case for deciding whether rain should delay watering."""

import logging
from datetime import datetime
from typing import Optional, Sequence

from ..entities.forecast_day import ForecastDay
from ..entities.rain_delay_state import RainDelayState
from ..entities.run_outcome import DelayReason

logger = logging.getLogger(__name__)


class CheckRainDelayUseCase:
    """Combine the device rain delay with the forecast rain check."""

    def __init__(self, rain_check_days: int = 2, ignore_expired_device_delay: bool = True):
        """
        Initialize use case.

        Args:
            rain_check_days: Number of forecast days, starting today, to scan for rain
            ignore_expired_device_delay: Treat a recorded device delay whose
                expiration is already in the past as inactive
        """
        self.rain_check_days = rain_check_days
        self.ignore_expired_device_delay = ignore_expired_device_delay

    def device_delay_active(self, rain_delay: RainDelayState, now: datetime) -> bool:
        """Check the delay window reported by the controller."""
        if not rain_delay.active:
            return False
        if self.ignore_expired_device_delay and rain_delay.expired(now):
            logger.info(f"Device rain delay expired at {rain_delay.expires_at}, ignoring it")
            return False
        return True

    def forecast_rain_expected(self, forecast: Sequence[ForecastDay]) -> bool:
        """Check the first ``rain_check_days`` forecast days for rain."""
        for index, day in enumerate(forecast):
            if index == self.rain_check_days:
                break
            if day.rain_expected:
                logger.info(f"Rain expected on {day.date.isoformat()}")
                return True
        return False

    def execute(
        self,
        rain_delay: RainDelayState,
        forecast: Sequence[ForecastDay],
        now: datetime,
    ) -> Optional[DelayReason]:
        """
        Execute the rain check.

        Args:
            rain_delay: Delay state reported by the device
            forecast: Chronological forecast, today first
            now: Current time

        Returns:
            The reason for a delay, or None when watering may proceed
        """
        if self.device_delay_active(rain_delay, now):
            logger.info("Rain delay is active on the device")
            return DelayReason.DEVICE

        if self.forecast_rain_expected(forecast):
            return DelayReason.FORECAST

        logger.info(f"No rain in the next {self.rain_check_days} forecast day(s)")
        return None
