"""Decision engine: rain gate followed by per-zone runtime computation."""

import logging
from datetime import datetime
from typing import Sequence

from ..entities.device_state import DeviceState
from ..entities.forecast_day import ForecastDay
from ..entities.run_outcome import DelayReason, RunOutcome
from ..repositories.controller_repository import ControllerRepository
from ..repositories.weather_repository import WeatherRepository
from .adjust_zone_runtimes import AdjustZoneRuntimesUseCase
from .check_rain_delay import CheckRainDelayUseCase

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 86400


class DecisionEngine:
    """Decides between a rain delay and a batched zone start."""

    def __init__(
        self,
        controller: ControllerRepository,
        weather: WeatherRepository,
        check_rain_delay: CheckRainDelayUseCase,
        adjust_runtimes: AdjustZoneRuntimesUseCase,
        rain_delay_days: int = 7,
    ):
        self.controller = controller
        self.weather = weather
        self.check_rain_delay = check_rain_delay
        self.adjust_runtimes = adjust_runtimes
        self.rain_delay_days = rain_delay_days

    def execute(
        self,
        device: DeviceState,
        forecast: Sequence[ForecastDay],
        now: datetime,
        dispatch: bool = True,
    ) -> RunOutcome:
        """
        Run both gates.

        Args:
            device: Controller snapshot
            forecast: Chronological forecast for the device location, today first
            now: Current time in the device's timezone
            dispatch: Send the resulting commands to the controller

        Returns:
            RunOutcome describing what was (or would be) done
        """
        reason = self.check_rain_delay.execute(device.rain_delay, forecast, now)

        if reason is DelayReason.FORECAST:
            duration = self.rain_delay_days * SECONDS_PER_DAY
            if dispatch:
                logger.info(f"Setting a {self.rain_delay_days} day rain delay on {device.device_id}")
                self.controller.set_rain_delay(device.device_id, duration)

        if reason is not None:
            return RunOutcome.delayed(reason)

        commands, temperature = self.adjust_runtimes.plan(
            device.zones,
            now.month,
            lambda basis: self.weather.current_temperature(basis, now.date()),
        )

        if dispatch:
            self.controller.start_zones(commands)

        return RunOutcome.watered(commands, temperature=temperature)
