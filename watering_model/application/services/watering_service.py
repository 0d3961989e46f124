"""Main service orchestrating a watering run."""

import logging
from datetime import datetime, timezone as dt_timezone
from typing import Any, Dict, List, Mapping, Optional

import pandas as pd

from ...domain.entities.device_state import DeviceState
from ...domain.entities.forecast_day import ForecastDay
from ...domain.entities.run_outcome import RunOutcome
from ...domain.entities.seasonal_calendar import SeasonalCalendar
from ...domain.repositories.controller_repository import ControllerRepository
from ...domain.repositories.weather_repository import WeatherRepository
from ...domain.use_cases.adjust_zone_runtimes import AdjustZoneRuntimesUseCase
from ...domain.use_cases.check_rain_delay import CheckRainDelayUseCase
from ...domain.use_cases.decision_engine import DecisionEngine

logger = logging.getLogger(__name__)


class WateringService:
    """Fetch controller state and forecast, then run the decision engine."""

    def __init__(
        self,
        controller_repo: ControllerRepository,
        weather_repo: WeatherRepository,
        calendar_definitions: Mapping[int, Dict[str, Any]],
        zone_runtime_basis: Mapping[int, int],
        rain_check_days: int = 2,
        rain_delay_days: int = 7,
        dry_run_duration: Optional[int] = None,
        ignore_expired_device_delay: bool = True,
    ):
        self.controller_repo = controller_repo
        self.weather_repo = weather_repo

        # Fails fast on a malformed calendar, before any request is made
        self.calendar = SeasonalCalendar.from_dict(dict(calendar_definitions))

        self.engine = DecisionEngine(
            controller=controller_repo,
            weather=weather_repo,
            check_rain_delay=CheckRainDelayUseCase(
                rain_check_days=rain_check_days,
                ignore_expired_device_delay=ignore_expired_device_delay,
            ),
            adjust_runtimes=AdjustZoneRuntimesUseCase(
                self.calendar,
                runtime_basis=zone_runtime_basis,
                dry_run_duration=dry_run_duration,
            ),
            rain_delay_days=rain_delay_days,
        )

    @staticmethod
    def local_now(timezone: str, now: Optional[datetime] = None) -> datetime:
        """Current time (or ``now``) in the controller's timezone."""
        moment = pd.Timestamp(now or datetime.now(dt_timezone.utc))
        if moment.tzinfo is None:
            moment = moment.tz_localize("UTC")
        return moment.tz_convert(timezone).to_pydatetime()

    def load(self, now: Optional[datetime] = None):
        """Fetch device state and the forecast for its location."""
        device = self.controller_repo.fetch_device_state()
        local_now = self.local_now(device.timezone, now)
        forecast = self.weather_repo.fetch_forecast(device.zip, device.timezone, local_now)
        return device, forecast, local_now

    def run(self, now: Optional[datetime] = None) -> RunOutcome:
        """
        Execute a full run: rain delay or a batched zone start.

        Args:
            now: Override for the current time (defaults to the clock)

        Returns:
            RunOutcome with the status and the issued commands
        """
        device, forecast, local_now = self.load(now)
        logger.info(f"Running watering decision for {local_now.date().isoformat()}")
        outcome = self.engine.execute(device, forecast, local_now, dispatch=True)
        self._log_outcome(device, outcome)
        return outcome

    def preview(self, now: Optional[datetime] = None) -> RunOutcome:
        """Compute the decision without sending anything to the controller."""
        device, forecast, local_now = self.load(now)
        outcome = self.engine.execute(device, forecast, local_now, dispatch=False)
        self._log_outcome(device, outcome)
        return outcome

    def forecast(self, now: Optional[datetime] = None) -> List[ForecastDay]:
        """Forecast for the controller's location."""
        _, forecast, _ = self.load(now)
        return forecast

    @staticmethod
    def _log_outcome(device: DeviceState, outcome: RunOutcome) -> None:
        if outcome.is_delayed:
            logger.info(f"Watering delayed ({outcome.reason.value})")
            return

        names = {zone.id: zone.name for zone in device.zones}
        for command in outcome.commands:
            logger.info(
                f"  {names.get(command.zone_id, command.zone_id)}: "
                f"{command.duration_seconds // 60} min"
            )
        logger.info(f"Watering {len(outcome.commands)} zone(s), {outcome.total_seconds}s total")
