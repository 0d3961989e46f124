"""Use case for computing weather-adjusted zone runtimes."""

import logging
import math
from typing import Callable, List, Mapping, Optional, Sequence, Tuple

from ..entities.seasonal_calendar import SeasonalCalendar
from ..entities.temperature_basis import TemperatureBasis
from ..entities.zone_config import ZoneConfig
from ..entities.zone_start_command import ZoneStartCommand
from ..errors import NotFoundError

logger = logging.getLogger(__name__)


def adjusted_minutes(runtime_basis: int, temperature: int, multiplier: float) -> int:
    """Scale a runtime basis by temperature (as a percentage) and a multiplier."""
    return max(0, math.floor(runtime_basis * temperature * 0.01 * multiplier))


class AdjustZoneRuntimesUseCase:
    """Turn enabled zones into start commands using the seasonal model."""

    def __init__(
        self,
        calendar: SeasonalCalendar,
        runtime_basis: Optional[Mapping[int, int]] = None,
        dry_run_duration: Optional[int] = None,
    ):
        """
        Initialize use case.

        Args:
            calendar: Month -> basis/multiplier table
            runtime_basis: Zone number -> baseline minutes
            dry_run_duration: When set, every enabled zone runs this many
                minutes instead of the adjusted runtime
        """
        self.calendar = calendar
        self.runtime_basis = dict(runtime_basis or {})
        self.dry_run_duration = dry_run_duration

    def runtime_basis_for(self, zone: ZoneConfig) -> int:
        """Baseline minutes for a zone."""
        if zone.runtime_basis_minutes is not None:
            return zone.runtime_basis_minutes
        if zone.zone_number not in self.runtime_basis:
            raise NotFoundError(
                f"No runtime basis configured for zone {zone.zone_number} ({zone.name})"
            )
        return self.runtime_basis[zone.zone_number]

    def plan(
        self,
        zones: Sequence[ZoneConfig],
        month: int,
        temperature_for: Callable[[TemperatureBasis], int],
    ) -> Tuple[List[ZoneStartCommand], Optional[int]]:
        """
        Build today's commands, looking up the temperature only when needed.

        Args:
            zones: Zones reported by the controller
            month: Current month (1-12) in the controller's timezone
            temperature_for: Returns today's temperature for a basis

        Returns:
            The commands and the temperature used (None for dry runs)
        """
        if self.dry_run_duration is not None:
            return self.fixed_commands(zones), None

        basis = self.calendar.basis_for(month)
        temperature = temperature_for(basis)
        logger.info(f"Temperature basis for month {month} is {basis}: {temperature}F")
        return self.adjusted_commands(zones, temperature, month), temperature

    def execute(
        self,
        zones: Sequence[ZoneConfig],
        temperature: Optional[int],
        month: int,
    ) -> List[ZoneStartCommand]:
        """
        Execute the runtime adjustment.

        Args:
            zones: Zones reported by the controller
            temperature: Today's temperature for the month's basis (unused on dry runs)
            month: Current month (1-12) in the controller's timezone

        Returns:
            One ZoneStartCommand per enabled zone, zero durations included
        """
        if self.dry_run_duration is not None:
            return self.fixed_commands(zones)
        return self.adjusted_commands(zones, temperature, month)

    def fixed_commands(self, zones: Sequence[ZoneConfig]) -> List[ZoneStartCommand]:
        logger.warning(f"Dry run: every enabled zone runs {self.dry_run_duration} minute(s)")
        return [
            ZoneStartCommand(zone.id, self.dry_run_duration * 60)
            for zone in zones
            if zone.enabled
        ]

    def adjusted_commands(
        self,
        zones: Sequence[ZoneConfig],
        temperature: int,
        month: int,
    ) -> List[ZoneStartCommand]:
        multiplier = self.calendar.multiplier_for(month)
        commands = []
        for zone in zones:
            if not zone.enabled:
                continue
            basis = self.runtime_basis_for(zone)
            minutes = adjusted_minutes(basis, temperature, multiplier)
            logger.info(
                f"{zone.name}: basis={basis}min temperature={temperature}F "
                f"multiplier={multiplier} -> {minutes}min"
            )
            commands.append(ZoneStartCommand(zone.id, minutes * 60))

        return commands
