"""Irrigation controller repository interface."""

from abc import ABC, abstractmethod
from typing import Sequence

from ..entities.device_state import DeviceState
from ..entities.zone_start_command import ZoneStartCommand


class ControllerRepository(ABC):
    """Abstract repository for irrigation controller state and commands."""

    @abstractmethod
    def fetch_device_state(self) -> DeviceState:
        """
        Retrieve device configuration, zones and rain delay state.

        Returns:
            DeviceState entity
        """
        pass

    @abstractmethod
    def set_rain_delay(self, device_id: str, duration_seconds: int) -> None:
        """
        Set or extend a rain delay starting now.

        Args:
            device_id: Controller identifier
            duration_seconds: Length of the delay window
        """
        pass

    @abstractmethod
    def start_zones(self, commands: Sequence[ZoneStartCommand]) -> None:
        """
        Start all given zones in one batched request.

        Args:
            commands: Zones and durations to run
        """
        pass
