"""Device state entity."""

from dataclasses import dataclass, field
from typing import List

from .rain_delay_state import RainDelayState
from .zone_config import ZoneConfig


@dataclass(frozen=True)
class DeviceState:
    """Snapshot of the controller fetched at the start of a run."""

    device_id: str
    timezone: str  # IANA name, e.g. 'America/Chicago'
    zip: str
    name: str = ""
    zones: List[ZoneConfig] = field(default_factory=list)
    rain_delay: RainDelayState = field(default_factory=RainDelayState)

    @property
    def enabled_zones(self) -> List[ZoneConfig]:
        return [zone for zone in self.zones if zone.enabled]
