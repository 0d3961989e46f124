"""Zone configuration entity."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ZoneConfig:
    """Represents a controller zone and its weather-independent runtime."""

    id: str
    zone_number: int
    name: str
    enabled: bool
    runtime_basis_minutes: Optional[int] = None  # resolved from settings when None

    def __str__(self) -> str:
        return self.name
