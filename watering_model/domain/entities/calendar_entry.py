"""Calendar entry entity."""

from dataclasses import dataclass
from typing import Any, Dict

from .temperature_basis import TemperatureBasis


@dataclass(frozen=True)
class CalendarEntry:
    """Seasonal adjustment settings for one month."""

    month: int  # 1-12
    name: str  # e.g., 'January'
    basis: TemperatureBasis
    multiplier: float

    @classmethod
    def from_dict(cls, month: int, definition: Dict[str, Any]) -> "CalendarEntry":
        """Create CalendarEntry from dictionary definition."""
        return cls(
            month=int(month),
            name=definition.get("name", str(month)),
            basis=TemperatureBasis.parse(definition["temperature_basis"]),
            multiplier=float(definition.get("multiplier", 1.0)),
        )

    def __str__(self) -> str:
        return self.name
