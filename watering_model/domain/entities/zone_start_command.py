"""Zone start command entity."""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class ZoneStartCommand:
    """A request to run one zone for a number of seconds."""

    zone_id: str
    duration_seconds: int

    def __post_init__(self):
        if self.duration_seconds < 0:
            raise ValueError(f"Duration must not be negative: {self.duration_seconds}")

    def to_payload(self) -> Dict[str, Any]:
        """Controller wire format."""
        return {"id": self.zone_id, "duration": self.duration_seconds}
