"""Rain delay state entity."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional


@dataclass(frozen=True)
class RainDelayState:
    """
    Device-reported rain delay window.

    Timestamps are epoch milliseconds as reported by the controller. Either may
    be missing when no delay has ever been set on the device.
    """

    start: Optional[int] = None
    expiration: Optional[int] = None

    @property
    def active(self) -> bool:
        """True when a delay window is recorded (expiration >= start)."""
        if self.start is None or self.expiration is None:
            return False
        return self.expiration >= self.start

    def expired(self, now: datetime) -> bool:
        """True when the window closed before ``now``."""
        if self.expiration is None:
            return True
        return self.expiration < to_epoch_ms(now)

    @property
    def expires_at(self) -> Optional[datetime]:
        if self.expiration is None:
            return None
        return datetime.fromtimestamp(self.expiration / 1000, tz=timezone.utc)


def to_epoch_ms(moment: datetime) -> int:
    """Convert an aware datetime to epoch milliseconds."""
    return int(moment.timestamp() * 1000)
