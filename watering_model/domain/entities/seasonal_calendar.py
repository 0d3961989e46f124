"""Seasonal calendar entity."""

from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping

from ..errors import ConfigError
from .calendar_entry import CalendarEntry
from .temperature_basis import TemperatureBasis

MONTHS = range(1, 13)


class SeasonalCalendar:
    """
    Fixed month -> (temperature basis, multiplier) table.

    The table is validated on construction: all twelve months must be present
    and every multiplier must be positive.
    """

    def __init__(self, entries: Mapping[int, CalendarEntry]):
        missing = [month for month in MONTHS if month not in entries]
        if missing:
            raise ConfigError(f"Seasonal calendar is missing months: {missing}")

        extra = sorted(month for month in entries if month not in MONTHS)
        if extra:
            raise ConfigError(f"Seasonal calendar has invalid months: {extra}")

        for month, entry in entries.items():
            if entry.month != month:
                raise ConfigError(
                    f"Calendar entry for month {month} is labelled month {entry.month}"
                )
            if not entry.multiplier > 0:
                raise ConfigError(
                    f"Multiplier for {entry.name} must be positive, got {entry.multiplier}"
                )

        self._entries = MappingProxyType(dict(entries))

    @classmethod
    def from_dict(cls, definitions: Dict[int, Dict[str, Any]]) -> "SeasonalCalendar":
        """Create SeasonalCalendar from the settings table."""
        try:
            entries = {
                int(month): CalendarEntry.from_dict(month, definition)
                for month, definition in definitions.items()
            }
        except (KeyError, TypeError, ValueError) as e:
            raise ConfigError(f"Malformed seasonal calendar: {e}") from e
        return cls(entries)

    def entry_for(self, month: int) -> CalendarEntry:
        if month not in self._entries:
            raise ConfigError(f"Month out of range: {month}")
        return self._entries[month]

    def basis_for(self, month: int) -> TemperatureBasis:
        return self.entry_for(month).basis

    def multiplier_for(self, month: int) -> float:
        return self.entry_for(month).multiplier

    def __iter__(self) -> Iterator[CalendarEntry]:
        return (self._entries[month] for month in MONTHS)

    def __len__(self) -> int:
        return len(self._entries)
