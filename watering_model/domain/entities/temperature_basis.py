"""Temperature basis enumeration."""

from enum import Enum


class TemperatureBasis(str, Enum):
    """Which daily forecast temperature counts as "the" temperature."""

    LOW = "Low"
    AVERAGE = "Avg"
    HIGH = "High"

    @classmethod
    def parse(cls, value: str) -> "TemperatureBasis":
        """Parse a basis from its value ("Avg") or member name ("average")."""
        text = str(value).strip().lower()
        for member in cls:
            if text in (member.value.lower(), member.name.lower()):
                return member
        raise ValueError(f"Unknown temperature basis: {value!r}")

    def __str__(self) -> str:
        return self.value
