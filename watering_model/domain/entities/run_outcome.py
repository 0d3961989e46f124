"""Run outcome entity."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from .zone_start_command import ZoneStartCommand


class RunStatus(str, Enum):
    """Terminal status of a watering run."""

    DELAYED = "delayed"
    WATERED = "watered"


class DelayReason(str, Enum):
    """Why a run was delayed."""

    DEVICE = "device"
    FORECAST = "forecast"


@dataclass(frozen=True)
class RunOutcome:
    """Result of one decision run."""

    status: RunStatus
    reason: Optional[DelayReason] = None
    commands: Tuple[ZoneStartCommand, ...] = field(default_factory=tuple)
    temperature: Optional[int] = None

    @classmethod
    def delayed(cls, reason: DelayReason) -> "RunOutcome":
        return cls(status=RunStatus.DELAYED, reason=reason)

    @classmethod
    def watered(cls, commands, temperature: Optional[int] = None) -> "RunOutcome":
        return cls(
            status=RunStatus.WATERED,
            commands=tuple(commands),
            temperature=temperature,
        )

    @property
    def is_delayed(self) -> bool:
        return self.status is RunStatus.DELAYED

    @property
    def total_seconds(self) -> int:
        return sum(command.duration_seconds for command in self.commands)
