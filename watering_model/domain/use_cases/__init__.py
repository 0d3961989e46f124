"""Use cases - core business operations."""

from .check_rain_delay import CheckRainDelayUseCase
from .adjust_zone_runtimes import AdjustZoneRuntimesUseCase, adjusted_minutes
from .decision_engine import DecisionEngine

__all__ = [
    "CheckRainDelayUseCase",
    "AdjustZoneRuntimesUseCase",
    "adjusted_minutes",
    "DecisionEngine",
]
