"""Concrete repository implementations."""

from .rachio_controller_repository import RachioControllerRepository
from .wunderground_weather_repository import WundergroundWeatherRepository

__all__ = [
    "RachioControllerRepository",
    "WundergroundWeatherRepository",
]
