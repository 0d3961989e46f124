"""Repository interfaces."""

from .weather_repository import WeatherRepository
from .controller_repository import ControllerRepository

__all__ = [
    "WeatherRepository",
    "ControllerRepository",
]
