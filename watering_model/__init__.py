"""Temperature and season based watering model for Rachio controllers."""

__version__ = "1.0.0"
