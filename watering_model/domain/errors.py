"""Domain errors."""


class WateringError(Exception):
    """Base class for errors that abort a watering run."""


class TransportError(WateringError):
    """A collaborator call did not produce a valid structured response."""

    def __init__(self, message: str, status_code=None):
        super().__init__(message)
        self.status_code = status_code


class NotFoundError(WateringError):
    """Expected data is absent (today's forecast, a zone's runtime basis)."""


class ConfigError(WateringError):
    """Static configuration is malformed."""
