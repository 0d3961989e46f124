"""Rachio public API controller repository implementation."""

import logging
from typing import Any, Dict, List, Optional, Sequence

from ..http_client import JsonHttpClient
from ...domain.entities.device_state import DeviceState
from ...domain.entities.rain_delay_state import RainDelayState
from ...domain.entities.zone_config import ZoneConfig
from ...domain.entities.zone_start_command import ZoneStartCommand
from ...domain.errors import ConfigError, NotFoundError, TransportError
from ...domain.repositories.controller_repository import ControllerRepository

logger = logging.getLogger(__name__)

RACHIO_API_BASE = "https://api.rach.io/1/public"
MAX_RAIN_DELAY_SECONDS = 7 * 86400


class RachioControllerRepository(ControllerRepository):
    """Repository for the first Rachio controller on an account."""

    def __init__(
        self,
        api_token: str,
        base_url: str = RACHIO_API_BASE,
        timeout: float = 30,
        client: Optional[JsonHttpClient] = None,
    ):
        """
        Initialize repository.

        Args:
            api_token: Rachio API key (Bearer token)
            base_url: Rachio public API root
            timeout: Per-request timeout in seconds
            client: Transport to use instead of a new JsonHttpClient
        """
        if not api_token:
            raise ConfigError("Rachio API token is not set (RACHIO_API_TOKEN)")

        self.client = client or JsonHttpClient(
            base_url,
            headers={
                "Authorization": f"Bearer {api_token}",
                "Content-Type": "application/json",
            },
            timeout=timeout,
        )

    def fetch_device_state(self) -> DeviceState:
        """Retrieve the person's first device with its zones and rain delay."""
        person_info = self.client.get("person/info")
        person_id = person_info.get("id") if isinstance(person_info, dict) else None
        if not person_id:
            raise TransportError("Rachio person/info response has no id")

        person = self.client.get(f"person/{person_id}")
        devices = (person.get("devices") if isinstance(person, dict) else None) or []
        if not devices:
            raise NotFoundError(f"No Rachio devices found for person {person_id}")

        device = parse_device(devices[0])
        logger.info(
            f"Connected to Rachio device {device.name or device.device_id} "
            f"with {len(device.zones)} zones ({device.timezone}, {device.zip})"
        )
        return device

    def set_rain_delay(self, device_id: str, duration_seconds: int) -> None:
        """Start a rain delay of ``duration_seconds`` from now."""
        if not 0 <= duration_seconds <= MAX_RAIN_DELAY_SECONDS:
            raise ConfigError(
                f"Rain delay must be between 0 and {MAX_RAIN_DELAY_SECONDS} seconds, "
                f"got {duration_seconds}"
            )

        self.client.put("device/rain_delay", {"id": device_id, "duration": duration_seconds})
        logger.info(f"Rain delay of {duration_seconds}s set on device {device_id}")

    def start_zones(self, commands: Sequence[ZoneStartCommand]) -> None:
        """
        Start zones with one ``zone/start_multiple`` request.

        Zero-duration commands are left out of the request; when nothing is
        left no request is made.
        """
        zones = build_start_payload(commands)
        skipped = len(commands) - len(zones)
        if skipped:
            logger.info(f"Skipping {skipped} zone(s) with a zero duration")

        if not zones:
            logger.warning("No zone has a positive duration, nothing to start")
            return

        self.client.put("zone/start_multiple", {"zones": zones})
        logger.info(f"Started {len(zones)} zone(s)")


def build_start_payload(commands: Sequence[ZoneStartCommand]) -> List[Dict[str, Any]]:
    """Controller payload for the positive-duration commands, in run order."""
    zones = []
    for command in commands:
        if command.duration_seconds <= 0:
            continue
        entry = command.to_payload()
        entry["sortOrder"] = len(zones) + 1
        zones.append(entry)
    return zones


def parse_device(device: Dict[str, Any]) -> DeviceState:
    """Convert a Rachio device document to a DeviceState."""
    try:
        device_id = str(device["id"])
        timezone = str(device["timeZone"])
    except KeyError as err:
        raise TransportError(f"Rachio device is missing {err}") from err

    zones = sorted(
        (parse_zone(zone) for zone in device.get("zones", [])),
        key=lambda zone: zone.zone_number,
    )

    return DeviceState(
        device_id=device_id,
        timezone=timezone,
        zip=str(device.get("zip", "")),
        name=str(device.get("name", "")),
        zones=zones,
        rain_delay=RainDelayState(
            start=_optional_int(device.get("rainDelayStartDate")),
            expiration=_optional_int(device.get("rainDelayExpirationDate")),
        ),
    )


def parse_zone(zone: Dict[str, Any]) -> ZoneConfig:
    """Convert a Rachio zone document to a ZoneConfig."""
    try:
        return ZoneConfig(
            id=str(zone["id"]),
            zone_number=int(zone["zoneNumber"]),
            name=str(zone.get("name", f"Zone {zone['zoneNumber']}")),
            enabled=bool(zone.get("enabled", False)),
        )
    except (KeyError, TypeError, ValueError) as err:
        raise TransportError(f"Malformed Rachio zone: {err}") from err


def _optional_int(value: Any) -> Optional[int]:
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError) as err:
        raise TransportError(f"Malformed Rachio timestamp: {value!r}") from err
