"""CLI interface for the watering model."""

import argparse
import logging
import sys

import pandas as pd

from ...application.services.watering_service import WateringService
from ...domain.entities.seasonal_calendar import SeasonalCalendar
from ...domain.errors import WateringError
from ...infrastructure.repositories.rachio_controller_repository import (
    RachioControllerRepository,
)
from ...infrastructure.repositories.wunderground_weather_repository import (
    WundergroundWeatherRepository,
)

from config.settings import (
    HTTP_SETTINGS,
    LOG_FORMAT,
    MODEL_SETTINGS,
    RACHIO_SETTINGS,
    SEASONAL_CALENDAR,
    WUNDERGROUND_SETTINGS,
    ZONE_RUNTIME_BASIS,
    ModelSettings,
    parse_timeout,
    validate_runtime_basis,
)

logger = logging.getLogger(__name__)

DELAYED_BANNER = "=== Stopping: Rain Delay ==="
WATERED_BANNER = "=== Done: Lawn Watered ==="
PREVIEW_BANNER = "=== Preview: Lawn Would Be Watered ==="


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Temperature based watering for a Rachio controller"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # === run: rain check, then water or delay ===
    run_parser = subparsers.add_parser("run", help="Decide and water (or set a rain delay)")
    run_parser.add_argument(
        "--preview", action="store_true", help="Compute the decision without sending commands"
    )
    run_parser.add_argument(
        "--dry-run-duration",
        type=int,
        default=None,
        help="Run every enabled zone this many minutes instead of the adjusted runtime",
    )
    run_parser.add_argument(
        "--rain-check-days",
        type=int,
        default=None,
        help="Forecast days to check for rain (0-10)",
    )
    run_parser.add_argument(
        "--rain-delay-days",
        type=int,
        default=None,
        help="Rain delay to set when rain is forecast (0-7)",
    )

    # === forecast: show the normalized forecast ===
    subparsers.add_parser("forecast", help="Show the forecast for the controller location")

    # === calendar: show the seasonal calendar ===
    subparsers.add_parser("calendar", help="Show the seasonal calendar")

    return parser


def build_service(args: argparse.Namespace) -> WateringService:
    overrides = {
        key: getattr(args, key, None)
        for key in ("rain_check_days", "rain_delay_days", "dry_run_duration")
    }
    settings = ModelSettings.from_dict(
        {**MODEL_SETTINGS, **{key: value for key, value in overrides.items() if value is not None}}
    )
    timeout = parse_timeout(HTTP_SETTINGS["timeout"])

    controller_repo = RachioControllerRepository(
        RACHIO_SETTINGS["api_token"],
        base_url=RACHIO_SETTINGS["api_url"],
        timeout=timeout,
    )
    weather_repo = WundergroundWeatherRepository(
        WUNDERGROUND_SETTINGS["api_key"],
        base_url=WUNDERGROUND_SETTINGS["api_url"],
        timeout=timeout,
    )

    return WateringService(
        controller_repo=controller_repo,
        weather_repo=weather_repo,
        calendar_definitions=SEASONAL_CALENDAR,
        zone_runtime_basis=validate_runtime_basis(ZONE_RUNTIME_BASIS),
        rain_check_days=settings.rain_check_days,
        rain_delay_days=settings.rain_delay_days,
        dry_run_duration=settings.dry_run_duration,
        ignore_expired_device_delay=settings.ignore_expired_device_delay,
    )


def print_calendar() -> None:
    calendar = SeasonalCalendar.from_dict(SEASONAL_CALENDAR)
    df = pd.DataFrame(
        [
            {"month": e.month, "name": e.name, "basis": str(e.basis), "multiplier": e.multiplier}
            for e in calendar
        ]
    )
    print(df.to_string(index=False))


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    try:
        # === Command: calendar ===
        if args.command == "calendar":
            print_calendar()
            return

        service = build_service(args)

        # === Command: forecast ===
        if args.command == "forecast":
            forecast = service.forecast()
            df = pd.DataFrame(
                [
                    {
                        "date": day.date.isoformat(),
                        "high": day.high,
                        "low": day.low,
                        "average": day.average,
                        "rain": day.rain_expected,
                    }
                    for day in forecast
                ]
            )
            print(df.to_string(index=False) if not df.empty else "No forecast days")
            return

        # === Command: run ===
        outcome = service.preview() if args.preview else service.run()

        if outcome.is_delayed:
            print(DELAYED_BANNER)
            return

        for command in outcome.commands:
            print(f"  {command.zone_id}: {command.duration_seconds}s")
        print(PREVIEW_BANNER if args.preview else WATERED_BANNER)

    except WateringError as e:
        logger.error(f"Run aborted: {e}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Unexpected failure: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
