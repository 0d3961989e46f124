"""Weather Underground 10-day forecast repository implementation."""

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

import pandas as pd

from ..http_client import JsonHttpClient
from ...domain.entities.forecast_day import ForecastDay
from ...domain.errors import ConfigError, TransportError
from ...domain.repositories.weather_repository import WeatherRepository

logger = logging.getLogger(__name__)

WUNDERGROUND_API_BASE = "http://api.wunderground.com/api"

FORECAST_COLUMNS = ["date", "high", "low", "average", "rain_expected"]


class WundergroundWeatherRepository(WeatherRepository):
    """Repository for the Weather Underground ``forecast10day`` feature."""

    def __init__(
        self,
        api_key: str,
        base_url: str = WUNDERGROUND_API_BASE,
        timeout: float = 30,
        client: Optional[JsonHttpClient] = None,
    ):
        """
        Initialize repository.

        Args:
            api_key: Weather Underground API key
            base_url: API root
            timeout: Per-request timeout in seconds
            client: Transport to use instead of a new JsonHttpClient
        """
        super().__init__()
        if not api_key:
            raise ConfigError("Weather Underground API key is not set (WUNDERGROUND_API_KEY)")

        self.client = client or JsonHttpClient(f"{base_url.rstrip('/')}/{api_key}", timeout=timeout)
        self.frame: Optional[pd.DataFrame] = None

    def fetch_forecast(self, location: str, timezone: str, now: datetime) -> List[ForecastDay]:
        """Fetch and normalize the 10-day forecast for a zip code."""
        logger.info(f"Fetching 10-day forecast for {location} ({timezone})")
        payload = self.client.get(f"forecast10day/q/{location}.json")

        df = normalize_forecast(extract_forecast_days(payload), timezone, now)

        self.frame = df
        self._forecast = [
            ForecastDay(
                date=row.date,
                high=int(row.high),
                low=int(row.low),
                rain_expected=bool(row.rain_expected),
            )
            for row in df.itertuples(index=False)
        ]

        logger.info(f"Loaded {len(self._forecast)} forecast days")
        return list(self._forecast)


def extract_forecast_days(payload: Any) -> List[Dict[str, Any]]:
    """Flatten ``forecast.simpleforecast.forecastday`` into plain records."""
    try:
        days = payload["forecast"]["simpleforecast"]["forecastday"]
    except (KeyError, TypeError) as err:
        message = "Forecast response has no forecast.simpleforecast.forecastday"
        if isinstance(payload, dict):
            error = payload.get("response", {}).get("error", {})
            if error.get("description"):
                message = f"{message}: {error['description']}"
        raise TransportError(message) from err

    records = []
    for day in days:
        try:
            records.append(
                {
                    "epoch": int(day["date"]["epoch"]),
                    "high": day["high"]["fahrenheit"],
                    "low": day["low"]["fahrenheit"],
                    "qpf": (day.get("qpf_allday") or {}).get("in"),
                }
            )
        except (KeyError, TypeError, ValueError) as err:
            raise TransportError(f"Malformed forecast day: {err}") from err
    return records


def normalize_forecast(
    records: List[Dict[str, Any]],
    timezone: str,
    now: datetime,
) -> pd.DataFrame:
    """
    Build the per-date forecast table.

    Dates are assigned in ``timezone``. Days before today are dropped, the
    first entry wins for duplicate dates and the average is always derived
    from high and low.
    """
    if not records:
        return pd.DataFrame(columns=FORECAST_COLUMNS)

    df = pd.DataFrame(records)

    moment = pd.Timestamp(now)
    if moment.tzinfo is None:
        moment = moment.tz_localize("UTC")

    try:
        local = pd.to_datetime(df["epoch"], unit="s", utc=True).dt.tz_convert(timezone)
        today = moment.tz_convert(timezone).date()
    except (KeyError, ValueError, TypeError) as err:
        raise TransportError(f"Cannot localize forecast to timezone {timezone!r}") from err

    df["date"] = local.dt.date
    df["high"] = pd.to_numeric(df["high"], errors="coerce")
    df["low"] = pd.to_numeric(df["low"], errors="coerce")
    df["rain_expected"] = pd.to_numeric(df["qpf"], errors="coerce").fillna(0) > 0

    incomplete = df["high"].isna() | df["low"].isna()
    if incomplete.any():
        logger.warning(
            f"Dropping {int(incomplete.sum())} forecast day(s) without temperatures: "
            f"{sorted(df.loc[incomplete, 'date'])}"
        )
        df = df[~incomplete].copy()

    df["high"] = df["high"].astype(int)
    df["low"] = df["low"].astype(int)
    df["average"] = (df["high"] + df["low"]) // 2

    df = df[df["date"] >= today]
    df = df.drop_duplicates(subset="date", keep="first").sort_values("date")

    return df[FORECAST_COLUMNS].reset_index(drop=True)
