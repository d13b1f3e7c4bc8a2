"""Open-Meteo forecast client: coordinates to a ForecastBundle."""

import logging
from datetime import date, datetime

from glasscast.config.defaults import FORECAST_URL
from glasscast.ingest.fetch import get_json
from glasscast.models.errors import DecodeError
from glasscast.models.forecast import (
    CurrentConditions,
    DailySeries,
    ForecastBundle,
    HourlySeries,
)

logger = logging.getLogger(__name__)

CURRENT_FIELDS = "temperature_2m,relative_humidity_2m,weather_code,wind_speed_10m"
HOURLY_FIELDS = "temperature_2m,weather_code"
DAILY_FIELDS = "weather_code,temperature_2m_max,temperature_2m_min"


class ForecastClient:
    def __init__(self, base_url: str = FORECAST_URL, timeout: float = 10.0):
        self.base_url = base_url
        self.timeout = timeout

    async def fetch_forecast(self, latitude: float, longitude: float) -> ForecastBundle:
        """Fetch current, hourly and daily data for a point.

        The upstream picks the timezone from the coordinates, so every series
        is in the location's local time. Series lengths are not checked here.
        """
        raw = await get_json(
            self.base_url,
            params={
                "latitude": latitude,
                "longitude": longitude,
                "current": CURRENT_FIELDS,
                "hourly": HOURLY_FIELDS,
                "daily": DAILY_FIELDS,
                "timezone": "auto",
            },
            timeout=self.timeout,
        )
        bundle = parse_forecast(raw)
        logger.debug(
            "Forecast for %.4f,%.4f: %d hourly, %d daily samples (%s)",
            latitude, longitude,
            len(bundle.hourly.times), len(bundle.daily.times), bundle.timezone,
        )
        return bundle


def parse_forecast(raw: dict) -> ForecastBundle:
    """Build a ForecastBundle from an Open-Meteo forecast response."""
    try:
        current = raw["current"]
        hourly = raw["hourly"]
        daily = raw["daily"]
        return ForecastBundle(
            current=CurrentConditions(
                temperature_c=float(current["temperature_2m"]),
                relative_humidity_pct=int(current["relative_humidity_2m"]),
                wind_speed_kmh=float(current["wind_speed_10m"]),
                weather_code=int(current["weather_code"]),
            ),
            hourly=HourlySeries(
                times=[datetime.fromisoformat(t) for t in hourly["time"]],
                temperatures_c=[float(t) for t in hourly["temperature_2m"]],
                weather_codes=[int(c) for c in hourly["weather_code"]],
            ),
            daily=DailySeries(
                times=[date.fromisoformat(t) for t in daily["time"]],
                weather_codes=[int(c) for c in daily["weather_code"]],
                max_temperatures_c=[float(t) for t in daily["temperature_2m_max"]],
                min_temperatures_c=[float(t) for t in daily["temperature_2m_min"]],
            ),
            timezone=str(raw.get("timezone", "GMT")),
            utc_offset_seconds=int(raw.get("utc_offset_seconds", 0)),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise DecodeError(f"Malformed forecast response: {e}") from e
