"""Open-Meteo forecast data models."""

from dataclasses import dataclass
from datetime import date, datetime


@dataclass(frozen=True)
class CurrentConditions:
    temperature_c: float
    relative_humidity_pct: int
    wind_speed_kmh: float
    weather_code: int


@dataclass(frozen=True)
class HourlySeries:
    """Index-aligned hourly samples in the location's local time."""

    times: list[datetime]
    temperatures_c: list[float]
    weather_codes: list[int]


@dataclass(frozen=True)
class DailySeries:
    times: list[date]
    weather_codes: list[int]
    max_temperatures_c: list[float]
    min_temperatures_c: list[float]


@dataclass(frozen=True)
class ForecastBundle:
    current: CurrentConditions
    hourly: HourlySeries
    daily: DailySeries
    timezone: str = "GMT"
    utc_offset_seconds: int = 0
