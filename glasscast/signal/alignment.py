"""Align forecast series with the location's clock for display windows."""

import math
from datetime import UTC, datetime, timedelta

from glasscast.models.errors import AlignmentError, DecodeError
from glasscast.models.forecast import DailySeries, ForecastBundle, HourlySeries
from glasscast.models.view import DailyEntry, HourlyEntry
from glasscast.signal.classifier import classify

DEFAULT_WINDOW_SIZE = 24

# Fixed en-US short weekday names, indexed by date.weekday()
WEEKDAY_LABELS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (-2.5 -> -2)."""
    return math.floor(value + 0.5)


def local_now(utc_offset_seconds: int, now: datetime | None = None) -> datetime:
    """Naive wall-clock time at a location with the given UTC offset."""
    if now is None:
        now = datetime.now(UTC)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=UTC)
    local = now.astimezone(UTC) + timedelta(seconds=utc_offset_seconds)
    return local.replace(tzinfo=None)


def _check_hourly(series: HourlySeries) -> None:
    lengths = {
        len(series.times), len(series.temperatures_c), len(series.weather_codes),
    }
    if len(lengths) != 1:
        raise DecodeError(f"Hourly series length mismatch: {sorted(lengths)}")


def _check_daily(series: DailySeries) -> None:
    lengths = {
        len(series.times),
        len(series.weather_codes),
        len(series.max_temperatures_c),
        len(series.min_temperatures_c),
    }
    if len(lengths) != 1:
        raise DecodeError(f"Daily series length mismatch: {sorted(lengths)}")


def validate_bundle(bundle: ForecastBundle) -> None:
    """Raise DecodeError if any parallel series differ in length."""
    _check_hourly(bundle.hourly)
    _check_daily(bundle.daily)


def hourly_window(
    series: HourlySeries,
    now: datetime,
    window_size: int = DEFAULT_WINDOW_SIZE,
) -> list[HourlyEntry]:
    """Up to `window_size` consecutive samples starting at now's hour.

    The start is the first sample whose hour of day equals `now.hour`.
    The window is truncated at the end of the series, never wrapped or padded.
    Mismatched series lengths raise DecodeError.
    """
    _check_hourly(series)
    start = next(
        (i for i, t in enumerate(series.times) if t.hour == now.hour), None
    )
    if start is None:
        raise AlignmentError(f"No hourly sample for {now.hour:02d}:00")

    end = min(start + window_size, len(series.times))
    return [
        HourlyEntry(
            hour=series.times[i].hour,
            temperature=round_half_up(series.temperatures_c[i]),
            info=classify(series.weather_codes[i]),
        )
        for i in range(start, end)
    ]


def daily_window(series: DailySeries) -> list[DailyEntry]:
    """Every day after today, in order. Index 0 is today and is skipped."""
    _check_daily(series)
    return [
        DailyEntry(
            day_label=WEEKDAY_LABELS[series.times[i].weekday()],
            max_temperature=round_half_up(series.max_temperatures_c[i]),
            min_temperature=round_half_up(series.min_temperatures_c[i]),
            info=classify(series.weather_codes[i]),
        )
        for i in range(1, len(series.times))
    ]
