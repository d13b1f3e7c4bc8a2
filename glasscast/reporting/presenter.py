"""Pure transforms from client and alignment output to view state."""

import logging
from datetime import datetime

from glasscast.config.schema import BackgroundConfig
from glasscast.models.errors import AlignmentError
from glasscast.models.forecast import CurrentConditions, DailySeries, HourlySeries
from glasscast.models.location import Location
from glasscast.models.view import (
    CurrentPanel,
    DailyPanel,
    HourlyPanel,
    PanelStatus,
    StatusPanel,
    SuggestionRow,
)
from glasscast.models.weather import BackgroundCategory
from glasscast.signal.alignment import (
    DEFAULT_WINDOW_SIZE,
    daily_window,
    hourly_window,
    round_half_up,
)
from glasscast.signal.classifier import background_category, classify

logger = logging.getLogger(__name__)

LOADING_MESSAGE = "Loading..."
HOURLY_UNAVAILABLE_MESSAGE = "Could not get hourly forecast."


def loading_panel() -> StatusPanel:
    return StatusPanel(PanelStatus.LOADING, LOADING_MESSAGE)


def error_panel(message: str) -> StatusPanel:
    return StatusPanel(PanelStatus.ERROR, message)


def current_panel(city_name: str, current: CurrentConditions) -> CurrentPanel:
    return CurrentPanel(
        city_name=city_name,
        temperature=round_half_up(current.temperature_c),
        relative_humidity_pct=current.relative_humidity_pct,
        wind_speed_kmh=current.wind_speed_kmh,
        info=classify(current.weather_code),
    )


def hourly_panel(
    series: HourlySeries,
    now: datetime,
    window_size: int = DEFAULT_WINDOW_SIZE,
) -> HourlyPanel | StatusPanel:
    """Hourly strip, or a placeholder when the series can't be aligned."""
    try:
        return HourlyPanel(hourly_window(series, now, window_size))
    except AlignmentError as e:
        logger.warning("Hourly alignment failed: %s", e)
        return StatusPanel(PanelStatus.PLACEHOLDER, HOURLY_UNAVAILABLE_MESSAGE)


def daily_panel(series: DailySeries) -> DailyPanel:
    return DailyPanel(daily_window(series))


def suggestion_rows(locations: list[Location]) -> list[SuggestionRow]:
    return [SuggestionRow(label=loc.label, location=loc) for loc in locations]


def background_for(
    code: int, backgrounds: BackgroundConfig
) -> tuple[BackgroundCategory, str]:
    """Ambient category and image URL for a weather code."""
    category = background_category(code)
    return category, getattr(backgrounds, category.value)
