"""View state: what the widget container shows at any instant."""

from dataclasses import dataclass, field
from enum import StrEnum

from glasscast.models.location import Location
from glasscast.models.weather import BackgroundCategory, WeatherInfo


class PanelStatus(StrEnum):
    LOADING = "loading"
    ERROR = "error"
    PLACEHOLDER = "placeholder"


@dataclass(frozen=True)
class StatusPanel:
    status: PanelStatus
    message: str


@dataclass(frozen=True)
class CurrentPanel:
    city_name: str
    temperature: int
    relative_humidity_pct: int
    wind_speed_kmh: float
    info: WeatherInfo


@dataclass(frozen=True)
class HourlyEntry:
    hour: int  # local hour of day, 0-23
    temperature: int
    info: WeatherInfo


@dataclass(frozen=True)
class DailyEntry:
    day_label: str
    max_temperature: int
    min_temperature: int
    info: WeatherInfo


@dataclass(frozen=True)
class HourlyPanel:
    entries: list[HourlyEntry]


@dataclass(frozen=True)
class DailyPanel:
    entries: list[DailyEntry]


@dataclass(frozen=True)
class SuggestionRow:
    label: str
    location: Location


@dataclass(frozen=True)
class ViewState:
    current: CurrentPanel | StatusPanel | None = None
    hourly: HourlyPanel | StatusPanel | None = None
    daily: DailyPanel | None = None
    background: BackgroundCategory | None = None
    background_url: str | None = None
    suggestions: list[SuggestionRow] = field(default_factory=list)
    suggestions_visible: bool = False
    input_value: str = ""
