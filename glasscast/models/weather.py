"""Weather condition categories."""

from dataclasses import dataclass
from enum import StrEnum


class IconCategory(StrEnum):
    SUN = "sun"
    CLOUD_SUN = "cloud-sun"
    CLOUD = "cloud"
    FOG = "smog"
    DRIZZLE = "cloud-rain"
    RAIN = "cloud-showers-heavy"
    THUNDERSTORM = "cloud-bolt"
    UNKNOWN = "question"


class BackgroundCategory(StrEnum):
    CLEAR = "clear"
    CLOUDY = "cloudy"
    RAIN = "rain"
    FOG = "fog"
    STORM = "storm"


@dataclass(frozen=True)
class WeatherInfo:
    icon: IconCategory
    description: str
