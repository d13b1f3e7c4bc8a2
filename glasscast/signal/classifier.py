"""WMO weather code classification for icons, labels and backgrounds."""

from glasscast.models.weather import BackgroundCategory, IconCategory, WeatherInfo

WEATHER_CODES: dict[int, WeatherInfo] = {
    0: WeatherInfo(IconCategory.SUN, "Clear sky"),
    1: WeatherInfo(IconCategory.CLOUD_SUN, "Mainly clear"),
    2: WeatherInfo(IconCategory.CLOUD, "Partly cloudy"),
    3: WeatherInfo(IconCategory.CLOUD, "Overcast"),
    45: WeatherInfo(IconCategory.FOG, "Fog"),
    48: WeatherInfo(IconCategory.FOG, "Depositing rime fog"),
    51: WeatherInfo(IconCategory.DRIZZLE, "Light drizzle"),
    53: WeatherInfo(IconCategory.DRIZZLE, "Moderate drizzle"),
    55: WeatherInfo(IconCategory.DRIZZLE, "Dense drizzle"),
    61: WeatherInfo(IconCategory.RAIN, "Slight rain"),
    63: WeatherInfo(IconCategory.RAIN, "Moderate rain"),
    65: WeatherInfo(IconCategory.RAIN, "Heavy rain"),
    80: WeatherInfo(IconCategory.RAIN, "Slight rain showers"),
    81: WeatherInfo(IconCategory.RAIN, "Moderate rain showers"),
    82: WeatherInfo(IconCategory.RAIN, "Violent rain showers"),
    95: WeatherInfo(IconCategory.THUNDERSTORM, "Thunderstorm"),
}

UNKNOWN = WeatherInfo(IconCategory.UNKNOWN, "Unknown")

FOG_CODES = frozenset({45, 48})


def classify(code: int) -> WeatherInfo:
    """Icon and label for a weather code. Unlisted codes map to UNKNOWN."""
    return WEATHER_CODES.get(code, UNKNOWN)


def background_category(code: int) -> BackgroundCategory:
    """Coarse ambient bucket for a weather code.

    Fog is an explicit set and is checked before the numeric ranges.
    """
    if code in FOG_CODES:
        return BackgroundCategory.FOG
    if 0 <= code <= 1:
        return BackgroundCategory.CLEAR
    if 2 <= code <= 3:
        return BackgroundCategory.CLOUDY
    if 51 <= code <= 82:
        return BackgroundCategory.RAIN
    if code >= 95:
        return BackgroundCategory.STORM
    return BackgroundCategory.CLEAR
