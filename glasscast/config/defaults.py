"""Default endpoints, startup city and ambient background images."""

GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"
FORECAST_URL = "https://api.open-meteo.com/v1/forecast"

DEFAULT_CITY = "London"

_UNSPLASH = "https://images.unsplash.com"

DEFAULT_BACKGROUND_URLS: dict[str, str] = {
    "clear": f"{_UNSPLASH}/photo-1506748686214-e9df14d4d9d0",
    "cloudy": f"{_UNSPLASH}/photo-1495312040802-a929cd14a6ab",
    "rain": f"{_UNSPLASH}/photo-1519692933481-e162a57d6721",
    "fog": f"{_UNSPLASH}/photo-1487621167305-5d248087c883",
    "storm": f"{_UNSPLASH}/photo-1509316975850-ff9c5deb0cf1",
}
