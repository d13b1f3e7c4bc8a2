"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

from glasscast.config.defaults import (
    DEFAULT_BACKGROUND_URLS,
    DEFAULT_CITY,
    FORECAST_URL,
    GEOCODING_URL,
)


class ApiConfig(BaseModel):
    model_config = {"extra": "forbid"}

    geocoding_url: str = GEOCODING_URL
    forecast_url: str = FORECAST_URL
    timeout_seconds: float = Field(default=10.0, gt=0.0)
    language: str = "en"


class WidgetConfig(BaseModel):
    model_config = {"extra": "forbid"}

    default_city: str = DEFAULT_CITY
    debounce_ms: int = Field(default=300, ge=0)
    min_query_length: int = Field(default=3, ge=1)
    suggestion_limit: int = Field(default=5, ge=1, le=100)
    hourly_window: int = Field(default=24, ge=1, le=168)


class BackgroundConfig(BaseModel):
    model_config = {"extra": "forbid"}

    clear: str = DEFAULT_BACKGROUND_URLS["clear"]
    cloudy: str = DEFAULT_BACKGROUND_URLS["cloudy"]
    rain: str = DEFAULT_BACKGROUND_URLS["rain"]
    fog: str = DEFAULT_BACKGROUND_URLS["fog"]
    storm: str = DEFAULT_BACKGROUND_URLS["storm"]


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api: ApiConfig = ApiConfig()
    widget: WidgetConfig = WidgetConfig()
    backgrounds: BackgroundConfig = BackgroundConfig()
