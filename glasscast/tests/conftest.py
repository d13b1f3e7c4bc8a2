"""Shared test fixtures."""

import json
from datetime import UTC, datetime
from pathlib import Path

import pytest
import yaml

from glasscast.config.schema import AppConfig
from glasscast.ingest.forecast_client import parse_forecast
from glasscast.models.forecast import ForecastBundle

FIXTURE_DIR = Path(__file__).parent / "fixtures"

GEO_URL = "https://test-geo.example.com/v1/search"
FORECAST_URL = "https://test-forecast.example.com/v1/forecast"

# 05:30 in London (BST, UTC+1) on the fixture's first day
FIXED_NOW = datetime(2026, 10, 19, 4, 30, tzinfo=UTC)


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def forecast_json() -> dict:
    with open(FIXTURE_DIR / "forecast_london.json") as f:
        return json.load(f)


@pytest.fixture
def geocoding_json() -> dict:
    with open(FIXTURE_DIR / "geocoding_london.json") as f:
        return json.load(f)


@pytest.fixture
def london_bundle(forecast_json: dict) -> ForecastBundle:
    return parse_forecast(forecast_json)


@pytest.fixture
def test_config() -> AppConfig:
    """Config pointed at mock endpoints with a short debounce."""
    return AppConfig(
        api={"geocoding_url": GEO_URL, "forecast_url": FORECAST_URL},
        widget={"debounce_ms": 20},
    )


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "api": {"geocoding_url": GEO_URL, "forecast_url": FORECAST_URL},
        "widget": {"default_city": "Paris", "debounce_ms": 150},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW
