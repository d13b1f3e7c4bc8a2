"""Tests for view-state transforms."""

from dataclasses import replace
from datetime import datetime

import pytest

from glasscast.config.defaults import DEFAULT_BACKGROUND_URLS
from glasscast.config.schema import BackgroundConfig
from glasscast.models.errors import DecodeError
from glasscast.models.forecast import ForecastBundle
from glasscast.models.location import Location
from glasscast.models.view import (
    CurrentPanel,
    DailyPanel,
    HourlyPanel,
    PanelStatus,
    StatusPanel,
)
from glasscast.models.weather import BackgroundCategory, IconCategory
from glasscast.reporting import presenter


class TestPanels:
    def test_loading(self):
        panel = presenter.loading_panel()
        assert panel.status == PanelStatus.LOADING
        assert panel.message == "Loading..."

    def test_error(self):
        panel = presenter.error_panel("City not found.")
        assert panel == StatusPanel(PanelStatus.ERROR, "City not found.")

    def test_current(self, london_bundle: ForecastBundle):
        panel = presenter.current_panel("London", london_bundle.current)
        assert isinstance(panel, CurrentPanel)
        assert panel.city_name == "London"
        assert panel.temperature == 12
        assert panel.relative_humidity_pct == 87
        assert panel.wind_speed_kmh == 14.3
        assert panel.info.description == "Slight rain"

    def test_hourly(self, london_bundle: ForecastBundle):
        panel = presenter.hourly_panel(london_bundle.hourly, datetime(2026, 10, 19, 5, 30))
        assert isinstance(panel, HourlyPanel)
        assert len(panel.entries) == 24
        assert panel.entries[0].hour == 5
        assert panel.entries[0].info.icon == IconCategory.FOG

    def test_hourly_unaligned_placeholder(self, london_bundle: ForecastBundle):
        hourly = replace(
            london_bundle.hourly,
            times=london_bundle.hourly.times[:3],
            temperatures_c=london_bundle.hourly.temperatures_c[:3],
            weather_codes=london_bundle.hourly.weather_codes[:3],
        )
        panel = presenter.hourly_panel(hourly, datetime(2026, 10, 19, 18, 0))
        assert panel == StatusPanel(PanelStatus.PLACEHOLDER, "Could not get hourly forecast.")

    def test_daily(self, london_bundle: ForecastBundle):
        panel = presenter.daily_panel(london_bundle.daily)
        assert isinstance(panel, DailyPanel)
        assert len(panel.entries) == 6
        assert panel.entries[0].day_label == "Tue"
        assert panel.entries[0].max_temperature == 16


class TestSuggestionRows:
    def test_labels(self):
        rows = presenter.suggestion_rows([
            Location("London", 51.5, -0.1, region="England", country_code="GB"),
            Location("Londres", 0.0, 0.0, country_code="FR"),
            Location("Nowhere", 1.0, 1.0),
        ])
        assert [r.label for r in rows] == [
            "London (England, GB)",
            "Londres (FR)",
            "Nowhere",
        ]
        assert rows[0].location.latitude == 51.5


class TestBackground:
    def test_category_and_url(self):
        category, url = presenter.background_for(45, BackgroundConfig())
        assert category == BackgroundCategory.FOG
        assert url == DEFAULT_BACKGROUND_URLS["fog"]

    def test_configured_url(self):
        backgrounds = BackgroundConfig(storm="https://img.example.com/storm.jpg")
        category, url = presenter.background_for(96, backgrounds)
        assert category == BackgroundCategory.STORM
        assert url == "https://img.example.com/storm.jpg"


class TestMismatchedSeries:
    def test_hourly_panel_raises_decode_error(self, london_bundle: ForecastBundle):
        hourly = replace(
            london_bundle.hourly,
            temperatures_c=london_bundle.hourly.temperatures_c[:10],
        )
        with pytest.raises(DecodeError):
            presenter.hourly_panel(hourly, datetime(2026, 10, 19, 5))

    def test_daily_panel_raises_decode_error(self, london_bundle: ForecastBundle):
        daily = replace(
            london_bundle.daily,
            weather_codes=london_bundle.daily.weather_codes[:2],
        )
        with pytest.raises(DecodeError):
            presenter.daily_panel(daily)
