"""Tests for view formatters."""

import json
from datetime import datetime

import pytest

from glasscast.models.forecast import ForecastBundle
from glasscast.models.location import Location
from glasscast.models.view import ViewState
from glasscast.models.weather import BackgroundCategory
from glasscast.reporting import presenter
from glasscast.reporting.formatters import (
    format_view_html,
    format_view_json,
    format_view_text,
)


@pytest.fixture
def populated(london_bundle: ForecastBundle) -> ViewState:
    return ViewState(
        current=presenter.current_panel("London", london_bundle.current),
        hourly=presenter.hourly_panel(london_bundle.hourly, datetime(2026, 10, 19, 5)),
        daily=presenter.daily_panel(london_bundle.daily),
        background=BackgroundCategory.RAIN,
        background_url="https://img.example.com/rain.jpg",
    )


class TestText:
    def test_populated(self, populated: ViewState):
        text = format_view_text(populated)
        assert "=== London ===" in text
        assert "12°C, Slight rain" in text
        assert "Humidity: 87% | Wind: 14.3 km/h" in text
        assert "Hourly Forecast" in text
        assert "Daily Forecast" in text
        assert "Background: rain" in text

    def test_error_only(self):
        text = format_view_text(ViewState(current=presenter.error_panel("City not found.")))
        assert text == "City not found."


class TestJson:
    def test_populated(self, populated: ViewState):
        data = json.loads(format_view_json(populated))
        assert data["current"]["description"] == "Slight rain"
        assert data["current"]["icon"] == "cloud-showers-heavy"
        assert len(data["hourly"]["entries"]) == 24
        assert len(data["daily"]["entries"]) == 6
        assert data["background"] == "rain"
        assert data["suggestions"] == []

    def test_status_panels(self):
        data = json.loads(format_view_json(ViewState(current=presenter.loading_panel())))
        assert data["current"] == {"status": "loading", "message": "Loading..."}
        assert data["hourly"] is None
        assert data["background"] is None


class TestHtml:
    def test_populated(self, populated: ViewState):
        html = format_view_html(populated)
        assert '<div class="city-name">London</div>' in html
        assert "fa-solid fa-cloud-showers-heavy" in html
        assert html.count('<div class="hour">') == 24
        assert html.count('<div class="day">') == 6
        assert "background-image: url('https://img.example.com/rain.jpg')" in html

    def test_escapes_text(self):
        state = ViewState(current=presenter.error_panel("<b>bad</b>"))
        html = format_view_html(state)
        assert "&lt;b&gt;bad&lt;/b&gt;" in html
        assert 'id="error-message"' in html

    def test_suggestions(self):
        state = ViewState(
            suggestions=presenter.suggestion_rows(
                [Location("London", 51.5, -0.1, region="England", country_code="GB")]
            ),
            suggestions_visible=True,
        )
        html = format_view_html(state)
        assert 'class="suggestion-item">London <span class="country">England, GB</span>' in html
