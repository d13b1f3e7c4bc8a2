"""Output formatters for a rendered view."""

import json
from html import escape

from glasscast.models.view import (
    CurrentPanel,
    DailyPanel,
    HourlyPanel,
    PanelStatus,
    StatusPanel,
    ViewState,
)


def format_view_text(v: ViewState) -> str:
    """Plain text view for terminals and logs."""
    lines: list[str] = []

    if isinstance(v.current, CurrentPanel):
        c = v.current
        lines.append(f"=== {c.city_name} ===")
        lines.append(f"{c.temperature}°C, {c.info.description}")
        lines.append(
            f"Humidity: {c.relative_humidity_pct}% | Wind: {c.wind_speed_kmh} km/h"
        )
    elif isinstance(v.current, StatusPanel):
        lines.append(v.current.message)

    if isinstance(v.hourly, HourlyPanel):
        lines.append("")
        lines.append("Hourly Forecast")
        for h in v.hourly.entries:
            lines.append(f"  {h.hour:>2}:00  {h.temperature:>4}°C  {h.info.description}")
    elif isinstance(v.hourly, StatusPanel):
        lines.append("")
        lines.append(v.hourly.message)

    if isinstance(v.daily, DailyPanel):
        lines.append("")
        lines.append("Daily Forecast")
        for d in v.daily.entries:
            lines.append(
                f"  {d.day_label}  {d.max_temperature:>4}° {d.min_temperature:>4}°"
                f"  {d.info.description}"
            )

    if v.background is not None:
        lines.append("")
        lines.append(f"Background: {v.background}")
    return "\n".join(lines)


def format_view_json(v: ViewState) -> str:
    """JSON view for programmatic consumption."""
    data: dict = {
        "current": _panel_dict(v.current),
        "hourly": _panel_dict(v.hourly),
        "daily": _panel_dict(v.daily),
        "background": v.background.value if v.background else None,
        "background_url": v.background_url,
        "suggestions": [s.label for s in v.suggestions] if v.suggestions_visible else [],
    }
    return json.dumps(data, indent=2)


def _panel_dict(panel) -> dict | None:
    if panel is None:
        return None
    if isinstance(panel, StatusPanel):
        return {"status": panel.status.value, "message": panel.message}
    if isinstance(panel, CurrentPanel):
        return {
            "city_name": panel.city_name,
            "temperature": panel.temperature,
            "relative_humidity_pct": panel.relative_humidity_pct,
            "wind_speed_kmh": panel.wind_speed_kmh,
            "icon": panel.info.icon.value,
            "description": panel.info.description,
        }
    if isinstance(panel, HourlyPanel):
        return {
            "entries": [
                {"hour": h.hour, "temperature": h.temperature, "icon": h.info.icon.value}
                for h in panel.entries
            ]
        }
    return {
        "entries": [
            {
                "day": d.day_label,
                "max_temperature": d.max_temperature,
                "min_temperature": d.min_temperature,
                "icon": d.info.icon.value,
            }
            for d in panel.entries
        ]
    }


def _icon_class(icon: str) -> str:
    return f"fa-solid fa-{icon}"


def format_view_html(v: ViewState) -> str:
    """HTML fragments for the widget's containers."""
    parts: list[str] = []

    if v.suggestions_visible and v.suggestions:
        rows = "".join(
            f'<div class="suggestion-item">{escape(s.location.name)} '
            f'<span class="country">{escape(s.location.region or "")}, '
            f'{escape(s.location.country_code or "")}</span></div>'
            for s in v.suggestions
        )
        parts.append(f'<div id="suggestions-wrapper">{rows}</div>')

    parts.append(f'<div id="weather-content">{_current_html(v.current)}</div>')

    if isinstance(v.hourly, HourlyPanel):
        hours = "".join(
            f'<div class="hour"><span>{h.hour}:00</span>'
            f'<i class="{_icon_class(h.info.icon)}"></i>'
            f"<span>{h.temperature}&deg;C</span></div>"
            for h in v.hourly.entries
        )
        parts.append(
            '<div id="hourly-content"><h2>Hourly Forecast</h2>'
            f'<div class="hourly-forecast">{hours}</div></div>'
        )
    elif isinstance(v.hourly, StatusPanel):
        parts.append(f'<div id="hourly-content"><p>{escape(v.hourly.message)}</p></div>')

    if isinstance(v.daily, DailyPanel):
        days = "".join(
            f'<div class="day"><span>{d.day_label}</span>'
            f'<i class="{_icon_class(d.info.icon)}"></i>'
            f'<div class="day-temps"><span>{d.max_temperature}&deg;</span>'
            f"<span>{d.min_temperature}&deg;</span></div></div>"
            for d in v.daily.entries
        )
        parts.append(
            '<div id="daily-content"><h2>Daily Forecast</h2>'
            f'<div class="daily-forecast">{days}</div></div>'
        )

    body = "\n".join(parts)
    if v.background_url:
        return (
            f"<body style=\"background-image: url('{escape(v.background_url)}')\">"
            f"\n{body}\n</body>"
        )
    return body


def _current_html(panel: CurrentPanel | StatusPanel | None) -> str:
    if panel is None:
        return ""
    if isinstance(panel, StatusPanel):
        element_id = "loading" if panel.status == PanelStatus.LOADING else "error-message"
        return f'<div id="{element_id}"><p>{escape(panel.message)}</p></div>'
    return (
        '<div class="weather-main">'
        f'<i class="weather-icon {_icon_class(panel.info.icon)}"></i>'
        f'<div class="temperature">{panel.temperature}&deg;C</div></div>'
        f'<div class="city-name">{escape(panel.city_name)}</div>'
        f'<div class="weather-description">{escape(panel.info.description)}</div>'
        '<div class="weather-details">'
        '<div class="detail"><i class="fa-solid fa-water"></i>'
        f"<span>{panel.relative_humidity_pct}%</span><span>Humidity</span></div>"
        '<div class="detail"><i class="fa-solid fa-wind"></i>'
        f"<span>{panel.wind_speed_kmh} km/h</span><span>Wind</span></div></div>"
    )
