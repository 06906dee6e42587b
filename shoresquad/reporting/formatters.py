"""Text and JSON renderings of the view models for the CLI."""

import json

from shoresquad.models.event import Event
from shoresquad.models.forecast import ICON_EMOJI, Forecast
from shoresquad.models.notification import Notification

FEATURED_BADGE = "Next Cleanup"


def format_forecast_text(f: Forecast) -> str:
    t, h = f.temperature_range_c, f.humidity_range_pct
    lines = [
        f"{ICON_EMOJI[f.condition_icon]} {f.temperature_c}°C  {f.condition_text}",
        f"Range: {t.low}-{t.high}°C | Humidity: {h.low}-{h.high}%",
        f.rain_summary,
    ]
    if f.periods:
        lines.append(
            "  ".join(
                f"{p.label}: {ICON_EMOJI[p.icon]} {p.short_label}" for p in f.periods
            )
        )
    return "\n".join(lines)


def format_forecast_json(f: Forecast) -> str:
    data = {
        "temperature_c": f.temperature_c,
        "temperature_range_c": [f.temperature_range_c.low, f.temperature_range_c.high],
        "condition_text": f.condition_text,
        "condition_icon": f.condition_icon.value,
        "condition_label": f.condition_label,
        "rain_summary": f.rain_summary,
        "humidity_range_pct": [f.humidity_range_pct.low, f.humidity_range_pct.high],
        "periods": [
            {
                "label": p.label.value,
                "region_text": p.region_text,
                "icon": p.icon.value,
                "short_label": p.short_label,
            }
            for p in f.periods
        ],
    }
    return json.dumps(data, indent=2, ensure_ascii=False)


def format_event_text(e: Event, featured: bool = False) -> str:
    lines = []
    if featured:
        lines.append(f"[{FEATURED_BADGE}]")
    lines += [
        f"#{e.id} {e.date_label}  {e.weather_badge}",
        e.title,
        f"📍 {e.location_label}",
        f"👥 {e.participant_count} squad members joining",
    ]
    return "\n".join(lines)


def format_events_text(events: list[Event], featured: Event | None = None) -> str:
    """Render a list of event cards. Only `featured` gets the badge."""
    if not events:
        return "No cleanup events to show."
    return "\n\n".join(
        format_event_text(e, featured=featured is not None and e.id == featured.id)
        for e in events
    )


def format_notification(n: Notification) -> str:
    return f"[{n.level}] {n.message}"
