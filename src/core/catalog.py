"""Catalog translation - Pure functions.

This module turns a user-facing filter into a catalog query window and
parses USGS GeoJSON features into Event objects. The HTTP request itself
lives in the shell (src/shell/usgs_client.py).
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any

from src.core.event import ALERT_LEVELS, ALERT_RED, Event
from src.core.magnitude import fallback_alert_level


TIME_RANGES: dict[str, timedelta] = {
    "hour": timedelta(hours=1),
    "day": timedelta(days=1),
    "week": timedelta(days=7),
}

# Cap on catalog results per request
DEFAULT_FETCH_LIMIT = 200

UNKNOWN_LOCATION = "Unknown Location"


@dataclass(frozen=True)
class EventFilter:
    """User-facing catalog filter.

    Attributes:
        min_magnitude: Minimum magnitude to fetch
        time_range: One of 'hour', 'day', 'week'
    """
    min_magnitude: float = 0.0
    time_range: str = "day"

    def __post_init__(self) -> None:
        if self.time_range not in TIME_RANGES:
            raise ValueError(
                f"Unknown time range '{self.time_range}', "
                f"expected one of {', '.join(TIME_RANGES)}"
            )


def compute_start_time(now: datetime, time_range: str) -> datetime:
    """Start of the catalog window ending at now.

    Pure function.

    Raises:
        ValueError: If time_range is not a known range
    """
    try:
        return now - TIME_RANGES[time_range]
    except KeyError:
        raise ValueError(f"Unknown time range '{time_range}'") from None


def normalize_alert_level(alert: str | None, magnitude: float) -> str:
    """Map a catalog PAGER alert to Green/Yellow/Red.

    Catalog alerts are lowercase; 'orange' has no counterpart and is
    reported as Red. Missing or unrecognized values fall back to a
    magnitude-only heuristic.
    """
    if alert:
        level = alert.strip().capitalize()
        if level == "Orange":
            return ALERT_RED
        if level in ALERT_LEVELS:
            return level
    return fallback_alert_level(magnitude)


def parse_event(feature: dict[str, Any]) -> Event | None:
    """Parse a single GeoJSON feature into an Event.

    Pure function: takes raw dict, returns typed Event or None if invalid.

    Args:
        feature: GeoJSON feature dict from USGS API

    Returns:
        Event object or None if parsing fails
    """
    try:
        props = feature.get("properties") or {}
        geometry = feature.get("geometry") or {}
        coords = geometry.get("coordinates") or []

        if len(coords) < 3:
            return None

        # USGS uses milliseconds since epoch
        time_ms = props.get("time")
        if time_ms is None:
            return None

        magnitude = props.get("mag")
        if magnitude is None:
            return None

        magnitude = float(magnitude)

        return Event(
            id=str(feature.get("id", "")),
            location=props.get("place") or UNKNOWN_LOCATION,
            longitude=float(coords[0]),
            latitude=float(coords[1]),
            depth_km=float(coords[2]),
            magnitude=magnitude,
            time=datetime.fromtimestamp(time_ms / 1000, tz=timezone.utc),
            alert_level=normalize_alert_level(props.get("alert"), magnitude),
            url=props.get("url") or "",
        )
    except (AttributeError, KeyError, TypeError, ValueError):
        return None


def parse_events(geojson: dict[str, Any]) -> list[Event]:
    """Parse USGS GeoJSON response into list of Events.

    Pure function: filters out invalid features, returns valid events.

    Args:
        geojson: Full GeoJSON FeatureCollection from USGS API

    Returns:
        List of valid Event objects, sorted by time (newest first)

    Raises:
        ValueError: If the payload is not a FeatureCollection-like dict
    """
    if not isinstance(geojson, dict):
        raise ValueError("Catalog payload is not a JSON object")

    features = geojson.get("features", [])
    if not isinstance(features, list):
        raise ValueError("Catalog payload 'features' is not a list")

    events = []

    for feature in features:
        if not isinstance(feature, dict):
            continue
        event = parse_event(feature)
        if event is not None:
            events.append(event)

    return sorted(events, key=lambda e: e.time, reverse=True)
