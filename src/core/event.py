"""Seismic event model - Pure data structures.

This module defines the Event shared by the catalog parser, the prediction
engine and the presentation layer. Observed and predicted events use the
same type; predicted events carry is_predicted=True and a provenance prefix
on their id.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any


ALERT_GREEN = "Green"
ALERT_YELLOW = "Yellow"
ALERT_RED = "Red"

ALERT_LEVELS = (ALERT_GREEN, ALERT_YELLOW, ALERT_RED)

# Provenance prefixes for predicted event ids
AFTERSHOCK_PREFIX = "pred-aftershock-"
GAP_PREFIX = "pred-gap-"
SWARM_PREFIX = "pred-swarm-"


@dataclass(frozen=True)
class Event:
    """Immutable seismic event.

    Attributes:
        id: Unique event ID (catalog ID or generated prediction ID)
        location: Human-readable location description
        latitude: Epicenter latitude in degrees
        longitude: Epicenter longitude in degrees
        magnitude: Event magnitude
        depth_km: Depth in kilometers
        time: Event timestamp (UTC), past for observed, future for predicted
        alert_level: One of Green/Yellow/Red
        is_predicted: True for synthetic events produced by the engine
        url: Catalog event page (observed events only)
    """
    id: str
    location: str
    latitude: float
    longitude: float
    magnitude: float
    depth_km: float
    time: datetime
    alert_level: str = ALERT_GREEN
    is_predicted: bool = False
    url: str = ""

    @property
    def coordinates(self) -> tuple[float, float]:
        """Return (latitude, longitude) tuple."""
        return (self.latitude, self.longitude)

    @property
    def source(self) -> str:
        """Name of the mechanism that produced this event.

        Returns 'observed' for catalog events and one of 'aftershock',
        'gap' or 'swarm' for predictions.
        """
        if not self.is_predicted:
            return "observed"
        if self.id.startswith(AFTERSHOCK_PREFIX):
            return "aftershock"
        if self.id.startswith(GAP_PREFIX):
            return "gap"
        if self.id.startswith(SWARM_PREFIX):
            return "swarm"
        return "unknown"

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the JSON shape consumed by map/list clients."""
        return {
            "id": self.id,
            "location": self.location,
            "coordinates": [self.latitude, self.longitude],
            "magnitude": self.magnitude,
            "depth": self.depth_km,
            "time": self.time.isoformat(),
            "alertLevel": self.alert_level,
            "isPredicted": self.is_predicted,
        }


def parse_timestamp(value: str | datetime) -> datetime:
    """Parse an ISO-8601 timestamp into an aware UTC datetime.

    Naive values are assumed to be UTC. A trailing 'Z' is accepted.
    """
    if isinstance(value, datetime):
        parsed = value
    else:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def event_from_dict(data: dict[str, Any]) -> Event:
    """Build an Event from its serialized dict form.

    Inverse of Event.to_dict(). Also accepts snake_case keys.

    Raises:
        KeyError: If a required field is missing
        ValueError: If a field cannot be converted
    """
    if "coordinates" in data:
        latitude, longitude = data["coordinates"]
    else:
        latitude, longitude = data["latitude"], data["longitude"]

    alert_level = data.get("alertLevel", data.get("alert_level", ALERT_GREEN))
    if alert_level not in ALERT_LEVELS:
        raise ValueError(f"Unknown alert level: {alert_level}")

    return Event(
        id=str(data["id"]),
        location=data.get("location", "Unknown Location"),
        latitude=float(latitude),
        longitude=float(longitude),
        magnitude=float(data["magnitude"]),
        depth_km=float(data.get("depth", data.get("depth_km", 0.0))),
        time=parse_timestamp(data["time"]),
        alert_level=alert_level,
        is_predicted=bool(data.get("isPredicted", data.get("is_predicted", False))),
        url=data.get("url", ""),
    )


def filter_by_magnitude(
    events: list[Event],
    min_magnitude: float | None = None,
    max_magnitude: float | None = None,
) -> list[Event]:
    """Filter events by magnitude range.

    Pure function.

    Args:
        events: List of events to filter
        min_magnitude: Minimum magnitude (inclusive), None for no minimum
        max_magnitude: Maximum magnitude (inclusive), None for no maximum

    Returns:
        Filtered list of events
    """
    result = events

    if min_magnitude is not None:
        result = [e for e in result if e.magnitude >= min_magnitude]

    if max_magnitude is not None:
        result = [e for e in result if e.magnitude <= max_magnitude]

    return result
