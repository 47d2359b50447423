"""Mock catalog - Pure functions.

Synthetic observed events for demos and offline runs when the live catalog
is not wanted.
"""

import random
from datetime import datetime, timedelta

from src.core.event import Event
from src.core.magnitude import fallback_alert_level


MOCK_LOCATIONS = (
    "Pacific Ocean", "Japan Coast", "California, USA", "Chile", "Indonesia",
    "Alaska, USA", "New Zealand", "Mexico", "Philippines", "Peru",
    "Iceland", "Turkey", "Greece", "Italy", "Nepal",
)


def generate_mock_events(
    now: datetime,
    rng: random.Random,
    count: int = 50,
) -> list[Event]:
    """Generate random observed events from the last 24 hours.

    Args:
        now: Reference time
        rng: Random source
        count: Number of events

    Returns:
        Events ordered by generation index
    """
    events = []

    for i in range(count):
        location = rng.choice(MOCK_LOCATIONS)
        latitude = round(rng.random() * 160 - 80, 4)
        longitude = round(rng.random() * 360 - 180, 4)
        magnitude = round(rng.random() * 7 + 2, 1)
        depth_km = float(int(rng.random() * 100 + 5))
        time = now - timedelta(milliseconds=int(rng.random() * 24 * 3600 * 1000))

        events.append(Event(
            id=f"eq-{i}",
            location=f"{location} Region",
            latitude=latitude,
            longitude=longitude,
            magnitude=magnitude,
            depth_km=depth_km,
            time=time,
            alert_level=fallback_alert_level(magnitude),
        ))

    return events


# (id, location, latitude, longitude, magnitude, depth_km, hours_ago)
_DEMO_CATALOG = (
    ("eq-1", "Near Tokyo, Japan", 35.6762, 139.6503, 6.5, 35.0, 2),
    ("eq-2", "San Francisco Bay Area, CA", 37.7749, -122.4194, 5.3, 12.0, 12),
    ("eq-3", "Central Chile", -33.4489, -70.6693, 7.2, 45.0, 24),
    ("eq-4", "Sumatra, Indonesia", -0.5, 100.0, 4.2, 20.0, 6),
    ("eq-5", "Sumatra, Indonesia", -0.3, 100.2, 4.5, 18.0, 5),
    ("eq-6", "Sumatra, Indonesia", -0.4, 100.1, 4.1, 22.0, 4),
    ("eq-7", "Sumatra, Indonesia", -0.6, 99.9, 4.8, 19.0, 3),
    ("eq-8", "Sumatra, Indonesia", -0.5, 100.3, 4.3, 21.0, 2),
)


def demo_events(now: datetime) -> list[Event]:
    """Fixed demonstration catalog.

    Three recent mainshocks (M6.5 Tokyo, M5.3 San Francisco, M7.2 Chile)
    and a five-event swarm off Sumatra.
    """
    return [
        Event(
            id=event_id,
            location=location,
            latitude=latitude,
            longitude=longitude,
            magnitude=magnitude,
            depth_km=depth_km,
            time=now - timedelta(hours=hours_ago),
            alert_level=fallback_alert_level(magnitude),
        )
        for event_id, location, latitude, longitude, magnitude, depth_km, hours_ago
        in _DEMO_CATALOG
    ]
