"""Aftershock generator - Pure functions.

Composes the magnitude, spatial and temporal models into a bounded set of
predicted aftershocks for one mainshock.
"""

import logging
import random
from datetime import datetime, timedelta

from src.core.config import DEFAULT_SETTINGS, PredictionSettings
from src.core.event import AFTERSHOCK_PREFIX, Event
from src.core.magnitude import (
    determine_alert_level,
    estimate_aftershock_count,
    estimate_aftershock_magnitude,
)
from src.core.spatial import generate_aftershock_location
from src.core.temporal import generate_aftershock_time, hours_between


logger = logging.getLogger(__name__)

LOCATION_PREFIX = "Predicted Aftershock: "


def is_eligible_mainshock(
    event: Event,
    now: datetime,
    settings: PredictionSettings = DEFAULT_SETTINGS,
) -> bool:
    """Check whether an event can spawn aftershock predictions.

    Pure function. Requires a significant, observed event no older than
    the configured age limit.
    """
    if event.is_predicted:
        return False
    if event.magnitude < settings.mainshock_min_magnitude:
        return False
    return hours_between(event.time, now) <= settings.mainshock_max_age_hours


def generate_aftershocks(
    mainshock: Event,
    now: datetime,
    rng: random.Random,
    settings: PredictionSettings = DEFAULT_SETTINGS,
) -> list[Event]:
    """Predict aftershocks for a single mainshock.

    The first draw applies Båth's Law; the rest use Gutenberg-Richter
    decay. Draws below the minimum aftershock magnitude are dropped, so the
    result may be shorter than the drawn count.

    Args:
        mainshock: Parent event
        now: Reference time
        rng: Random source
        settings: Engine constants

    Returns:
        Predicted aftershocks in generation order
    """
    if not is_eligible_mainshock(mainshock, now, settings):
        return []

    count = estimate_aftershock_count(mainshock.magnitude, rng)
    window = timedelta(days=settings.aftershock_window_days)
    predictions = []

    for index in range(count):
        magnitude = estimate_aftershock_magnitude(
            mainshock.magnitude, is_largest=index == 0, rng=rng,
        )
        if magnitude < settings.min_aftershock_magnitude:
            continue

        latitude, longitude = generate_aftershock_location(
            mainshock.latitude, mainshock.longitude, mainshock.magnitude, rng,
        )
        time = generate_aftershock_time(
            now, rng, window, settings.omori_p, settings.omori_c_days,
        )
        depth_km = round(mainshock.depth_km * (0.7 + rng.random() * 0.6), 1)

        predictions.append(Event(
            id=f"{AFTERSHOCK_PREFIX}{mainshock.id}-{index}",
            location=f"{LOCATION_PREFIX}{mainshock.location}",
            latitude=latitude,
            longitude=longitude,
            magnitude=magnitude,
            depth_km=depth_km,
            time=time,
            alert_level=determine_alert_level(magnitude, depth_km),
            is_predicted=True,
        ))

    logger.debug(
        "Mainshock %s (M%.1f): %d of %d aftershocks kept",
        mainshock.id,
        mainshock.magnitude,
        len(predictions),
        count,
    )

    return predictions
