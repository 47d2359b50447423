"""Seismic gap detector - Pure functions.

A seismic gap is a stretch of a known fault or subduction zone with no
recent major activity, where strain may be accumulating. Quiet zones are
surfaced stochastically rather than all at once.
"""

import logging
import random
from datetime import datetime, timedelta

from src.core.config import DEFAULT_SETTINGS, PredictionSettings
from src.core.event import ALERT_RED, ALERT_YELLOW, GAP_PREFIX, Event
from src.core.temporal import days_between, timestamp_ms
from src.core.zones import DEFAULT_HIGH_RISK_ZONES, HighRiskZone


logger = logging.getLogger(__name__)

LOCATION_PREFIX = "Seismic Gap Monitoring: "

GAP_MIN_MAGNITUDE = 5.5
GAP_MAX_MAGNITUDE = 7.0
GAP_MIN_DEPTH_KM = 10.0
GAP_MAX_DEPTH_KM = 40.0
GAP_RED_MAGNITUDE = 6.5


def has_recent_activity(
    zone: HighRiskZone,
    events: list[Event],
    now: datetime,
    settings: PredictionSettings = DEFAULT_SETTINGS,
) -> bool:
    """Check whether a zone saw a significant observed event recently.

    Pure function.
    """
    for event in events:
        if event.is_predicted:
            continue
        if event.magnitude < settings.gap_activity_min_magnitude:
            continue
        if days_between(event.time, now) >= settings.gap_activity_days:
            continue
        if zone.contains(event.latitude, event.longitude):
            return True
    return False


def build_gap_prediction(
    zone: HighRiskZone,
    now: datetime,
    rng: random.Random,
    settings: PredictionSettings = DEFAULT_SETTINGS,
) -> Event:
    """Draw a gap-warning event for a quiet zone."""
    magnitude = round(
        GAP_MIN_MAGNITUDE + rng.random() * (GAP_MAX_MAGNITUDE - GAP_MIN_MAGNITUDE), 1,
    )
    depth_km = GAP_MIN_DEPTH_KM + rng.random() * (GAP_MAX_DEPTH_KM - GAP_MIN_DEPTH_KM)
    offset = timedelta(days=rng.random() * settings.gap_forecast_days)
    latitude = zone.latitude + (rng.random() - 0.5) * zone.radius_deg
    longitude = zone.longitude + (rng.random() - 0.5) * zone.radius_deg

    return Event(
        id=f"{GAP_PREFIX}{zone.slug}-{timestamp_ms(now)}",
        location=f"{LOCATION_PREFIX}{zone.name}",
        latitude=latitude,
        longitude=longitude,
        magnitude=magnitude,
        depth_km=round(depth_km, 1),
        time=now + offset,
        alert_level=ALERT_RED if magnitude >= GAP_RED_MAGNITUDE else ALERT_YELLOW,
        is_predicted=True,
    )


def predict_seismic_gaps(
    events: list[Event],
    now: datetime,
    rng: random.Random,
    zones: tuple[HighRiskZone, ...] = DEFAULT_HIGH_RISK_ZONES,
    settings: PredictionSettings = DEFAULT_SETTINGS,
) -> list[Event]:
    """Flag quiet high-risk zones as potential seismic gaps.

    Each zone without recent activity is surfaced with the configured
    probability, so a call yields at most one prediction per zone.

    Args:
        events: Observed events
        now: Reference time
        rng: Random source
        zones: Zone table to scan
        settings: Engine constants

    Returns:
        Gap-warning predictions in zone-table order
    """
    predictions = []

    for zone in zones:
        if has_recent_activity(zone, events, now, settings):
            continue
        if rng.random() >= settings.gap_flag_probability:
            continue
        predictions.append(build_gap_prediction(zone, now, rng, settings))
        logger.debug("Flagged seismic gap in %s", zone.name)

    return predictions
