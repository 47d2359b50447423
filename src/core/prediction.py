"""Prediction engine entry point - Pure functions.

Runs the three prediction sources over the observed events and merges their
output into one time-ordered list:

1. Aftershocks (Omori's Law, Båth's Law, rupture-length scaling)
2. Seismic gaps in high-risk zones
3. Swarm escalation forecasts

No deduplication is performed across sources.
"""

import logging
import random
from collections import Counter
from datetime import datetime

from src.core.aftershocks import generate_aftershocks
from src.core.config import DEFAULT_SETTINGS, PredictionSettings
from src.core.event import Event, parse_timestamp
from src.core.gaps import predict_seismic_gaps
from src.core.swarms import identify_swarms, predict_swarm_escalations
from src.core.zones import DEFAULT_HIGH_RISK_ZONES, HighRiskZone


logger = logging.getLogger(__name__)


def select_mainshocks(
    events: list[Event],
    settings: PredictionSettings = DEFAULT_SETTINGS,
) -> list[Event]:
    """Observed events large enough to spawn aftershocks, in input order."""
    return [
        e for e in events
        if e.magnitude >= settings.mainshock_min_magnitude and not e.is_predicted
    ]


def generate_predictions(
    events: list[Event],
    now: datetime,
    rng: random.Random | None = None,
    settings: PredictionSettings = DEFAULT_SETTINGS,
    zones: tuple[HighRiskZone, ...] = DEFAULT_HIGH_RISK_ZONES,
) -> list[Event]:
    """Produce predicted events from the current observed events.

    The input list is not modified. An empty input is valid and can still
    yield gap warnings.

    Args:
        events: Observed events
        now: Reference time for every prediction (naive means UTC)
        rng: Random source; a fresh unseeded one is used if omitted
        settings: Engine constants
        zones: High-risk zone table for the gap detector

    Returns:
        Predicted events sorted by time, earliest first
    """
    now = parse_timestamp(now)
    if rng is None:
        rng = random.Random()

    predictions: list[Event] = []

    for mainshock in select_mainshocks(events, settings):
        predictions.extend(generate_aftershocks(mainshock, now, rng, settings))

    predictions.extend(predict_seismic_gaps(events, now, rng, zones, settings))

    clusters = identify_swarms(
        events,
        radius_deg=settings.swarm_radius_deg,
        min_members=settings.swarm_min_members,
    )
    predictions.extend(predict_swarm_escalations(clusters, now, rng, settings))

    logger.debug(
        "Generated %d predictions from %d events (%d swarms)",
        len(predictions),
        len(events),
        len(clusters),
    )

    # sorted() is stable, so ties keep source order
    return sorted(predictions, key=lambda e: e.time)


def summarize_predictions(predictions: list[Event]) -> dict[str, int]:
    """Count predictions by the mechanism that produced them.

    Pure function.

    Returns:
        Dict with 'aftershock', 'gap', 'swarm' and 'total' counts
    """
    counts = Counter(e.source for e in predictions if e.is_predicted)
    return {
        "aftershock": counts.get("aftershock", 0),
        "gap": counts.get("gap", 0),
        "swarm": counts.get("swarm", 0),
        "total": sum(counts.values()),
    }
