"""Swarm detector and escalation predictor - Pure functions.

Clustering is a single greedy pass in input order: an unassigned event
gathers every other unassigned event within the radius, and a large enough
group becomes a cluster whose members can no longer seed or join another.
The result depends on input order; a later event might have formed a
larger cluster had it been visited first. This is kept as-is.
"""

import logging
import math
import random
from dataclasses import dataclass
from datetime import datetime, timedelta

from src.core.config import DEFAULT_SETTINGS, PredictionSettings
from src.core.event import ALERT_RED, ALERT_YELLOW, SWARM_PREFIX, Event
from src.core.spatial import degree_distance
from src.core.temporal import timestamp_ms


logger = logging.getLogger(__name__)

LOCATION_PREFIX = "Swarm Activity Analysis: "

ESCALATION_MAGNITUDE_STEP = 1.0
ESCALATION_MAGNITUDE_JITTER = 0.5
ESCALATION_MIN_DAYS = 3.0
ESCALATION_MAX_DAYS = 7.0
ESCALATION_RED_MAGNITUDE = 6.0


@dataclass(frozen=True)
class SwarmCluster:
    """A spatial cluster of observed events.

    Attributes:
        latitude: Centroid latitude
        longitude: Centroid longitude
        avg_depth_km: Mean member depth
        events: Member events in input order
    """
    latitude: float
    longitude: float
    avg_depth_km: float
    events: tuple[Event, ...]

    @property
    def size(self) -> int:
        return len(self.events)

    @property
    def avg_magnitude(self) -> float:
        return sum(e.magnitude for e in self.events) / len(self.events)

    @property
    def center(self) -> tuple[float, float]:
        """Return (latitude, longitude) of the centroid."""
        return (self.latitude, self.longitude)


def _build_cluster(members: list[Event]) -> SwarmCluster:
    count = len(members)
    return SwarmCluster(
        latitude=sum(e.latitude for e in members) / count,
        longitude=sum(e.longitude for e in members) / count,
        avg_depth_km=sum(e.depth_km for e in members) / count,
        events=tuple(members),
    )


def identify_swarms(
    events: list[Event],
    radius_deg: float = DEFAULT_SETTINGS.swarm_radius_deg,
    min_members: int = DEFAULT_SETTINGS.swarm_min_members,
) -> list[SwarmCluster]:
    """Group observed events into spatial swarms.

    Pure function. Predicted events are ignored. The seed event is part of
    its own neighbourhood, and membership is disjoint across clusters.

    Args:
        events: Events in input order
        radius_deg: Neighbourhood radius in degrees (strict)
        min_members: Smallest neighbourhood recorded as a cluster

    Returns:
        Clusters in the order their seeds were visited
    """
    assigned: set[int] = set()
    clusters = []

    for i, seed in enumerate(events):
        if i in assigned or seed.is_predicted:
            continue

        neighbours = [
            j for j, other in enumerate(events)
            if j not in assigned
            and not other.is_predicted
            and degree_distance(
                seed.latitude, seed.longitude, other.latitude, other.longitude,
            ) < radius_deg
        ]

        if len(neighbours) < min_members:
            continue

        clusters.append(_build_cluster([events[j] for j in neighbours]))
        assigned.update(neighbours)

    return clusters


def _round_up(value: float, digits: int = 1) -> float:
    scale = 10 ** digits
    return math.ceil(round(value * scale, 9)) / scale


def build_escalation_prediction(
    cluster: SwarmCluster,
    now: datetime,
    rng: random.Random,
    settings: PredictionSettings = DEFAULT_SETTINGS,
) -> Event:
    """Draw an escalation event at a cluster's centroid.

    Magnitude is rounded up so it never drops below the cluster average
    plus one unit.
    """
    raw_magnitude = (
        cluster.avg_magnitude
        + ESCALATION_MAGNITUDE_STEP
        + rng.random() * ESCALATION_MAGNITUDE_JITTER
    )
    magnitude = _round_up(min(raw_magnitude, settings.swarm_max_magnitude))
    offset_days = ESCALATION_MIN_DAYS + rng.random() * (ESCALATION_MAX_DAYS - ESCALATION_MIN_DAYS)

    return Event(
        id=(
            f"{SWARM_PREFIX}{cluster.latitude:.2f}-{cluster.longitude:.2f}"
            f"-{timestamp_ms(now)}"
        ),
        location=f"{LOCATION_PREFIX}{cluster.events[0].location}",
        latitude=cluster.latitude,
        longitude=cluster.longitude,
        magnitude=magnitude,
        depth_km=round(cluster.avg_depth_km, 1),
        time=now + timedelta(days=offset_days),
        alert_level=ALERT_RED if magnitude >= ESCALATION_RED_MAGNITUDE else ALERT_YELLOW,
        is_predicted=True,
    )


def predict_swarm_escalations(
    clusters: list[SwarmCluster],
    now: datetime,
    rng: random.Random,
    settings: PredictionSettings = DEFAULT_SETTINGS,
) -> list[Event]:
    """Forecast larger events for dense swarms.

    Each cluster with enough members escalates with the configured
    probability.

    Args:
        clusters: Output of identify_swarms()
        now: Reference time
        rng: Random source
        settings: Engine constants

    Returns:
        Escalation predictions, at most one per cluster
    """
    predictions = []

    for cluster in clusters:
        if cluster.size < settings.swarm_escalation_min_members:
            continue
        if rng.random() >= settings.swarm_escalation_probability:
            continue
        predictions.append(build_escalation_prediction(cluster, now, rng, settings))
        logger.debug(
            "Swarm of %d events near (%.2f, %.2f) escalated",
            cluster.size,
            cluster.latitude,
            cluster.longitude,
        )

    return predictions
