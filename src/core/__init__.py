"""Functional Core - Pure functions with no side effects.

This module contains all business logic as pure functions:
- Event model and USGS catalog parsing
- Magnitude, spatial and temporal (Omori) models
- Aftershock, seismic gap and swarm prediction
- Presentation merging, search filtering and formatting

All functions here are deterministic given their inputs and an injected
random.Random; none perform I/O or read the clock.
"""

from src.core.event import Event, event_from_dict
from src.core.catalog import EventFilter, compute_start_time, parse_events
from src.core.magnitude import determine_alert_level, estimate_aftershock_magnitude
from src.core.spatial import estimate_rupture_length, generate_aftershock_location
from src.core.temporal import generate_aftershock_time
from src.core.aftershocks import generate_aftershocks
from src.core.gaps import predict_seismic_gaps
from src.core.swarms import SwarmCluster, identify_swarms, predict_swarm_escalations
from src.core.prediction import generate_predictions, summarize_predictions
from src.core.zones import DEFAULT_HIGH_RISK_ZONES, HighRiskZone
from src.core.formatter import filter_by_search, merge_with_predictions

__all__ = [
    # Event
    "Event",
    "event_from_dict",
    # Catalog
    "EventFilter",
    "compute_start_time",
    "parse_events",
    # Models
    "determine_alert_level",
    "estimate_aftershock_magnitude",
    "estimate_rupture_length",
    "generate_aftershock_location",
    "generate_aftershock_time",
    # Prediction
    "generate_aftershocks",
    "predict_seismic_gaps",
    "SwarmCluster",
    "identify_swarms",
    "predict_swarm_escalations",
    "generate_predictions",
    "summarize_predictions",
    # Zones
    "HighRiskZone",
    "DEFAULT_HIGH_RISK_ZONES",
    # Presentation
    "filter_by_search",
    "merge_with_predictions",
]
