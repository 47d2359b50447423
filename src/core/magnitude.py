"""Magnitude and alert-level models - Pure functions.

Båth's Law gives the largest aftershock of a sequence roughly 1.2 units
below its mainshock. The remaining aftershocks use a uniform magnitude drop
as a stand-in for Gutenberg-Richter decay: the abundance of small events
comes from drawing many of them, not from the shape of a single draw.

Randomness is always taken from the caller's random.Random.
"""

import random

from src.core.event import ALERT_GREEN, ALERT_RED, ALERT_YELLOW


BATH_DELTA = 1.2
BATH_JITTER = 0.3

# Magnitude drop range for non-largest aftershocks
GR_MIN_DROP = 1.2
GR_MAX_DROP = 2.7
GR_MAGNITUDE_FLOOR = 2.0

SHALLOW_DEPTH_KM = 70.0


def estimate_aftershock_magnitude(
    mainshock_magnitude: float,
    is_largest: bool,
    rng: random.Random,
) -> float:
    """Draw a magnitude for one aftershock.

    Args:
        mainshock_magnitude: Magnitude of the parent event
        is_largest: Apply Båth's Law (largest aftershock of the sequence)
        rng: Random source

    Returns:
        Aftershock magnitude rounded to one decimal
    """
    if is_largest:
        jitter = (rng.random() - 0.5) * 2 * BATH_JITTER
        return round(mainshock_magnitude - BATH_DELTA + jitter, 1)

    drop = GR_MIN_DROP + rng.random() * (GR_MAX_DROP - GR_MIN_DROP)
    return round(max(mainshock_magnitude - drop, GR_MAGNITUDE_FLOOR), 1)


def estimate_aftershock_count(magnitude: float, rng: random.Random) -> int:
    """Draw the number of aftershocks to generate for a mainshock.

    Larger mainshocks produce longer sequences:
    [15, 25) for M7+, [8, 15) for M6-7, [3, 8) for M5-6, none below.
    """
    if magnitude >= 7.0:
        return rng.randrange(15, 25)
    if magnitude >= 6.0:
        return rng.randrange(8, 15)
    if magnitude >= 5.0:
        return rng.randrange(3, 8)
    return 0


def determine_alert_level(magnitude: float, depth_km: float) -> str:
    """Classify an event as Green/Yellow/Red.

    Pure function. Shallow (< 70 km) M6 events are escalated to Red.

    Args:
        magnitude: Event magnitude
        depth_km: Event depth in kilometers

    Returns:
        Alert level string
    """
    if magnitude >= 7.0:
        return ALERT_RED
    if magnitude >= 6.0:
        return ALERT_RED if depth_km < SHALLOW_DEPTH_KM else ALERT_YELLOW
    if magnitude >= 5.0:
        return ALERT_YELLOW
    return ALERT_GREEN


def fallback_alert_level(magnitude: float) -> str:
    """Magnitude-only alert level for catalog records without one."""
    if magnitude >= 7.0:
        return ALERT_RED
    if magnitude >= 5.0:
        return ALERT_YELLOW
    return ALERT_GREEN
