"""Spatial model - Pure functions.

Rupture-length scaling, aftershock placement around an epicenter and the
distance helpers used by the gap and swarm detectors.

Offsets are converted with a flat-Earth local approximation
(111 km per degree of latitude), which is adequate at rupture scales.
"""

import math
import random


KM_PER_DEGREE = 111.0

# Aftershocks are placed within this multiple of the rupture length
AFTERSHOCK_ZONE_FACTOR = 2.0

# Keeps the longitude conversion finite at the poles
MIN_COS_LATITUDE = 1e-6


def estimate_rupture_length(magnitude: float) -> float:
    """Estimate fault rupture length in kilometers.

    Pure function. log10(L) = 0.5 * M - 1.8 (Wells & Coppersmith style).
    """
    return 10 ** (0.5 * magnitude - 1.8)


def km_to_degrees_latitude(distance_km: float) -> float:
    """Convert a north-south distance to degrees of latitude."""
    return distance_km / KM_PER_DEGREE


def km_to_degrees_longitude(distance_km: float, latitude: float) -> float:
    """Convert an east-west distance to degrees of longitude at a latitude."""
    cos_lat = max(abs(math.cos(math.radians(latitude))), MIN_COS_LATITUDE)
    return distance_km / (KM_PER_DEGREE * cos_lat)


def generate_aftershock_location(
    latitude: float,
    longitude: float,
    magnitude: float,
    rng: random.Random,
) -> tuple[float, float]:
    """Place an aftershock around a mainshock epicenter.

    Distance is 2L * sqrt(u), which favors points near the epicenter;
    the bearing is uniform.

    Args:
        latitude: Mainshock latitude
        longitude: Mainshock longitude
        magnitude: Mainshock magnitude (sets the rupture length L)
        rng: Random source

    Returns:
        (latitude, longitude) of the aftershock
    """
    max_distance = estimate_rupture_length(magnitude) * AFTERSHOCK_ZONE_FACTOR
    distance = max_distance * rng.random() ** 0.5
    angle = rng.random() * 2 * math.pi

    lat_offset = km_to_degrees_latitude(distance * math.cos(angle))
    lng_offset = km_to_degrees_longitude(distance * math.sin(angle), latitude)

    return (latitude + lat_offset, wrap_longitude(longitude + lng_offset))


def wrap_longitude(longitude: float) -> float:
    """Normalize a longitude into [-180, 180)."""
    return ((longitude + 180.0) % 360.0) - 180.0


def degree_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Euclidean distance between two points in degree space.

    Pure function. Not a geodesic distance; used for zone and cluster
    membership tests measured in degrees.
    """
    return math.hypot(lat1 - lat2, lon1 - lon2)

