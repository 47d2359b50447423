"""High-risk zone reference data - Pure data structures.

The zone table is configuration, not logic: the gap detector receives it as
an argument and tests substitute smaller tables.
"""

import re
from dataclasses import dataclass

from src.core.spatial import degree_distance


@dataclass(frozen=True)
class HighRiskZone:
    """A fault or subduction zone monitored for seismic gaps.

    Attributes:
        name: Human-readable zone name
        latitude: Zone center latitude
        longitude: Zone center longitude
        radius_deg: Zone radius in degrees
    """
    name: str
    latitude: float
    longitude: float
    radius_deg: float

    @property
    def slug(self) -> str:
        """Lowercase name with whitespace runs replaced by dashes."""
        return re.sub(r"\s+", "-", self.name).lower()

    def contains(self, latitude: float, longitude: float) -> bool:
        """Check if a point lies strictly inside the zone radius."""
        return degree_distance(
            latitude, longitude, self.latitude, self.longitude
        ) < self.radius_deg


# Ring of Fire and major continental fault systems
DEFAULT_HIGH_RISK_ZONES: tuple[HighRiskZone, ...] = (
    HighRiskZone("Japan Trench", 38.0, 142.0, 5.0),
    HighRiskZone("San Andreas Fault, CA", 36.0, -120.0, 3.0),
    HighRiskZone("Cascadia Subduction Zone", 45.0, -124.0, 4.0),
    HighRiskZone("Himalayan Front", 28.0, 85.0, 4.0),
    HighRiskZone("Peru-Chile Trench", -15.0, -75.0, 5.0),
    HighRiskZone("Sumatra Subduction Zone", 0.0, 98.0, 4.0),
    HighRiskZone("New Zealand Alpine Fault", -43.0, 170.0, 3.0),
)
