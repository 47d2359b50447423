"""Configuration models - Pure data structures.

These are domain models for configuration. The actual loading
(I/O) is handled by the shell layer.
"""

from dataclasses import dataclass, field

from src.core.catalog import DEFAULT_FETCH_LIMIT, TIME_RANGES
from src.core.zones import DEFAULT_HIGH_RISK_ZONES, HighRiskZone


@dataclass(frozen=True)
class PredictionSettings:
    """Tunable constants of the prediction engine.

    Attributes:
        mainshock_min_magnitude: Smallest event that spawns aftershocks
        mainshock_max_age_hours: Older mainshocks are considered exhausted
        min_aftershock_magnitude: Aftershocks below this are discarded
        aftershock_window_days: Forecast window for aftershock times
        omori_p: Omori decay exponent
        omori_c_days: Omori time offset in days
        gap_activity_days: Lookback for "recent activity" in a zone
        gap_activity_min_magnitude: Magnitude counted as zone activity
        gap_flag_probability: Chance of surfacing a quiet zone
        gap_forecast_days: Window for gap-warning times
        swarm_radius_deg: Neighbourhood radius for swarm clustering
        swarm_min_members: Smallest group recorded as a cluster
        swarm_escalation_min_members: Smallest cluster that may escalate
        swarm_escalation_probability: Chance of emitting an escalation
        swarm_max_magnitude: Cap on escalation magnitude
    """
    mainshock_min_magnitude: float = 5.0
    mainshock_max_age_hours: float = 72.0
    min_aftershock_magnitude: float = 3.0
    aftershock_window_days: float = 7.0
    omori_p: float = 1.1
    omori_c_days: float = 0.05
    gap_activity_days: float = 30.0
    gap_activity_min_magnitude: float = 5.0
    gap_flag_probability: float = 0.15
    gap_forecast_days: float = 30.0
    swarm_radius_deg: float = 1.0
    swarm_min_members: int = 3
    swarm_escalation_min_members: int = 5
    swarm_escalation_probability: float = 0.3
    swarm_max_magnitude: float = 7.5


DEFAULT_SETTINGS = PredictionSettings()


@dataclass
class Config:
    """Application configuration.

    This is a pure data structure - no I/O or side effects.

    Attributes:
        min_magnitude: Catalog magnitude floor
        time_range: Catalog window ('hour', 'day' or 'week')
        fetch_limit: Maximum events requested from the catalog
        include_predictions: Merge predictions into the displayed list
        random_seed: Seed for the prediction random source (None = unseeded)
        high_risk_zones: Zones scanned by the gap detector
        prediction: Prediction engine constants
    """
    min_magnitude: float = 0.0
    time_range: str = "day"
    fetch_limit: int = DEFAULT_FETCH_LIMIT
    include_predictions: bool = True
    random_seed: int | None = None
    high_risk_zones: tuple[HighRiskZone, ...] = DEFAULT_HIGH_RISK_ZONES
    prediction: PredictionSettings = field(default_factory=PredictionSettings)


@dataclass
class ValidationError:
    """A configuration validation error.

    Attributes:
        field: The field that has an error
        message: Human-readable error description
        severity: 'error' or 'warning'
    """
    field: str
    message: str
    severity: str = "error"


@dataclass
class ValidationResult:
    """Result of validating configuration.

    Attributes:
        valid: True if no errors (warnings are OK)
        errors: List of validation errors/warnings
    """
    valid: bool
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def warnings(self) -> list[ValidationError]:
        """Get only warnings."""
        return [e for e in self.errors if e.severity == "warning"]

    @property
    def critical_errors(self) -> list[ValidationError]:
        """Get only critical errors."""
        return [e for e in self.errors if e.severity == "error"]


def validate_coordinates(lat: float, lon: float, field_name: str) -> list[ValidationError]:
    """Validate latitude/longitude coordinates.

    Pure function.

    Args:
        lat: Latitude value
        lon: Longitude value
        field_name: Name of the field for error messages

    Returns:
        List of validation errors (empty if valid)
    """
    errors = []

    if not -90 <= lat <= 90:
        errors.append(ValidationError(
            field=field_name,
            message=f"Latitude {lat} out of range [-90, 90]",
        ))

    if not -180 <= lon <= 180:
        errors.append(ValidationError(
            field=field_name,
            message=f"Longitude {lon} out of range [-180, 180]",
        ))

    return errors


def validate_zones(zones: tuple[HighRiskZone, ...]) -> list[ValidationError]:
    """Validate the high-risk zone table.

    Pure function.
    """
    errors = []
    seen: set[str] = set()

    for i, zone in enumerate(zones):
        errors.extend(validate_coordinates(
            zone.latitude, zone.longitude, f"high_risk_zones[{i}]",
        ))
        if zone.radius_deg <= 0:
            errors.append(ValidationError(
                field=f"high_risk_zones[{i}].radius_deg",
                message=f"Zone radius must be positive, got {zone.radius_deg}",
            ))
        if zone.slug in seen:
            errors.append(ValidationError(
                field=f"high_risk_zones[{i}].name",
                message=f"Duplicate zone name '{zone.name}'",
                severity="warning",
            ))
        seen.add(zone.slug)

    if not zones:
        errors.append(ValidationError(
            field="high_risk_zones",
            message="No high-risk zones configured; gap detection disabled",
            severity="warning",
        ))

    return errors


def validate_settings(settings: PredictionSettings) -> list[ValidationError]:
    """Validate prediction engine constants.

    Pure function.
    """
    errors = []

    for name in (
        "gap_flag_probability",
        "swarm_escalation_probability",
    ):
        value = getattr(settings, name)
        if not 0.0 <= value <= 1.0:
            errors.append(ValidationError(
                field=f"prediction.{name}",
                message=f"Probability must be within [0, 1], got {value}",
            ))

    for name in (
        "aftershock_window_days",
        "gap_forecast_days",
        "swarm_radius_deg",
        "omori_c_days",
    ):
        value = getattr(settings, name)
        if value <= 0:
            errors.append(ValidationError(
                field=f"prediction.{name}",
                message=f"Value must be positive, got {value}",
            ))

    if settings.omori_p <= 0:
        errors.append(ValidationError(
            field="prediction.omori_p",
            message=f"Omori p must be positive, got {settings.omori_p}",
        ))

    if settings.swarm_escalation_min_members < settings.swarm_min_members:
        errors.append(ValidationError(
            field="prediction.swarm_escalation_min_members",
            message=(
                f"swarm_escalation_min_members ({settings.swarm_escalation_min_members}) "
                f"< swarm_min_members ({settings.swarm_min_members}); "
                "smaller clusters are never formed"
            ),
            severity="warning",
        ))

    return errors


def validate_config(config: Config) -> ValidationResult:
    """Validate configuration for errors and warnings.

    Pure function.

    Args:
        config: Configuration to validate

    Returns:
        ValidationResult with any errors/warnings found
    """
    errors: list[ValidationError] = []

    if config.time_range not in TIME_RANGES:
        errors.append(ValidationError(
            field="time_range",
            message=(
                f"Unknown time range '{config.time_range}', "
                f"expected one of {', '.join(TIME_RANGES)}"
            ),
        ))

    if config.fetch_limit <= 0:
        errors.append(ValidationError(
            field="fetch_limit",
            message=f"Fetch limit must be positive, got {config.fetch_limit}",
        ))

    if config.min_magnitude < 0:
        errors.append(ValidationError(
            field="min_magnitude",
            message=f"Negative magnitude floor {config.min_magnitude}",
            severity="warning",
        ))

    errors.extend(validate_zones(config.high_risk_zones))
    errors.extend(validate_settings(config.prediction))

    has_critical = any(e.severity == "error" for e in errors)

    return ValidationResult(
        valid=not has_critical,
        errors=errors,
    )
