"""Configuration Loader - Imperative Shell.

This module handles loading configuration from YAML files and
environment variables. All I/O is contained here.

Models (Config, PredictionSettings) are defined in src/core/config.py
to avoid information leakage between layers.
"""

import logging
import os
from dataclasses import fields
from pathlib import Path
from typing import Any

import yaml

from src.core.config import Config, PredictionSettings, validate_config
from src.core.zones import DEFAULT_HIGH_RISK_ZONES, HighRiskZone


logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _resolve_value(value: Any) -> Any:
    """Resolve a ${VAR} placeholder from the environment.

    Non-string values and plain strings are returned unchanged. An unset
    variable leaves the placeholder in place.
    """
    if not isinstance(value, str):
        return value

    if value.startswith("${") and value.endswith("}"):
        var_name = value[2:-1]
        env_value = os.environ.get(var_name)
        if env_value:
            return env_value
        logger.warning("Environment variable %s not set", var_name)

    return value


def _parse_bool(value: Any) -> bool:
    """Parse a YAML/env boolean, accepting common string spellings."""
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_VALUES
    return bool(value)


def _parse_zone(data: dict[str, Any]) -> HighRiskZone:
    """Parse a high-risk zone from config data."""
    return HighRiskZone(
        name=data["name"],
        latitude=float(_resolve_value(data["latitude"])),
        longitude=float(_resolve_value(data["longitude"])),
        radius_deg=float(_resolve_value(data["radius_deg"])),
    )


def _parse_prediction_settings(data: dict[str, Any]) -> PredictionSettings:
    """Parse prediction engine constants, ignoring unknown keys."""
    known = {f.name: f.type for f in fields(PredictionSettings)}
    values: dict[str, Any] = {}

    for key, raw in data.items():
        if key not in known:
            logger.warning("Unknown prediction setting: %s", key)
            continue
        value = _resolve_value(raw)
        default = getattr(PredictionSettings, key)
        values[key] = int(value) if isinstance(default, int) else float(value)

    return PredictionSettings(**values)


def _parse_seed(value: Any) -> int | None:
    value = _resolve_value(value)
    if value is None or value == "":
        return None
    if isinstance(value, str) and value.startswith("${"):
        # Unset placeholder means unseeded
        return None
    return int(value)


def load_config_from_dict(data: dict[str, Any]) -> Config:
    """Load configuration from a dictionary.

    This is a pure-ish function (only env var expansion has side effects).

    Args:
        data: Configuration dictionary

    Returns:
        Parsed Config object
    """
    if "high_risk_zones" in data:
        zones = tuple(_parse_zone(z) for z in data["high_risk_zones"] or [])
    else:
        zones = DEFAULT_HIGH_RISK_ZONES

    return Config(
        min_magnitude=float(_resolve_value(data.get("min_magnitude", 0.0))),
        time_range=str(_resolve_value(data.get("time_range", "day"))),
        fetch_limit=int(_resolve_value(data.get("fetch_limit", 200))),
        include_predictions=_parse_bool(_resolve_value(data.get("include_predictions", True))),
        random_seed=_parse_seed(data.get("random_seed")),
        high_risk_zones=zones,
        prediction=_parse_prediction_settings(data.get("prediction") or {}),
    )


def load_config(config_path: str | Path | None = None) -> Config:
    """Load configuration from a YAML file.

    This method performs file I/O.

    Args:
        config_path: Path to YAML config file.
                    If None, uses CONFIG_PATH env var or default.

    Returns:
        Parsed Config object

    Raises:
        yaml.YAMLError: If config file is invalid YAML
    """
    if config_path is None:
        config_path = os.environ.get("CONFIG_PATH", "config/config.yaml")

    path = Path(config_path)

    logger.info("Loading configuration from %s", path)

    if not path.exists():
        logger.warning("Config file not found: %s, using defaults", path)
        return Config()

    with open(path, "r") as f:
        data = yaml.safe_load(f)

    if data is None:
        logger.warning("Config file is empty, using defaults")
        return Config()

    config = load_config_from_dict(data)

    for issue in validate_config(config).errors:
        log = logger.warning if issue.severity == "warning" else logger.error
        log("Config %s: %s", issue.field, issue.message)

    logger.info(
        "Loaded config: %d zones, time range %s, min magnitude %.1f",
        len(config.high_risk_zones),
        config.time_range,
        config.min_magnitude,
    )

    return config


def load_config_from_env() -> Config:
    """Load configuration from environment variables.

    Useful for simple deployments without a YAML file.

    Environment variables:
        MIN_MAGNITUDE: Catalog magnitude floor
        TIME_RANGE: 'hour', 'day' or 'week'
        FETCH_LIMIT: Maximum catalog results
        INCLUDE_PREDICTIONS: Merge predictions into results (true/false)
        PREDICTION_SEED: Seed for the prediction random source

    Returns:
        Config object from environment
    """
    return Config(
        min_magnitude=float(os.environ.get("MIN_MAGNITUDE", "0.0")),
        time_range=os.environ.get("TIME_RANGE", "day"),
        fetch_limit=int(os.environ.get("FETCH_LIMIT", "200")),
        include_predictions=_parse_bool(os.environ.get("INCLUDE_PREDICTIONS", "true")),
        random_seed=_parse_seed(os.environ.get("PREDICTION_SEED")),
    )
