"""Imperative Shell - I/O and side effects.

This module contains all code that interacts with external systems:
- USGS API client (HTTP)
- Configuration loading (environment/files)

Keep this layer thin and simple. All business logic should be in core.
"""

from src.shell.usgs_client import USGSClient, DataUnavailableError
from src.shell.config_loader import load_config, load_config_from_env
from src.core.config import Config

__all__ = [
    "USGSClient",
    "DataUnavailableError",
    "load_config",
    "load_config_from_env",
    "Config",
]
