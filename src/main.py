"""Cloud Function Entry Point.

This module provides the entry point for Google Cloud Functions.
It's a thin wrapper that loads configuration and invokes the orchestrator.
"""

import json
import logging
import os
import random
from typing import Any

import functions_framework
from flask import Request

from src.core.catalog import EventFilter
from src.orchestrator import Orchestrator
from src.shell.config_loader import load_config, load_config_from_env


# Configure logging
log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def _get_config():
    """Load configuration from file or environment."""
    config_path = os.environ.get("CONFIG_PATH")

    if config_path:
        return load_config(config_path)
    elif os.environ.get("TIME_RANGE") or os.environ.get("MIN_MAGNITUDE"):
        # Simple env-based config
        return load_config_from_env()
    else:
        # Try default config path
        return load_config()


def _get_arg(request: Any, name: str) -> str | None:
    args = getattr(request, "args", None)
    if args is None:
        return None
    return args.get(name)


@functions_framework.http
def earthquake_predictions(request: Request) -> tuple[dict[str, Any], int]:
    """HTTP Cloud Function entry point.

    Runs one fetch / predict / filter cycle. Optional query arguments:
    min_magnitude, time_range, q (location search), seed, predictions.

    Args:
        request: Flask request object

    Returns:
        Tuple of (response dict, HTTP status code)
    """
    logger.info("Starting prediction cycle")

    try:
        config = _get_config()

        min_magnitude = _get_arg(request, "min_magnitude")
        time_range = _get_arg(request, "time_range")
        seed = _get_arg(request, "seed")
        predictions_flag = _get_arg(request, "predictions")

        try:
            event_filter = EventFilter(
                min_magnitude=float(min_magnitude) if min_magnitude else config.min_magnitude,
                time_range=time_range or config.time_range,
            )
            rng = random.Random(int(seed)) if seed else None
        except ValueError as e:
            return {"status": "error", "message": str(e)}, 400

        include_predictions = None
        if predictions_flag is not None:
            include_predictions = predictions_flag.lower() not in ("0", "false", "no")

        orchestrator = Orchestrator(config, rng=rng)
        result = orchestrator.process(
            event_filter=event_filter,
            search_query=_get_arg(request, "q"),
            include_predictions=include_predictions,
        )

        response = {
            "status": "success" if result.success else "partial_failure",
            "summary": result.summary,
            "generated_at": result.generated_at.isoformat(),
            "events": [e.to_dict() for e in result.displayed],
            "observed_count": len(result.observed),
            "prediction_count": len(result.predictions),
        }

        if result.errors:
            response["errors"] = result.errors

        logger.info("Completed: %s", result.summary)

        status_code = 200 if result.success else 207  # 207 = Multi-Status
        return response, status_code

    except Exception as e:
        logger.exception("Unexpected error in prediction cycle")
        return {
            "status": "error",
            "message": str(e),
        }, 500


# For local testing
if __name__ == "__main__":
    print("Running prediction cycle locally...")

    # Mock request for local testing
    class MockRequest:
        args: dict[str, str] = {}

    response, status = earthquake_predictions(MockRequest())
    print(f"\nResponse ({status}):")
    print(json.dumps(response, indent=2))
