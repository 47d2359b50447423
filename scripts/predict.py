#!/usr/bin/env python3
"""Prediction preview script.

Fetches recent earthquakes (or generates a mock catalog), runs the
prediction engine and prints the observed and predicted events.

Usage:
    # Predictions from the last day of USGS data
    python scripts/predict.py

    # Last week, M4.5+, reproducible draws
    python scripts/predict.py --time-range week --min-magnitude 4.5 --seed 42

    # Only rows whose location mentions Japan
    python scripts/predict.py --search japan

    # Offline run over a random mock catalog, JSON output
    python scripts/predict.py --mock --json

Environment:
    CONFIG_PATH: Path to config file (default: config/config.yaml)
"""

import argparse
import json
import logging
import os
import random
import sys
from datetime import datetime, timezone

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.core.catalog import TIME_RANGES, EventFilter
from src.core.event import filter_by_magnitude
from src.core.formatter import filter_by_search, format_prediction_report
from src.core.mock_data import generate_mock_events
from src.core.prediction import generate_predictions, summarize_predictions
from src.orchestrator import Orchestrator
from src.shell.config_loader import load_config

logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Preview synthetic earthquake predictions",
    )
    parser.add_argument(
        "--min-magnitude",
        type=float,
        default=None,
        help="Catalog magnitude floor (default: from config)",
    )
    parser.add_argument(
        "--time-range",
        choices=list(TIME_RANGES),
        default=None,
        help="Catalog window (default: from config)",
    )
    parser.add_argument(
        "--search",
        default=None,
        help="Case-insensitive location filter",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for reproducible predictions",
    )
    parser.add_argument(
        "--mock",
        action="store_true",
        help="Use a random mock catalog instead of USGS",
    )
    parser.add_argument(
        "--mock-count",
        type=int,
        default=50,
        help="Number of mock events (default: 50)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print JSON instead of a text report",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    config = load_config()

    seed = args.seed if args.seed is not None else config.random_seed
    rng = random.Random(seed)
    now = datetime.now(timezone.utc)

    if args.mock:
        observed = filter_by_magnitude(
            generate_mock_events(now, rng, count=args.mock_count),
            min_magnitude=args.min_magnitude,
        )
        predictions = generate_predictions(
            observed,
            now,
            rng=rng,
            settings=config.prediction,
            zones=config.high_risk_zones,
        )
        errors: list[str] = []
    else:
        event_filter = EventFilter(
            min_magnitude=(
                args.min_magnitude if args.min_magnitude is not None
                else config.min_magnitude
            ),
            time_range=args.time_range or config.time_range,
        )
        result = Orchestrator(config, rng=rng).process(
            event_filter=event_filter,
            include_predictions=True,
            now=now,
        )
        observed, predictions, errors = result.observed, result.predictions, result.errors

    for error in errors:
        logger.error(error)

    observed = filter_by_search(observed, args.search)
    predictions = filter_by_search(predictions, args.search)

    if args.json:
        print(json.dumps(
            {
                "generated_at": now.isoformat(),
                "summary": summarize_predictions(predictions),
                "observed": [e.to_dict() for e in observed],
                "predictions": [e.to_dict() for e in predictions],
                "errors": errors,
            },
            indent=2,
        ))
    else:
        print(format_prediction_report(observed, predictions), end="")

    return 0 if not errors else 1


if __name__ == "__main__":
    sys.exit(main())
