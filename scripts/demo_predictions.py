#!/usr/bin/env python3
"""Prediction engine demonstration.

Runs the engine over a fixed catalog (M6.5 near Tokyo, M5.3 in the
San Francisco Bay Area, M7.2 in central Chile and a five-event swarm off
Sumatra) and explains what each prediction source produced.

Usage:
    python scripts/demo_predictions.py
    python scripts/demo_predictions.py --seed 7
"""

import argparse
import logging
import os
import random
import sys
from datetime import datetime, timezone

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.core.formatter import format_event_row
from src.core.mock_data import demo_events
from src.core.prediction import generate_predictions, select_mainshocks, summarize_predictions
from src.core.spatial import estimate_rupture_length
from src.core.swarms import identify_swarms

logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Prediction engine demonstration")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    args = parser.parse_args(argv)

    now = datetime.now(timezone.utc)
    events = demo_events(now)
    predictions = generate_predictions(events, now, rng=random.Random(args.seed))

    logger.info("=" * 60)
    logger.info("Demo catalog:")
    for event in events:
        logger.info("  %s", format_event_row(event))

    logger.info("")
    logger.info("Aftershock sources:")
    for mainshock in select_mainshocks(events):
        length = estimate_rupture_length(mainshock.magnitude)
        logger.info(
            "  M%.1f %s: largest aftershock ~M%.1f, zone ~%.0f km",
            mainshock.magnitude,
            mainshock.location,
            mainshock.magnitude - 1.2,
            2 * length,
        )

    logger.info("")
    for cluster in identify_swarms(events):
        logger.info(
            "Swarm: %d events near (%.2f, %.2f), average M%.1f",
            cluster.size,
            cluster.latitude,
            cluster.longitude,
            cluster.avg_magnitude,
        )

    summary = summarize_predictions(predictions)
    logger.info("")
    logger.info("=" * 60)
    logger.info(
        "Predictions: %d aftershock, %d gap, %d swarm",
        summary["aftershock"],
        summary["gap"],
        summary["swarm"],
    )
    for prediction in predictions:
        logger.info("  %s", format_event_row(prediction))

    return 0


if __name__ == "__main__":
    sys.exit(main())
