"""Orchestrator - Wires Functional Core and Imperative Shell.

This module coordinates the flow of data between the pure functional
core and the I/O-performing shell components. It's the "glue" that
makes the application work.
"""

import logging
import random
from dataclasses import dataclass, field
from datetime import datetime, timezone

from src.core.catalog import EventFilter
from src.core.config import Config
from src.core.event import Event
from src.core.formatter import filter_by_search, merge_with_predictions
from src.core.prediction import generate_predictions, summarize_predictions
from src.shell.usgs_client import DataUnavailableError, USGSClient


logger = logging.getLogger(__name__)

LOAD_FAILED_MESSAGE = "Failed to load earthquake data. Please try again later."


@dataclass
class ProcessingResult:
    """Result of one fetch / predict / display cycle.

    Attributes:
        observed: Events fetched from the catalog
        predictions: Predicted events, earliest first
        displayed: Merged and search-filtered events for presentation
        generated_at: Reference time used for predictions
        errors: Any errors that occurred
    """
    observed: list[Event]
    predictions: list[Event]
    displayed: list[Event]
    generated_at: datetime
    errors: list[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """Returns True if no errors occurred."""
        return len(self.errors) == 0

    @property
    def summary(self) -> str:
        """Human-readable summary of the processing result."""
        counts = summarize_predictions(self.predictions)
        return (
            f"Fetched {len(self.observed)} events, "
            f"{counts['total']} predictions "
            f"({counts['aftershock']} aftershock, {counts['gap']} gap, "
            f"{counts['swarm']} swarm), "
            f"{len(self.displayed)} displayed"
        )


class Orchestrator:
    """Coordinates catalog fetching, prediction and display filtering.

    This class wires together:
    - USGS client (fetches observed events)
    - Core functions (prediction, merging, search filtering)
    """

    def __init__(
        self,
        config: Config,
        usgs_client: USGSClient | None = None,
        rng: random.Random | None = None,
    ) -> None:
        """Initialize orchestrator with configuration.

        Args:
            config: Application configuration
            usgs_client: USGS client (created if not provided)
            rng: Random source (seeded from config if not provided)
        """
        self.config = config
        self.usgs_client = usgs_client or USGSClient()
        self.rng = rng or random.Random(config.random_seed)

    def _fetch_events(
        self,
        event_filter: EventFilter,
        now: datetime,
        errors: list[str],
    ) -> list[Event]:
        """Fetch observed events, recording a failure instead of raising."""
        try:
            return self.usgs_client.fetch_events(
                event_filter,
                now=now,
                limit=self.config.fetch_limit,
            )
        except DataUnavailableError as e:
            logger.error("Catalog unavailable: %s", e)
            errors.append(LOAD_FAILED_MESSAGE)
            return []

    def predict(self, events: list[Event], now: datetime) -> list[Event]:
        """Run the prediction core with this orchestrator's settings."""
        return generate_predictions(
            events,
            now,
            rng=self.rng,
            settings=self.config.prediction,
            zones=self.config.high_risk_zones,
        )

    def process(
        self,
        event_filter: EventFilter | None = None,
        search_query: str | None = None,
        include_predictions: bool | None = None,
        now: datetime | None = None,
    ) -> ProcessingResult:
        """Run a complete cycle.

        A catalog failure is recorded in the result and predictions are
        still computed from an empty observed list.

        Args:
            event_filter: Catalog filter (defaults from config)
            search_query: Case-insensitive location substring
            include_predictions: Merge predictions (defaults from config)
            now: Reference time (defaults to current UTC time)

        Returns:
            ProcessingResult with observed, predicted and displayed events
        """
        if now is None:
            now = datetime.now(timezone.utc)
        if event_filter is None:
            event_filter = EventFilter(
                min_magnitude=self.config.min_magnitude,
                time_range=self.config.time_range,
            )
        if include_predictions is None:
            include_predictions = self.config.include_predictions

        errors: list[str] = []
        observed = self._fetch_events(event_filter, now, errors)

        predictions: list[Event] = []
        if include_predictions:
            predictions = self.predict(observed, now)

        displayed = filter_by_search(
            merge_with_predictions(observed, predictions),
            search_query,
        )

        result = ProcessingResult(
            observed=observed,
            predictions=predictions,
            displayed=displayed,
            generated_at=now,
            errors=errors,
        )

        logger.info("Completed: %s", result.summary)

        return result
