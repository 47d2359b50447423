"""USGS API Client - Imperative Shell.

This module handles HTTP communication with the USGS Earthquake API.
All I/O is contained here; parsing and filtering logic is in the core module.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

import requests

from src.core.catalog import (
    DEFAULT_FETCH_LIMIT,
    EventFilter,
    compute_start_time,
    parse_events,
)
from src.core.event import Event


logger = logging.getLogger(__name__)


# USGS FDSN Event Web Service base URL
USGS_API_BASE = "https://earthquake.usgs.gov/fdsnws/event/1/query"

# Default timeout for API requests (seconds)
DEFAULT_TIMEOUT = 30

FETCH_FAILED_MESSAGE = "Failed to fetch earthquake data"


class DataUnavailableError(Exception):
    """The catalog could not be fetched or its payload could not be read."""


@dataclass
class USGSQueryParams:
    """Parameters for USGS API query.

    Attributes:
        min_magnitude: Minimum magnitude to fetch
        start_time: Fetch earthquakes after this time
        end_time: Fetch earthquakes before this time
        limit: Maximum number of results
    """
    min_magnitude: float | None = None
    start_time: datetime | None = None
    end_time: datetime | None = None
    limit: int = DEFAULT_FETCH_LIMIT


class USGSClient:
    """Client for fetching earthquake data from USGS API.

    This is part of the imperative shell - it handles HTTP I/O.
    """

    def __init__(
        self,
        base_url: str = USGS_API_BASE,
        timeout: int = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialize USGS client.

        Args:
            base_url: USGS API base URL
            timeout: Request timeout in seconds
        """
        self.base_url = base_url
        self.timeout = timeout

    def _build_params(self, query: USGSQueryParams) -> dict[str, str]:
        """Build query parameters for USGS API request.

        Args:
            query: Query parameters

        Returns:
            Dict of URL query parameters
        """
        params: dict[str, str] = {
            "format": "geojson",
            "orderby": "time",
        }

        if query.min_magnitude is not None:
            params["minmagnitude"] = str(query.min_magnitude)

        if query.start_time is not None:
            params["starttime"] = query.start_time.strftime("%Y-%m-%dT%H:%M:%S")

        if query.end_time is not None:
            params["endtime"] = query.end_time.strftime("%Y-%m-%dT%H:%M:%S")

        if query.limit is not None:
            params["limit"] = str(query.limit)

        return params

    def fetch_earthquakes(self, query: USGSQueryParams) -> dict[str, Any]:
        """Fetch earthquake data from USGS API.

        This method performs HTTP I/O.

        Args:
            query: Query parameters

        Returns:
            Raw GeoJSON response from USGS

        Raises:
            requests.RequestException: If the request fails
            ValueError: If the response body is not JSON
        """
        params = self._build_params(query)

        logger.info(
            "Fetching earthquakes from USGS",
            extra={"params": params},
        )

        response = requests.get(
            self.base_url,
            params=params,
            timeout=self.timeout,
        )
        response.raise_for_status()

        data = response.json()
        count = data.get("metadata", {}).get("count", 0) if isinstance(data, dict) else 0

        logger.info(
            "Fetched %d earthquakes from USGS",
            count,
        )

        return data

    def fetch_events(
        self,
        event_filter: EventFilter,
        now: datetime | None = None,
        limit: int = DEFAULT_FETCH_LIMIT,
    ) -> list[Event]:
        """Fetch and parse observed events for a user-facing filter.

        Every transport, status or payload failure is reported as a single
        DataUnavailableError.

        Args:
            event_filter: Magnitude floor and time range
            now: End of the window (defaults to current UTC time)
            limit: Maximum results

        Returns:
            Parsed events, newest first

        Raises:
            DataUnavailableError: If the catalog cannot be fetched or read
        """
        if now is None:
            now = datetime.now(timezone.utc)

        query = USGSQueryParams(
            min_magnitude=event_filter.min_magnitude,
            start_time=compute_start_time(now, event_filter.time_range),
            limit=limit,
        )

        try:
            geojson = self.fetch_earthquakes(query)
            return parse_events(geojson)
        except (requests.RequestException, ValueError) as e:
            logger.error("Error fetching earthquakes: %s", e)
            raise DataUnavailableError(FETCH_FAILED_MESSAGE) from e
