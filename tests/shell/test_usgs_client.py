"""Tests for the USGS client.

Uses the `responses` library to mock HTTP requests.
"""

from datetime import datetime, timezone
from urllib.parse import parse_qs, urlparse

import pytest
import requests
import responses

from src.core.catalog import EventFilter
from src.shell.usgs_client import (
    USGS_API_BASE,
    DataUnavailableError,
    USGSClient,
    USGSQueryParams,
)


NOW = datetime(2026, 3, 1, 12, 0, 0, tzinfo=timezone.utc)

SAMPLE_RESPONSE = {
    "type": "FeatureCollection",
    "metadata": {"count": 2},
    "features": [
        {
            "id": "us7000old",
            "properties": {
                "mag": 5.6,
                "place": "Central Chile",
                "time": 1772352000000,  # 2026-03-01 08:00:00 UTC
                "alert": None,
            },
            "geometry": {"coordinates": [-70.67, -33.45, 45.0]},
        },
        {
            "id": "us7000new",
            "properties": {
                "mag": 4.1,
                "place": "Near Tokyo, Japan",
                "time": 1772362800000,  # 2026-03-01 11:00:00 UTC
                "alert": "green",
            },
            "geometry": {"coordinates": [139.65, 35.68, 30.0]},
        },
    ],
}


def _query(request) -> dict[str, list[str]]:
    return parse_qs(urlparse(request.url).query)


class TestBuildParams:
    """Tests for USGSClient._build_params()."""

    def test_includes_all_set_fields(self):
        params = USGSClient()._build_params(USGSQueryParams(
            min_magnitude=2.5,
            start_time=datetime(2026, 2, 28, 12, 0, tzinfo=timezone.utc),
            limit=50,
        ))

        assert params == {
            "format": "geojson",
            "orderby": "time",
            "minmagnitude": "2.5",
            "starttime": "2026-02-28T12:00:00",
            "limit": "50",
        }

    def test_omits_unset_fields(self):
        params = USGSClient()._build_params(USGSQueryParams())

        assert "minmagnitude" not in params
        assert "starttime" not in params
        assert "endtime" not in params


class TestFetchEvents:
    """Tests for USGSClient.fetch_events()."""

    @responses.activate
    def test_parses_and_sorts(self):
        responses.add(responses.GET, USGS_API_BASE, json=SAMPLE_RESPONSE, status=200)

        events = USGSClient().fetch_events(EventFilter(), now=NOW)

        assert [e.id for e in events] == ["us7000new", "us7000old"]
        assert events[0].coordinates == (35.68, 139.65)
        assert events[1].alert_level == "Yellow"

    @responses.activate
    def test_sends_window_and_floor(self):
        responses.add(responses.GET, USGS_API_BASE, json={"features": []}, status=200)

        USGSClient().fetch_events(
            EventFilter(min_magnitude=4.5, time_range="week"), now=NOW, limit=25,
        )

        query = _query(responses.calls[0].request)
        assert query["minmagnitude"] == ["4.5"]
        assert query["starttime"] == ["2026-02-22T12:00:00"]
        assert query["limit"] == ["25"]
        assert query["format"] == ["geojson"]

    @responses.activate
    def test_server_error(self):
        responses.add(responses.GET, USGS_API_BASE, json={"error": "boom"}, status=500)

        with pytest.raises(DataUnavailableError, match="Failed to fetch earthquake data"):
            USGSClient().fetch_events(EventFilter(), now=NOW)

    @responses.activate
    def test_invalid_json(self):
        responses.add(responses.GET, USGS_API_BASE, body="<html>", status=200)

        with pytest.raises(DataUnavailableError):
            USGSClient().fetch_events(EventFilter(), now=NOW)

    @responses.activate
    def test_malformed_payload(self):
        responses.add(responses.GET, USGS_API_BASE, json=["not", "geojson"], status=200)

        with pytest.raises(DataUnavailableError):
            USGSClient().fetch_events(EventFilter(), now=NOW)

    @responses.activate
    def test_connection_error(self):
        responses.add(
            responses.GET,
            USGS_API_BASE,
            body=requests.ConnectionError("unreachable"),
        )

        with pytest.raises(DataUnavailableError) as exc_info:
            USGSClient().fetch_events(EventFilter(), now=NOW)

        assert isinstance(exc_info.value.__cause__, requests.ConnectionError)

    @responses.activate
    def test_custom_base_url(self):
        responses.add(responses.GET, "https://mirror.example.com/query", json={"features": []})

        assert USGSClient(base_url="https://mirror.example.com/query").fetch_events(
            EventFilter(), now=NOW,
        ) == []
