"""Unit tests for catalog translation and the Event model.

These tests demonstrate the benefit of the Functional Core pattern:
- No mocks needed
- Fast, deterministic execution
- Simple assertions on pure functions
"""

from datetime import datetime, timedelta, timezone

import pytest

from src.core.catalog import (
    EventFilter,
    compute_start_time,
    normalize_alert_level,
    parse_event,
    parse_events,
)
from src.core.event import Event, event_from_dict, filter_by_magnitude, parse_timestamp


# Sample USGS GeoJSON feature for testing
SAMPLE_FEATURE = {
    "type": "Feature",
    "id": "nc75095866",
    "properties": {
        "mag": 4.2,
        "place": "10km NE of San Francisco, CA",
        "time": 1702987200000,  # 2023-12-19 12:00:00 UTC
        "url": "https://earthquake.usgs.gov/earthquakes/eventpage/nc75095866",
        "alert": "green",
    },
    "geometry": {
        "type": "Point",
        "coordinates": [-122.4194, 37.7749, 10.5],  # lon, lat, depth
    },
}


def _feature(**props):
    return {**SAMPLE_FEATURE, "properties": {**SAMPLE_FEATURE["properties"], **props}}


class TestParseEvent:
    """Tests for parse_event() pure function."""

    def test_parses_valid_feature(self):
        result = parse_event(SAMPLE_FEATURE)

        assert result is not None
        assert result.id == "nc75095866"
        assert result.magnitude == 4.2
        assert result.location == "10km NE of San Francisco, CA"
        assert result.coordinates == (37.7749, -122.4194)
        assert result.depth_km == 10.5
        assert result.alert_level == "Green"
        assert result.is_predicted is False
        assert result.time == datetime(2023, 12, 19, 12, 0, 0, tzinfo=timezone.utc)

    def test_fallback_alert_when_missing(self):
        assert parse_event(_feature(alert=None, mag=5.5)).alert_level == "Yellow"
        assert parse_event(_feature(alert=None, mag=7.1)).alert_level == "Red"
        assert parse_event(_feature(alert=None, mag=3.0)).alert_level == "Green"

    def test_missing_place(self):
        assert parse_event(_feature(place=None)).location == "Unknown Location"

    @pytest.mark.parametrize(
        "feature",
        [
            {"id": "x", "properties": {"place": "Test"}, "geometry": {"coordinates": [0, 0, 0]}},
            {"id": "x", "properties": {"mag": 3.0, "time": 1}, "geometry": {"coordinates": []}},
            {"id": "x", "properties": {"mag": 3.0}, "geometry": {"coordinates": [0, 0, 0]}},
            {"properties": None, "geometry": None},
            {"id": "x", "properties": {"mag": "abc", "time": 1}, "geometry": {"coordinates": [0, 0, 0]}},
        ],
    )
    def test_invalid_features(self, feature):
        assert parse_event(feature) is None


class TestNormalizeAlertLevel:
    """Tests for normalize_alert_level()."""

    def test_capitalizes_catalog_values(self):
        assert normalize_alert_level("yellow", 3.0) == "Yellow"
        assert normalize_alert_level("RED", 3.0) == "Red"

    def test_orange_reported_as_red(self):
        assert normalize_alert_level("orange", 6.0) == "Red"

    def test_unknown_value_falls_back(self):
        assert normalize_alert_level("purple", 5.2) == "Yellow"


class TestParseEvents:
    """Tests for parse_events() pure function."""

    def test_sorts_newest_first_and_skips_invalid(self):
        older = {**_feature(time=1702900800000), "id": "older"}
        geojson = {"features": [older, {"properties": {}}, "junk", SAMPLE_FEATURE]}

        result = parse_events(geojson)

        assert [e.id for e in result] == ["nc75095866", "older"]

    def test_handles_missing_features(self):
        assert parse_events({}) == []

    @pytest.mark.parametrize("payload", [[], "text", {"features": "nope"}])
    def test_malformed_payload(self, payload):
        with pytest.raises(ValueError):
            parse_events(payload)


class TestEventFilter:
    """Tests for EventFilter and compute_start_time()."""

    @pytest.mark.parametrize(
        "time_range,delta",
        [
            ("hour", timedelta(hours=1)),
            ("day", timedelta(days=1)),
            ("week", timedelta(days=7)),
        ],
    )
    def test_window_start(self, now, time_range, delta):
        assert compute_start_time(now, time_range) == now - delta

    def test_unknown_range(self, now):
        with pytest.raises(ValueError):
            compute_start_time(now, "month")
        with pytest.raises(ValueError):
            EventFilter(time_range="month")

    def test_defaults(self):
        event_filter = EventFilter()
        assert event_filter.min_magnitude == 0.0
        assert event_filter.time_range == "day"


class TestEventModel:
    """Tests for the Event dataclass and its serialization."""

    def test_is_immutable(self, make_event):
        event = make_event()
        with pytest.raises(Exception):  # FrozenInstanceError
            event.magnitude = 5.0  # type: ignore

    def test_to_dict(self, make_event, now):
        event = make_event(id="pred-gap-x-1", magnitude=6.1, latitude=1.5,
                           longitude=-2.5, depth_km=12.0, is_predicted=True,
                           alert_level="Yellow")

        assert event.to_dict() == {
            "id": "pred-gap-x-1",
            "location": "Test Location",
            "coordinates": [1.5, -2.5],
            "magnitude": 6.1,
            "depth": 12.0,
            "time": now.isoformat(),
            "alertLevel": "Yellow",
            "isPredicted": True,
        }

    def test_from_dict_accepts_wire_shape(self, make_event):
        event = make_event(id="us1", magnitude=5.2, latitude=3.0, longitude=4.0)
        assert event_from_dict(event.to_dict()) == event

    def test_from_dict_rejects_unknown_alert(self, make_event):
        data = {**make_event().to_dict(), "alertLevel": "Purple"}
        with pytest.raises(ValueError):
            event_from_dict(data)

    def test_source(self, make_event):
        assert make_event().source == "observed"
        assert make_event(id="pred-aftershock-a-0", is_predicted=True).source == "aftershock"
        assert make_event(id="pred-gap-a-0", is_predicted=True).source == "gap"
        assert make_event(id="pred-swarm-a-0", is_predicted=True).source == "swarm"

    def test_parse_timestamp(self):
        expected = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
        assert parse_timestamp("2024-01-02T03:04:05Z") == expected
        assert parse_timestamp("2024-01-02T03:04:05") == expected
        assert parse_timestamp("2024-01-02T05:04:05+02:00") == expected

    def test_filter_by_magnitude(self, make_event):
        events = [make_event(id=f"m{m}", magnitude=m) for m in (2.0, 4.0, 6.0)]

        assert [e.id for e in filter_by_magnitude(events, min_magnitude=4.0)] == ["m4.0", "m6.0"]
        assert [e.id for e in filter_by_magnitude(events, max_magnitude=4.0)] == ["m2.0", "m4.0"]
        assert isinstance(filter_by_magnitude(events)[0], Event)
