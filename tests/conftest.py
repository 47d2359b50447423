"""Shared fixtures for core and shell tests."""

import random
from datetime import datetime, timezone

import pytest

from src.core.event import Event


NOW = datetime(2026, 3, 1, 12, 0, 0, tzinfo=timezone.utc)


class FixedRandom(random.Random):
    """Random source replaying a fixed sequence of random() values.

    Only random() is scripted; the values cycle when exhausted.
    """

    def __init__(self, values):
        super().__init__(0)
        self._values = list(values)
        self._index = 0

    def random(self):
        value = self._values[self._index % len(self._values)]
        self._index += 1
        return value


@pytest.fixture
def now():
    """Fixed reference time."""
    return NOW


@pytest.fixture
def fixed_random():
    """Factory for FixedRandom instances."""
    return FixedRandom


@pytest.fixture
def make_event():
    """Factory for observed events with sensible defaults."""
    def _make(
        id="us1000",
        magnitude=4.0,
        latitude=0.0,
        longitude=0.0,
        depth_km=10.0,
        time=NOW,
        location="Test Location",
        is_predicted=False,
        alert_level="Green",
    ):
        return Event(
            id=id,
            location=location,
            latitude=latitude,
            longitude=longitude,
            magnitude=magnitude,
            depth_km=depth_km,
            time=time,
            alert_level=alert_level,
            is_predicted=is_predicted,
        )

    return _make
