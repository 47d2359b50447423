"""Unit tests for the Omori temporal model."""

import math
import random
from datetime import datetime, timedelta, timezone

import pytest

from src.core.temporal import (
    days_between,
    generate_aftershock_time,
    hours_between,
    sample_omori_offset,
    timestamp_ms,
)


class TestSampleOmoriOffset:
    """Tests for sample_omori_offset()."""

    def test_endpoints(self):
        """u=0 maps to now and u=1 to the end of the window."""
        assert sample_omori_offset(0.0, 7.0) == pytest.approx(0.0, abs=1e-9)
        assert sample_omori_offset(1.0, 7.0) == pytest.approx(7.0)

    def test_monotonic(self):
        """Larger draws give later offsets."""
        offsets = [sample_omori_offset(u / 20, 7.0) for u in range(20)]
        assert offsets == sorted(offsets)

    @pytest.mark.parametrize("u", [0.0, 1e-300, 1e-12, 0.5, 0.999999999, 1.0])
    def test_finite_and_clamped(self, u):
        """Extreme draws stay finite and inside the window."""
        offset = sample_omori_offset(u, 7.0)
        assert math.isfinite(offset)
        assert 0.0 <= offset <= 7.0

    def test_p_equal_one(self):
        """p=1 uses the logarithmic form without dividing by zero."""
        assert 0.0 <= sample_omori_offset(0.5, 7.0, p=1.0) <= 7.0

    def test_large_p_is_clamped(self):
        """Steep decay exponents cannot overflow out of the window."""
        assert 0.0 <= sample_omori_offset(0.999, 7.0, p=50.0, c_days=1e-6) <= 7.0

    def test_empty_window(self):
        assert sample_omori_offset(0.5, 0.0) == 0.0


class TestGenerateAftershockTime:
    """Tests for generate_aftershock_time()."""

    def test_within_window(self, now):
        """Every sample lies in [now, now + 7 days]."""
        rng = random.Random(7)
        for _ in range(1000):
            t = generate_aftershock_time(now, rng)
            assert now <= t <= now + timedelta(days=7)

    def test_concentrated_near_present(self, now):
        """Omori decay puts most samples early in the window."""
        rng = random.Random(8)
        offsets = sorted(
            (generate_aftershock_time(now, rng) - now).total_seconds() / 86400
            for _ in range(501)
        )
        assert offsets[250] < 2.0


class TestTimeHelpers:
    """Tests for elapsed-time helpers."""

    def test_hours_and_days(self, now):
        earlier = now - timedelta(hours=36)
        assert hours_between(earlier, now) == pytest.approx(36.0)
        assert days_between(earlier, now) == pytest.approx(1.5)
        assert hours_between(now, earlier) == pytest.approx(-36.0)

    def test_timestamp_ms(self):
        moment = datetime(2023, 12, 19, 12, 0, 0, tzinfo=timezone.utc)
        assert timestamp_ms(moment) == 1702987200000
