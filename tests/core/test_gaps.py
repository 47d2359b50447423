"""Unit tests for the seismic gap detector."""

import random
from datetime import timedelta

import pytest

from src.core.config import PredictionSettings
from src.core.gaps import build_gap_prediction, has_recent_activity, predict_seismic_gaps
from src.core.zones import DEFAULT_HIGH_RISK_ZONES, HighRiskZone


ALWAYS_FLAG = PredictionSettings(gap_flag_probability=1.0)
NEVER_FLAG = PredictionSettings(gap_flag_probability=0.0)

SAN_ANDREAS = HighRiskZone("San Andreas Fault, CA", 36.0, -120.0, 3.0)
ALPINE = HighRiskZone("New Zealand Alpine Fault", -43.0, 170.0, 3.0)


class TestHighRiskZone:
    """Tests for HighRiskZone."""

    def test_slug(self):
        assert SAN_ANDREAS.slug == "san-andreas-fault,-ca"
        assert HighRiskZone("Peru-Chile  Trench", 0, 0, 1).slug == "peru-chile-trench"

    def test_contains_is_strict(self):
        assert SAN_ANDREAS.contains(37.0, -121.0) is True
        assert SAN_ANDREAS.contains(39.0, -120.0) is False

    def test_default_table(self):
        assert len(DEFAULT_HIGH_RISK_ZONES) == 7
        assert DEFAULT_HIGH_RISK_ZONES[0] == HighRiskZone("Japan Trench", 38.0, 142.0, 5.0)


class TestHasRecentActivity:
    """Tests for has_recent_activity()."""

    def test_recent_significant_event_inside(self, make_event, now):
        event = make_event(magnitude=5.5, latitude=36.5, longitude=-120.5,
                           time=now - timedelta(days=5))
        assert has_recent_activity(SAN_ANDREAS, [event], now) is True

    @pytest.mark.parametrize(
        "overrides",
        [
            {"magnitude": 4.9},
            {"time_days": 30},
            {"latitude": 40.0},
            {"is_predicted": True},
        ],
    )
    def test_events_that_do_not_count(self, make_event, now, overrides):
        days = overrides.pop("time_days", 5)
        values = {"magnitude": 6.0, "latitude": 36.0, "longitude": -120.0, **overrides}
        event = make_event(time=now - timedelta(days=days), **values)

        assert has_recent_activity(SAN_ANDREAS, [event], now) is False


class TestPredictSeismicGaps:
    """Tests for predict_seismic_gaps()."""

    def test_flags_every_quiet_zone(self, now):
        result = predict_seismic_gaps([], now, random.Random(1), (SAN_ANDREAS, ALPINE), ALWAYS_FLAG)

        assert [e.location for e in result] == [
            "Seismic Gap Monitoring: San Andreas Fault, CA",
            "Seismic Gap Monitoring: New Zealand Alpine Fault",
        ]

    def test_zero_probability_flags_nothing(self, now):
        assert predict_seismic_gaps([], now, random.Random(1), (SAN_ANDREAS,), NEVER_FLAG) == []

    def test_active_zone_skipped(self, make_event, now):
        quake = make_event(magnitude=6.1, latitude=35.5, longitude=-119.0,
                           time=now - timedelta(days=2))
        result = predict_seismic_gaps(
            [quake], now, random.Random(1), (SAN_ANDREAS, ALPINE), ALWAYS_FLAG,
        )

        assert len(result) == 1
        assert result[0].location.endswith("New Zealand Alpine Fault")

    def test_prediction_fields(self, now):
        for seed in range(30):
            (gap,) = predict_seismic_gaps(
                [], now, random.Random(seed), (SAN_ANDREAS,), ALWAYS_FLAG,
            )

            assert gap.is_predicted is True
            assert gap.id == f"pred-gap-san-andreas-fault,-ca-{int(now.timestamp() * 1000)}"
            assert 5.5 <= gap.magnitude <= 7.0
            assert 10.0 <= gap.depth_km <= 40.0
            assert now <= gap.time <= now + timedelta(days=30)
            assert abs(gap.latitude - 36.0) <= 1.5
            assert abs(gap.longitude + 120.0) <= 1.5
            assert gap.alert_level in ("Yellow", "Red")

    def test_alert_follows_emitted_magnitude(self, now):
        """Red exactly when the reported magnitude is 6.5 or above."""
        rng = random.Random(11)
        mismatched = []

        for _ in range(3000):
            (gap,) = predict_seismic_gaps([], now, rng, (ALPINE,), ALWAYS_FLAG)
            if (gap.magnitude >= 6.5) != (gap.alert_level == "Red"):
                mismatched.append((gap.magnitude, gap.alert_level))

        assert mismatched == []

    def test_boundary_magnitude_is_red(self, fixed_random, now):
        # 5.5 + 0.666 * 1.5 = 6.499, reported as 6.5
        gap = build_gap_prediction(ALPINE, now, fixed_random([0.666, 0.5]), ALWAYS_FLAG)

        assert gap.magnitude == 6.5
        assert gap.alert_level == "Red"

    def test_default_table_at_most_one_per_zone(self, now):
        """Empty input yields 0-7 warnings, never two for one zone."""
        for seed in range(100):
            result = predict_seismic_gaps([], now, random.Random(seed))
            names = [e.location for e in result]

            assert len(result) <= 7
            assert len(names) == len(set(names))

    def test_flag_rate_near_configured_probability(self, now):
        rng = random.Random(2024)
        flagged = sum(len(predict_seismic_gaps([], now, rng)) for _ in range(1000))

        assert flagged / 7000 == pytest.approx(0.15, abs=0.02)
