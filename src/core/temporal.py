"""Temporal model - Pure functions.

Aftershock occurrence times follow Omori's Law: the rate decays as
(t + c)^-p after the mainshock. Offsets are drawn by inverting the CDF of
that density truncated to a fixed forecast window, so most samples land
close to "now" and none fall outside the window.
"""

import math
import random
from datetime import datetime, timedelta


DEFAULT_WINDOW = timedelta(days=7)
DEFAULT_OMORI_P = 1.1
# Omori c-value in days
DEFAULT_OMORI_C_DAYS = 0.05


def sample_omori_offset(
    u: float,
    window_days: float,
    p: float = DEFAULT_OMORI_P,
    c_days: float = DEFAULT_OMORI_C_DAYS,
) -> float:
    """Map a uniform draw to an Omori-distributed offset in days.

    Pure function. The result is clamped to [0, window_days]; draws at the
    edges of (0, 1) or a degenerate p never produce a non-finite value.

    Args:
        u: Uniform draw in [0, 1)
        window_days: Length of the forecast window
        p: Omori decay exponent
        c_days: Omori time offset

    Returns:
        Offset from now in days
    """
    if window_days <= 0:
        return 0.0

    try:
        if math.isclose(p, 1.0):
            # p == 1 degenerates to a logarithmic CDF
            offset = c_days * ((window_days + c_days) / c_days) ** u - c_days
        else:
            q = 1.0 - p
            head = c_days ** q
            tail = (window_days + c_days) ** q
            offset = (head - u * (head - tail)) ** (1.0 / q) - c_days
    except (OverflowError, ZeroDivisionError, ValueError):
        offset = window_days

    if isinstance(offset, complex) or not math.isfinite(offset):
        offset = window_days

    return min(max(offset, 0.0), window_days)


def generate_aftershock_time(
    now: datetime,
    rng: random.Random,
    window: timedelta = DEFAULT_WINDOW,
    p: float = DEFAULT_OMORI_P,
    c_days: float = DEFAULT_OMORI_C_DAYS,
) -> datetime:
    """Draw a future aftershock time within [now, now + window].

    Args:
        now: Reference time
        rng: Random source
        window: Forecast window length
        p: Omori decay exponent
        c_days: Omori time offset in days

    Returns:
        Predicted occurrence time
    """
    window_days = window.total_seconds() / 86400
    offset_days = sample_omori_offset(rng.random(), window_days, p, c_days)
    return now + min(timedelta(days=offset_days), window)


def hours_between(earlier: datetime, later: datetime) -> float:
    """Elapsed hours from earlier to later (negative if reversed)."""
    return (later - earlier).total_seconds() / 3600


def days_between(earlier: datetime, later: datetime) -> float:
    """Elapsed days from earlier to later (negative if reversed)."""
    return (later - earlier).total_seconds() / 86400


def timestamp_ms(moment: datetime) -> int:
    """Milliseconds since the Unix epoch."""
    return int(moment.timestamp() * 1000)
