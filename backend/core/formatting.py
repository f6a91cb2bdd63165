# core/formatting.py
"""Display strings for a route's duration and distance."""
from __future__ import annotations

import math
from decimal import Decimal, ROUND_HALF_UP

METERS_TO_MILES = 0.000621371
_ONE_DECIMAL = Decimal("0.1")


def format_duration(seconds: float) -> str:
    """
    Up to an hour: whole minutes, rounded up ("30 min").
    Longer: hours plus the remaining minutes ("1 hr 30 min").
    Minutes are rounded up on the whole duration before splitting, so the
    minute part is always in 0..59.
    """
    seconds = max(float(seconds), 0.0)
    if seconds <= 3600:
        return f"{math.ceil(seconds / 60)} min"
    minutes = math.ceil(seconds / 60)
    return f"{minutes // 60} hr {minutes % 60} min"


def format_distance(meters: float) -> str:
    """Miles, at most one fractional digit, thousands grouped ("1,234.5 mi")."""
    miles = Decimal(repr(max(float(meters), 0.0) * METERS_TO_MILES))
    rounded = miles.quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP)
    if rounded == rounded.to_integral_value():
        return f"{int(rounded):,} mi"
    return f"{rounded:,.1f} mi"
