"""
Numeric helpers shared by the scoring pipeline.

Rounding is half-up (2.5 -> 3) rather than Python's banker's rounding.
Probabilities are carried as fractions; to_percent/to_fraction are the only
conversion points.
"""

import math
from typing import Iterable


def clamp(value: float, low: float, high: float) -> float:
    """Clamp value into [low, high]. NaN collapses to low."""
    if value != value:
        return low
    return max(low, min(high, value))


def round_half_up(value: float, digits: int = 0) -> float:
    """Round half up: 2.5 -> 3, 0.125 -> 0.13 at two digits."""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def round_int(value: float) -> int:
    return int(math.floor(value + 0.5))


def clamp_score(value: float) -> int:
    """Round and clamp a score into the 0-100 range."""
    return int(clamp(round_int(value), 0, 100))


def partial_credit(value: float, required: float) -> int:
    """
    Linear ramp for a value below a required minimum.

    Returns 100 when the requirement is met, otherwise
    clamp(0, 100, round(100 * value / required)).
    """
    if required <= 0 or value >= required:
        return 100
    return clamp_score(100 * value / required)


def ceiling_credit(value: float, maximum: float) -> int:
    """Mirror ramp for a value above a maximum."""
    if value <= maximum:
        return 100
    if value <= 0:
        return 0
    return clamp_score(100 * maximum / value)


def average_score(scores: Iterable[float]) -> int:
    """Unweighted mean of 0-100 scores, rounded half-up. Empty -> 100."""
    values = list(scores)
    if not values:
        return 100
    return clamp_score(sum(values) / len(values))


def to_percent(fraction: float) -> int:
    """Convert a probability fraction to an integer percent."""
    return round_int(fraction * 100)


def to_fraction(percent: float) -> float:
    """Convert a percent to a probability fraction."""
    return percent / 100
