"""Float helpers for averages that may divide by zero."""

import math


def divide(numerator: float, denominator: float) -> float:
    """IEEE 754 division: x/0 is +-inf and 0/0 is nan instead of raising."""
    if denominator == 0.0:
        if numerator == 0.0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def finite_or_none(value: float) -> float | None:
    """JSON has no inf/nan; write them as null."""
    return value if math.isfinite(value) else None
