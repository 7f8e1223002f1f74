"""
Decimal Utilities
deal_analytics/scoring/utils.py

Precision-safe decimal math for scoring calculations. Floats are converted
through str() so 0.35 stays 0.35, and rounding is half-up (65.5 -> 66),
never banker's rounding.
"""

from decimal import Decimal, ROUND_FLOOR, ROUND_HALF_UP
from typing import Iterable, List


def exact_decimal(value: float) -> Decimal:
    """Convert float to Decimal via its shortest repr, without quantizing."""
    return Decimal(str(value))


def clamp(
    value: Decimal,
    min_val: Decimal = Decimal("0"),
    max_val: Decimal = Decimal("100"),
) -> Decimal:
    """Clamp value to range [min_val, max_val]."""
    return max(min_val, min(max_val, value))


def round_half_up(value: Decimal) -> int:
    """Round to the nearest integer, ties away from zero for positive values."""
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def floor_int(value: Decimal) -> int:
    return int(value.quantize(Decimal("1"), rounding=ROUND_FLOOR))


def weighted_mean(values: List[Decimal], weights: List[Decimal]) -> Decimal:
    """
    Calculate weighted mean.

    Formula: Σ(value_i × weight_i) / Σ(weight_i)
    Raises ValueError if the weights do not sum to a positive value.
    """
    if len(values) != len(weights):
        raise ValueError("values and weights must have same length")

    total_weight = sum(weights)
    if total_weight <= 0:
        raise ValueError("weights must sum to a positive value")

    numerator = sum(v * w for v, w in zip(values, weights))
    return numerator / total_weight


def mean(values: Iterable[float]) -> float:
    """Arithmetic mean of floats; raises ValueError on an empty input."""
    items = list(values)
    if not items:
        raise ValueError("mean() of an empty sequence")
    return float(sum(exact_decimal(v) for v in items) / Decimal(len(items)))
