"""
benchmarking/calculator.py

Percentile banding and letter grades.

Higher is better:                    Lower is better:
    value >= top decile    -> 90         value <= top decile    -> 90
    value >= top quartile  -> 75         value <= top quartile  -> 75
    value >= median        -> 50         value <= median        -> 50
    value >= 0.7 × median  -> 25         value <= 1.5 × median  -> 25
    otherwise              -> 10         otherwise              -> 10

Bands are discrete; values between two thresholds share a percentile.
Comparisons run on Decimal(str(x)) so a threshold such as 0.7 × 15.2 is
exactly 10.64.
"""

from typing import Sequence, Tuple

from deal_analytics.benchmarking.benchmark_config import BOTTOM_GRADE, DEFAULT_GRADE_SCALE
from deal_analytics.benchmarking.reference_data import MetricReference
from deal_analytics.models.enumerations import Grade
from deal_analytics.scoring.utils import exact_decimal


def calculate_percentile(
    value: float,
    reference: MetricReference,
    lower_is_better: bool = False,
    floor_ratio: float = 0.7,
    ceiling_ratio: float = 1.5,
) -> int:
    """
    Band a metric value against its reference points.

    Examples:
        >>> calculate_percentile(15.2, MetricReference(15.2, 19.8, 24.5))
        50
        >>> calculate_percentile(70, MetricReference(95, 75, 60), lower_is_better=True)
        75
    """
    v = exact_decimal(value)
    median = exact_decimal(reference.median)
    top_quartile = exact_decimal(reference.top_quartile)
    top_decile = exact_decimal(reference.top_decile)

    if lower_is_better:
        if v <= top_decile:
            return 90
        if v <= top_quartile:
            return 75
        if v <= median:
            return 50
        if v <= median * exact_decimal(ceiling_ratio):
            return 25
        return 10

    if v >= top_decile:
        return 90
    if v >= top_quartile:
        return 75
    if v >= median:
        return 50
    if v >= median * exact_decimal(floor_ratio):
        return 25
    return 10


def calculate_grade(
    percentile: float,
    scale: Sequence[Tuple[float, Grade]] = DEFAULT_GRADE_SCALE,
) -> Grade:
    """Step function: first grade whose threshold the percentile reaches."""
    for threshold, grade in scale:
        if percentile >= threshold:
            return grade
    return BOTTOM_GRADE
