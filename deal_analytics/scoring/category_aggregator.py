"""
scoring/category_aggregator.py

Collapses a category's factors into a DealScoreCategory.

Formula:
    score = round(100 × Σ(value_i × weight_i) / Σ(weight_i))   clamped to [0, 100]

Rounding is half-up. A category whose factors carry no weight has no
weighted mean and raises DegenerateCategoryError.
"""

import logging
from decimal import Decimal
from typing import Sequence

from deal_analytics.core.exceptions import DegenerateCategoryError
from deal_analytics.models.deal_score import DealScoreCategory, ScoringFactor
from deal_analytics.models.enumerations import Category
from deal_analytics.scoring.utils import clamp, exact_decimal, round_half_up, weighted_mean

logger = logging.getLogger(__name__)


class CategoryAggregator:
    """Weighted-mean aggregation of scoring factors."""

    def aggregate(
        self,
        category: Category,
        factors: Sequence[ScoringFactor],
        weight: float,
        confidence: float,
    ) -> DealScoreCategory:
        """
        Args:
            category: Category being aggregated (used for errors and logging).
            factors: Factors in evaluation order; the order is preserved.
            weight: The category's contribution to the overall score.
            confidence: Fixed reliability value reported for the category.

        Raises:
            DegenerateCategoryError: if Σ factor weight is zero.
        """
        weights = [exact_decimal(f.weight) for f in factors]
        if sum(weights, Decimal("0")) == 0:
            raise DegenerateCategoryError(category.value, [f.name for f in factors])

        values = [exact_decimal(f.value) for f in factors]
        raw = weighted_mean(values, weights) * Decimal("100")
        score = round_half_up(clamp(raw))

        logger.debug(
            "category_aggregated",
            extra={
                "category": category.value,
                "factor_count": len(factors),
                "raw_score": float(raw),
                "score": score,
            },
        )

        return DealScoreCategory(
            score=score,
            weight=weight,
            factors=list(factors),
            confidence=confidence,
        )
