"""
Deal scoring configuration
deal_analytics/scoring/scoring_config.py

Immutable bundle of every knob the deal scorer reads: category weights,
category confidences, risk multipliers and the static lookup tables.
Built once from Settings and passed explicitly to DealScorer.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from deal_analytics.config import Settings, get_settings
from deal_analytics.core.exceptions import ConfigurationError
from deal_analytics.models.enumerations import Category, RiskRating
from deal_analytics.scoring.tables import CATEGORY_CONFIDENCE, DEFAULT_TABLES, DealScoringTables

DEFAULT_CATEGORY_WEIGHTS: Mapping[Category, float] = MappingProxyType({
    Category.FINANCIAL: 0.35,
    Category.OPERATIONAL: 0.25,
    Category.STRATEGIC: 0.20,
    Category.RISK: 0.20,
})

DEFAULT_RISK_MULTIPLIERS: Mapping[RiskRating, float] = MappingProxyType({
    RiskRating.LOW: 1.05,
    RiskRating.MEDIUM: 1.00,
    RiskRating.HIGH: 0.90,
    RiskRating.CRITICAL: 0.75,
})


@dataclass(frozen=True)
class ScoringConfig:
    category_weights: Mapping[Category, float] = field(
        default_factory=lambda: DEFAULT_CATEGORY_WEIGHTS
    )
    category_confidence: Mapping[Category, float] = field(
        default_factory=lambda: CATEGORY_CONFIDENCE
    )
    risk_multipliers: Mapping[RiskRating, float] = field(
        default_factory=lambda: DEFAULT_RISK_MULTIPLIERS
    )
    tables: DealScoringTables = DEFAULT_TABLES

    def __post_init__(self):
        missing = [c.value for c in Category if c not in self.category_weights]
        if missing:
            raise ConfigurationError(f"Missing category weights: {missing}")
        if any(w <= 0 for w in self.category_weights.values()):
            raise ConfigurationError("Category weights must be positive")
        total = sum(self.category_weights[c] for c in Category)
        if abs(total - 1.0) > 0.001:
            raise ConfigurationError(f"Category weights must sum to 1.0, got {total}")
        if any(r not in self.risk_multipliers for r in RiskRating):
            raise ConfigurationError("Every risk rating needs a multiplier")
        if any(c not in self.category_confidence for c in Category):
            raise ConfigurationError("Every category needs a confidence value")

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "ScoringConfig":
        settings = settings or get_settings()
        return cls(
            category_weights=MappingProxyType({
                Category.FINANCIAL: settings.W_FINANCIAL,
                Category.OPERATIONAL: settings.W_OPERATIONAL,
                Category.STRATEGIC: settings.W_STRATEGIC,
                Category.RISK: settings.W_RISK,
            }),
            risk_multipliers=MappingProxyType({
                RiskRating.LOW: settings.RISK_MULT_LOW,
                RiskRating.MEDIUM: settings.RISK_MULT_MEDIUM,
                RiskRating.HIGH: settings.RISK_MULT_HIGH,
                RiskRating.CRITICAL: settings.RISK_MULT_CRITICAL,
            }),
        )

    def weight(self, category: Category) -> float:
        return self.category_weights[category]

    def confidence(self, category: Category) -> float:
        return self.category_confidence[category]

    def risk_multiplier(self, rating: RiskRating) -> float:
        return self.risk_multipliers[rating]
