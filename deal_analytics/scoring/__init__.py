"""
scoring/ - Deal Scoring Engine

Modules:
    utils.py                  - Decimal utilities
    tables.py                 - Sector / stage / geography reference tables
    scoring_config.py         - Immutable scorer configuration
    factor_evaluators.py      - Per-factor rules (16 factors, 4 categories)
    category_aggregator.py    - Weighted-mean category aggregation
    recommendations.py        - Verdict and advisory text
    deal_scorer.py            - Deal score orchestration and opportunity ranking
"""

from deal_analytics.scoring.category_aggregator import CategoryAggregator
from deal_analytics.scoring.deal_scorer import DealScorer
from deal_analytics.scoring.scoring_config import ScoringConfig
from deal_analytics.scoring.tables import DEFAULT_TABLES, DealScoringTables

__all__ = [
    "CategoryAggregator",
    "DEFAULT_TABLES",
    "DealScorer",
    "DealScoringTables",
    "ScoringConfig",
]
