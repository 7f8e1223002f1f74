"""
Static Reference Tables
deal_analytics/scoring/tables.py

Sector, stage and geography profiles used by the factor evaluators, plus the
fixed per-category confidences. Every table carries an explicit UNKNOWN entry, so a
lookup is total over its enum.

Sector profile (valuation + strategic + risk view):

  Sector              | Multiple  IRR    | Fit   Risk  | Growth
  ────────────────────┼──────────────────┼─────────────┼───────
  Technology          |  8.5x    22.5%  | 0.90  0.60  |  yes
  Healthcare          | 12.0x    18.5%  | 0.85  0.80  |  yes
  Retail              |  4.2x    15.0%  | 0.50  0.40  |
  Manufacturing       |  6.8x    16.5%  | 0.60  0.70  |
  Financial Services  |  2.5x    14.0%  | 0.70  0.50  |
  Unknown             |   n/a    20.0%  | 0.50  0.60  |
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from deal_analytics.models.enumerations import Category, Geography, RiskRating, Sector, Stage


@dataclass(frozen=True)
class SectorProfile:
    avg_multiple: Optional[float]   # None: no valuation benchmark for the sector
    avg_irr: Optional[float]        # None: no IRR benchmark for the sector
    strategic_fit: float
    risk_score: float
    high_growth: bool = False       # earns the diversification bonus


@dataclass(frozen=True)
class StageProfile:
    progress_expectation: Optional[float]   # fraction of work expected done
    alignment: float


@dataclass(frozen=True)
class GeographyProfile:
    strategic_fit: float
    risk_score: float
    diversifying: bool = False      # earns the diversification bonus


def _frozen(mapping):
    return MappingProxyType(dict(mapping))


SECTOR_PROFILES: Mapping[Sector, SectorProfile] = _frozen({
    Sector.TECHNOLOGY: SectorProfile(8.5, 22.5, strategic_fit=0.9, risk_score=0.6, high_growth=True),
    Sector.HEALTHCARE: SectorProfile(12.0, 18.5, strategic_fit=0.85, risk_score=0.8, high_growth=True),
    Sector.RETAIL: SectorProfile(4.2, 15.0, strategic_fit=0.5, risk_score=0.4),
    Sector.MANUFACTURING: SectorProfile(6.8, 16.5, strategic_fit=0.6, risk_score=0.7),
    Sector.FINANCIAL_SERVICES: SectorProfile(2.5, 14.0, strategic_fit=0.7, risk_score=0.5),
    Sector.UNKNOWN: SectorProfile(None, None, strategic_fit=0.5, risk_score=0.6),
})

STAGE_PROFILES: Mapping[Stage, StageProfile] = _frozen({
    Stage.GROWTH: StageProfile(0.65, alignment=0.9),
    Stage.BUYOUT: StageProfile(0.75, alignment=0.85),
    Stage.MATURE: StageProfile(0.45, alignment=0.6),
    Stage.VENTURE: StageProfile(None, alignment=0.4),
    Stage.DISTRESSED: StageProfile(None, alignment=0.3),
    Stage.UNKNOWN: StageProfile(None, alignment=0.5),
})

GEOGRAPHY_PROFILES: Mapping[Geography, GeographyProfile] = _frozen({
    Geography.NORTH_AMERICA: GeographyProfile(strategic_fit=0.9, risk_score=0.9),
    Geography.EUROPE: GeographyProfile(strategic_fit=0.75, risk_score=0.8, diversifying=True),
    Geography.ASIA_PACIFIC: GeographyProfile(strategic_fit=0.6, risk_score=0.6, diversifying=True),
    Geography.LATIN_AMERICA: GeographyProfile(strategic_fit=0.4, risk_score=0.4),
    Geography.AFRICA: GeographyProfile(strategic_fit=0.3, risk_score=0.2),
    Geography.MIDDLE_EAST: GeographyProfile(strategic_fit=0.4, risk_score=0.3),
    Geography.UNKNOWN: GeographyProfile(strategic_fit=0.5, risk_score=0.6),
})

RISK_RATING_SCORES: Mapping[RiskRating, float] = _frozen({
    RiskRating.LOW: 0.9,
    RiskRating.MEDIUM: 0.7,
    RiskRating.HIGH: 0.4,
    RiskRating.CRITICAL: 0.1,
})

# IRR offset (percentage points) a risk rating adds to the sector target IRR
RISK_IRR_OFFSETS: Mapping[RiskRating, float] = _frozen({
    RiskRating.LOW: -2.0,
    RiskRating.MEDIUM: 0.0,
    RiskRating.HIGH: 4.0,
    RiskRating.CRITICAL: 0.0,
})

# Evaluator reliability proxies, fixed per category
CATEGORY_CONFIDENCE: Mapping[Category, float] = _frozen({
    Category.FINANCIAL: 0.70,
    Category.OPERATIONAL: 0.85,
    Category.STRATEGIC: 0.75,
    Category.RISK: 0.90,
})

DEFAULT_TARGET_IRR = 20.0
UNKNOWN_SECTOR_AVERAGE = 70.0


@dataclass(frozen=True)
class DealScoringTables:
    """Bundle of the static tables, injectable into DealScorer."""

    sectors: Mapping[Sector, SectorProfile] = field(default_factory=lambda: SECTOR_PROFILES)
    stages: Mapping[Stage, StageProfile] = field(default_factory=lambda: STAGE_PROFILES)
    geographies: Mapping[Geography, GeographyProfile] = field(default_factory=lambda: GEOGRAPHY_PROFILES)
    risk_scores: Mapping[RiskRating, float] = field(default_factory=lambda: RISK_RATING_SCORES)
    risk_irr_offsets: Mapping[RiskRating, float] = field(default_factory=lambda: RISK_IRR_OFFSETS)

    def sector(self, sector: Sector) -> SectorProfile:
        return self.sectors.get(sector) or self.sectors[Sector.UNKNOWN]

    def stage(self, stage: Stage) -> StageProfile:
        return self.stages.get(stage) or self.stages[Stage.UNKNOWN]

    def geography(self, geography: Geography) -> GeographyProfile:
        return self.geographies.get(geography) or self.geographies[Geography.UNKNOWN]

    def risk_score(self, rating: RiskRating) -> float:
        return self.risk_scores[rating]

    def risk_irr_offset(self, rating: RiskRating) -> float:
        return self.risk_irr_offsets[rating]

    def target_irr(self, sector: Sector) -> float:
        irr = self.sector(sector).avg_irr
        return DEFAULT_TARGET_IRR if irr is None else irr


DEFAULT_TABLES = DealScoringTables()
