from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from typing import List

from deal_analytics.models.enumerations import Impact, Recommendation


class ScoringFactor(BaseModel):
    """One normalized input signal feeding a category score."""

    model_config = ConfigDict(frozen=True)

    name: str
    value: float = Field(..., ge=0, le=1, description="Normalized factor value")
    impact: Impact
    description: str
    weight: float = Field(..., ge=0, le=1, description="Relative weight within the category")


class DealScoreCategory(BaseModel):
    """
    Weighted aggregate of a category's factors.

    score = round(100 × Σ(value × weight) / Σ(weight))
    """

    model_config = ConfigDict(frozen=True)

    score: int = Field(..., ge=0, le=100)
    weight: float = Field(..., gt=0, le=1, description="Contribution to the overall score")
    factors: List[ScoringFactor]
    confidence: float = Field(..., ge=0, le=1)


class DealScoreCategories(BaseModel):
    """The 4 categories; field order is the serialization order."""

    model_config = ConfigDict(frozen=True)

    financial: DealScoreCategory
    operational: DealScoreCategory
    strategic: DealScoreCategory
    risk: DealScoreCategory

    def items(self):
        """(name, category) pairs in financial, operational, strategic, risk order."""
        return [
            ("financial", self.financial),
            ("operational", self.operational),
            ("strategic", self.strategic),
            ("risk", self.risk),
        ]


class DealBenchmarks(BaseModel):
    model_config = ConfigDict(frozen=True)

    sector_average: float
    portfolio_average: float
    stage_average: float


class DealScore(BaseModel):
    """Full scoring result for one project."""

    model_config = ConfigDict(frozen=True)

    project_id: str
    project_name: str
    overall_score: int = Field(..., ge=0, le=100)
    risk_adjusted_score: int = Field(..., ge=0, le=100)
    categories: DealScoreCategories
    benchmarks: DealBenchmarks
    recommendations: List[str]
    confidence: float = Field(..., ge=0, le=1)
    last_updated: datetime


class OpportunityScore(BaseModel):
    """Condensed per-project view used to rank the opportunity pipeline."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str
    overall_score: int
    financial_score: int
    market_score: int
    risk_score: int
    strategic_fit: int
    expected_irr: float
    risk_adjusted_return: int
    confidence: float
    recommendation: Recommendation
    key_factors: List[str]
    risk_factors: List[str]
