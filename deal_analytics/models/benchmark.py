from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from datetime import datetime
from typing import Dict, List, Optional

from deal_analytics.models.enumerations import (
    BenchmarkTarget,
    Grade,
    InsightImpact,
    InsightType,
    Trend,
)


class BenchmarkData(BaseModel):
    """One fund metric placed against its industry reference points."""

    model_config = ConfigDict(frozen=True)

    metric: str
    fund_value: float
    industry_median: float
    industry_top_quartile: float
    industry_top_decile: float
    benchmark: BenchmarkTarget = BenchmarkTarget.TOP_QUARTILE
    percentile: int = Field(..., description="Banded percentile: 10, 25, 50, 75 or 90")
    trend: Trend
    last_updated: datetime


class PeerComparison(BaseModel):
    model_config = ConfigDict(frozen=True)

    better_than: float = Field(..., description="Percentage of peers outperformed")
    similar_to: List[str]
    lagging_behind: List[str]


class ModuleBenchmark(BaseModel):
    """Benchmark result for one organizational module."""

    model_config = ConfigDict(frozen=True)

    module_name: str
    overall_score: float = Field(..., ge=0, le=100, description="Mean of metric percentiles")
    grade: Grade
    metrics: List[BenchmarkData]
    strengths: List[str]
    improvement_areas: List[str]
    peer_comparison: PeerComparison


class FundRanking(BaseModel):
    model_config = ConfigDict(frozen=True)

    industry_rank: int = Field(..., ge=1)
    total_funds: int
    percentile: float
    grade: Grade


class IndustryBenchmarks(BaseModel):
    """All 7 module benchmarks plus the overall fund ranking."""

    model_config = ConfigDict(frozen=True)

    portfolio_management: ModuleBenchmark
    due_diligence: ModuleBenchmark
    legal_management: ModuleBenchmark
    deal_screening: ModuleBenchmark
    fund_operations: ModuleBenchmark
    investment_committee: ModuleBenchmark
    market_intelligence: ModuleBenchmark
    overall_fund_ranking: FundRanking

    @property
    def modules(self) -> List[ModuleBenchmark]:
        """Module benchmarks in canonical module order."""
        return [
            self.portfolio_management,
            self.due_diligence,
            self.legal_management,
            self.deal_screening,
            self.fund_operations,
            self.investment_committee,
            self.market_intelligence,
        ]


class BenchmarkInsight(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: InsightType
    module: str
    title: str
    description: str
    impact: InsightImpact
    actionable: bool


class FundBenchmarkInput(BaseModel):
    """
    Raw fund metrics, one mapping per module.

    Metrics omitted from a mapping (or given as None) fall back to the
    module definition's default fund value.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    portfolio: Dict[str, Optional[float]] = Field(default_factory=dict)
    due_diligence: Dict[str, Optional[float]] = Field(
        default_factory=dict,
        validation_alias=AliasChoices("due_diligence", "dueDiligence"),
    )
    legal: Dict[str, Optional[float]] = Field(default_factory=dict)
    operations: Dict[str, Optional[float]] = Field(default_factory=dict)
    deal_screening: Dict[str, Optional[float]] = Field(
        default_factory=dict,
        validation_alias=AliasChoices("deal_screening", "dealScreening"),
    )
    investment_committee: Dict[str, Optional[float]] = Field(
        default_factory=dict,
        validation_alias=AliasChoices("investment_committee", "investmentCommittee"),
    )
    market_intelligence: Dict[str, Optional[float]] = Field(
        default_factory=dict,
        validation_alias=AliasChoices("market_intelligence", "marketIntelligence"),
    )
