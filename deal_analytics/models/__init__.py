from deal_analytics.models.benchmark import (
    BenchmarkData,
    BenchmarkInsight,
    FundBenchmarkInput,
    FundRanking,
    IndustryBenchmarks,
    ModuleBenchmark,
    PeerComparison,
)
from deal_analytics.models.deal_score import (
    DealBenchmarks,
    DealScore,
    DealScoreCategories,
    DealScoreCategory,
    OpportunityScore,
    ScoringFactor,
)
from deal_analytics.models.enumerations import (
    BenchmarkTarget,
    Category,
    Geography,
    Grade,
    Impact,
    InsightImpact,
    InsightType,
    Recommendation,
    RiskRating,
    Sector,
    Stage,
    Trend,
)
from deal_analytics.models.project import ProjectInput

__all__ = [
    "BenchmarkData",
    "BenchmarkInsight",
    "BenchmarkTarget",
    "Category",
    "DealBenchmarks",
    "DealScore",
    "DealScoreCategories",
    "DealScoreCategory",
    "FundBenchmarkInput",
    "FundRanking",
    "Geography",
    "Grade",
    "Impact",
    "IndustryBenchmarks",
    "InsightImpact",
    "InsightType",
    "ModuleBenchmark",
    "OpportunityScore",
    "PeerComparison",
    "ProjectInput",
    "Recommendation",
    "RiskRating",
    "ScoringFactor",
    "Sector",
    "Stage",
    "Trend",
]
