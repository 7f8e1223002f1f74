"""PE Deal Analytics - deal scoring and industry benchmarking."""

from deal_analytics.benchmarking import (
    BenchmarkConfig,
    ModuleBenchmarker,
    generate_comprehensive_benchmarks,
    get_benchmark_insights,
)
from deal_analytics.config import Settings, get_settings
from deal_analytics.models import DealScore, IndustryBenchmarks, ProjectInput
from deal_analytics.scoring import DealScorer, ScoringConfig

__version__ = "1.0.0"

__all__ = [
    "BenchmarkConfig",
    "DealScore",
    "DealScorer",
    "IndustryBenchmarks",
    "ModuleBenchmarker",
    "ProjectInput",
    "ScoringConfig",
    "Settings",
    "generate_comprehensive_benchmarks",
    "get_benchmark_insights",
    "get_settings",
]
