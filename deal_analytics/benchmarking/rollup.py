"""
benchmarking/rollup.py

Portfolio roll-up across all seven modules, and the insight list derived
from it.

Formula:
    percentile    = mean(module overall scores)        (unweighted)
    industry_rank = max(1, floor((100 − percentile) × RANK_SCALE))
    total_funds   = PEER_POPULATION
"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, List, Mapping, Optional, Union

import structlog

from deal_analytics.benchmarking.benchmark_config import BenchmarkConfig
from deal_analytics.benchmarking.calculator import calculate_grade
from deal_analytics.benchmarking.modules import IMPROVEMENT_THRESHOLD, ModuleBenchmarker
from deal_analytics.models.benchmark import (
    BenchmarkInsight,
    FundBenchmarkInput,
    FundRanking,
    IndustryBenchmarks,
)
from deal_analytics.models.enumerations import InsightImpact, InsightType
from deal_analytics.scoring.utils import exact_decimal, floor_int, mean, round_half_up

logger = structlog.get_logger(__name__)

RANKING_STRENGTH_THRESHOLD = 75
OVERALL_FUND = "Overall Fund"


def _whole(value: float) -> int:
    return round_half_up(exact_decimal(value))


def generate_comprehensive_benchmarks(
    fund_input: Union[FundBenchmarkInput, Mapping[str, Any], None] = None,
    config: Optional[BenchmarkConfig] = None,
    as_of: Optional[datetime] = None,
) -> IndustryBenchmarks:
    """
    Benchmark every module and rank the fund.

    Args:
        fund_input: FundBenchmarkInput or an equivalent mapping (camelCase
                    module keys accepted). Omitted modules use defaults.
        config: BenchmarkConfig (default: built from settings).
        as_of: Timestamp stamped on every metric (default: now, UTC).
    """
    if fund_input is None:
        fund_input = FundBenchmarkInput()
    elif not isinstance(fund_input, FundBenchmarkInput):
        fund_input = FundBenchmarkInput.model_validate(fund_input)

    config = config or BenchmarkConfig.from_settings()
    as_of = as_of or datetime.now(timezone.utc)
    benchmarker = ModuleBenchmarker(config)

    results = {
        definition.field: benchmarker.benchmark(
            definition, getattr(fund_input, definition.key, None), as_of
        )
        for definition in config.modules
    }

    percentile = mean(m.overall_score for m in results.values())
    rank = max(1, floor_int((Decimal("100") - exact_decimal(percentile)) * config.rank_scale))
    ranking = FundRanking(
        industry_rank=rank,
        total_funds=config.peer_population,
        percentile=percentile,
        grade=calculate_grade(percentile, config.grade_scale),
    )

    logger.info(
        "benchmarks_generated",
        module_scores={name: m.overall_score for name, m in results.items()},
        percentile=percentile,
        industry_rank=rank,
        total_funds=config.peer_population,
        grade=ranking.grade.value,
    )

    return IndustryBenchmarks(**results, overall_fund_ranking=ranking)


def get_benchmark_insights(benchmarks: IndustryBenchmarks) -> List[BenchmarkInsight]:
    """
    Insights in fixed order: top module strength, one opportunity per module
    below the median, then the fund ranking.
    """
    modules = benchmarks.modules
    insights = []

    top = modules[0]
    for module in modules[1:]:
        if module.overall_score > top.overall_score:
            top = module

    insights.append(BenchmarkInsight(
        type=InsightType.STRENGTH,
        module=top.module_name,
        title=f"{top.module_name} Excellence",
        description=(
            f"Leading performance in {top.module_name} with {top.grade.value} grade "
            f"({_whole(top.overall_score)}th percentile)"
        ),
        impact=InsightImpact.HIGH,
        actionable=False,
    ))

    for module in modules:
        if module.overall_score < IMPROVEMENT_THRESHOLD:
            insights.append(BenchmarkInsight(
                type=InsightType.OPPORTUNITY,
                module=module.module_name,
                title=f"{module.module_name} Optimization",
                description=(
                    f"Below median performance ({_whole(module.overall_score)}th percentile). "
                    f"Focus on: {', '.join(module.improvement_areas)}"
                ),
                impact=InsightImpact.HIGH,
                actionable=True,
            ))

    ranking = benchmarks.overall_fund_ranking
    leading = ranking.percentile >= RANKING_STRENGTH_THRESHOLD
    insights.append(BenchmarkInsight(
        type=InsightType.STRENGTH if leading else InsightType.OPPORTUNITY,
        module=OVERALL_FUND,
        title=f"Industry Ranking: #{ranking.industry_rank} of {ranking.total_funds}",
        description=(
            f"Fund ranks in {_whole(ranking.percentile)}th percentile "
            f"with {ranking.grade.value} grade"
        ),
        impact=InsightImpact.HIGH,
        actionable=not leading,
    ))

    return insights
