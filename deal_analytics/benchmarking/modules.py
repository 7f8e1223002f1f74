"""
benchmarking/modules.py

Module Benchmarker: bands every metric of one module, then averages.

Formula:
    overall_score = mean(metric percentiles)
    grade         = calculate_grade(overall_score)

Qualitative text:
    overall_score >= 75   strengths listed
    overall_score <  50   improvement areas and lagging-behind areas listed
    otherwise             all three lists empty
"""

import logging
from datetime import datetime, timezone
from typing import Mapping, Optional, Union

from deal_analytics.benchmarking.benchmark_config import BenchmarkConfig
from deal_analytics.benchmarking.calculator import calculate_grade, calculate_percentile
from deal_analytics.benchmarking.reference_data import MetricDefinition, ModuleDefinition
from deal_analytics.models.benchmark import BenchmarkData, ModuleBenchmark, PeerComparison
from deal_analytics.scoring.utils import mean

logger = logging.getLogger(__name__)

STRENGTH_THRESHOLD = 75
IMPROVEMENT_THRESHOLD = 50


class ModuleBenchmarker:
    """Benchmark one fund-management module against industry reference data."""

    def __init__(self, config: Optional[BenchmarkConfig] = None):
        self.config = config or BenchmarkConfig.from_settings()

    def benchmark_metric(
        self,
        metric: MetricDefinition,
        fund_value: Optional[float],
        as_of: datetime,
    ) -> BenchmarkData:
        value = fund_value or metric.default_value
        percentile = calculate_percentile(
            value,
            metric.reference,
            lower_is_better=metric.lower_is_better,
            floor_ratio=self.config.floor_ratio,
            ceiling_ratio=self.config.ceiling_ratio,
        )
        return BenchmarkData(
            metric=metric.label,
            fund_value=value,
            industry_median=metric.reference.median,
            industry_top_quartile=metric.reference.top_quartile,
            industry_top_decile=metric.reference.top_decile,
            benchmark=metric.benchmark,
            percentile=percentile,
            trend=metric.trend,
            last_updated=as_of,
        )

    def benchmark(
        self,
        module: Union[str, ModuleDefinition],
        fund_data: Optional[Mapping[str, Optional[float]]] = None,
        as_of: Optional[datetime] = None,
    ) -> ModuleBenchmark:
        """
        Args:
            module: Module key ("portfolio", "legal", ...), IndustryBenchmarks
                    field name, display name, or a ModuleDefinition.
            fund_data: Metric key -> fund value. Missing, None or 0 metrics
                       use the definition's default value.
            as_of: Timestamp stamped on every metric (default: now, UTC).

        Raises:
            UnknownModuleError: module key not in the configuration.
        """
        definition = module if isinstance(module, ModuleDefinition) else self.config.module(module)
        fund_data = fund_data or {}
        as_of = as_of or datetime.now(timezone.utc)

        known = {m.key for m in definition.metrics}
        ignored = sorted(k for k in fund_data if k not in known)
        if ignored:
            logger.debug(
                "unknown_metrics_ignored",
                extra={"module": definition.key, "metrics": ignored},
            )

        metrics = [
            self.benchmark_metric(metric, fund_data.get(metric.key), as_of)
            for metric in definition.metrics
        ]
        overall = mean(m.percentile for m in metrics)
        grade = calculate_grade(overall, self.config.grade_scale)

        strong = overall >= STRENGTH_THRESHOLD
        weak = overall < IMPROVEMENT_THRESHOLD

        logger.debug(
            "module_benchmarked",
            extra={
                "module": definition.key,
                "percentiles": [m.percentile for m in metrics],
                "overall_score": overall,
                "grade": grade.value,
            },
        )

        return ModuleBenchmark(
            module_name=definition.name,
            overall_score=overall,
            grade=grade,
            metrics=metrics,
            strengths=list(definition.strengths) if strong else [],
            improvement_areas=list(definition.improvement_areas) if weak else [],
            peer_comparison=PeerComparison(
                better_than=overall,
                similar_to=list(definition.similar_to),
                lagging_behind=list(definition.lagging_behind) if weak else [],
            ),
        )
