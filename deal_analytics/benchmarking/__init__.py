"""
benchmarking/ - Industry Benchmarking

Modules:
    reference_data.py     - Module / metric definitions with industry reference points
    benchmark_config.py   - Immutable benchmarking configuration
    calculator.py         - Percentile banding and letter grades
    modules.py            - Per-module benchmarker
    rollup.py             - Fund-wide roll-up, ranking and insights
"""

from deal_analytics.benchmarking.benchmark_config import BenchmarkConfig
from deal_analytics.benchmarking.calculator import calculate_grade, calculate_percentile
from deal_analytics.benchmarking.modules import ModuleBenchmarker
from deal_analytics.benchmarking.reference_data import (
    DEFAULT_MODULE_DEFINITIONS,
    MetricDefinition,
    MetricReference,
    ModuleDefinition,
)
from deal_analytics.benchmarking.rollup import (
    generate_comprehensive_benchmarks,
    get_benchmark_insights,
)

__all__ = [
    "BenchmarkConfig",
    "DEFAULT_MODULE_DEFINITIONS",
    "MetricDefinition",
    "MetricReference",
    "ModuleBenchmarker",
    "ModuleDefinition",
    "calculate_grade",
    "calculate_percentile",
    "generate_comprehensive_benchmarks",
    "get_benchmark_insights",
]
