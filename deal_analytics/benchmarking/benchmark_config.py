"""
Benchmarking configuration
deal_analytics/benchmarking/benchmark_config.py

Immutable bundle of the percentile band ratios, the grade scale, the
fund-ranking knobs and the module definitions. Built once from Settings and
passed explicitly to ModuleBenchmarker and the roll-up.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from deal_analytics.config import Settings, get_settings
from deal_analytics.core.exceptions import ConfigurationError, UnknownModuleError
from deal_analytics.models.enumerations import Grade
from deal_analytics.benchmarking.reference_data import (
    DEFAULT_MODULE_DEFINITIONS,
    MetricDefinition,
    ModuleDefinition,
)

# (minimum percentile, grade), highest first
DEFAULT_GRADE_SCALE: Tuple[Tuple[float, Grade], ...] = (
    (95, Grade.A_PLUS),
    (85, Grade.A),
    (75, Grade.B_PLUS),
    (65, Grade.B),
    (50, Grade.C_PLUS),
    (35, Grade.C),
)
BOTTOM_GRADE = Grade.D


def _reference_is_ordered(metric: MetricDefinition) -> bool:
    ref = metric.reference
    if metric.lower_is_better:
        return ref.median >= ref.top_quartile >= ref.top_decile
    return ref.median <= ref.top_quartile <= ref.top_decile


@dataclass(frozen=True)
class BenchmarkConfig:
    floor_ratio: float = 0.7          # higher-is-better 25th band: value >= floor × median
    ceiling_ratio: float = 1.5        # lower-is-better 25th band: value <= ceiling × median
    grade_scale: Tuple[Tuple[float, Grade], ...] = DEFAULT_GRADE_SCALE
    peer_population: int = 487
    rank_scale: int = 5
    modules: Tuple[ModuleDefinition, ...] = DEFAULT_MODULE_DEFINITIONS

    def __post_init__(self):
        if not 0 < self.floor_ratio < 1:
            raise ConfigurationError(f"floor_ratio must be in (0, 1), got {self.floor_ratio}")
        if self.ceiling_ratio <= 1:
            raise ConfigurationError(f"ceiling_ratio must be > 1, got {self.ceiling_ratio}")

        thresholds = [t for t, _ in self.grade_scale]
        if any(a <= b for a, b in zip(thresholds, thresholds[1:])):
            raise ConfigurationError("Grade thresholds must strictly decrease")

        if self.peer_population < 1 or self.rank_scale < 1:
            raise ConfigurationError("peer_population and rank_scale must be positive")

        keys = [m.key for m in self.modules]
        if len(set(keys)) != len(keys):
            raise ConfigurationError(f"Duplicate module keys: {keys}")
        for module in self.modules:
            if not module.metrics:
                raise ConfigurationError(f"Module '{module.key}' defines no metrics")
            for metric in module.metrics:
                if not _reference_is_ordered(metric):
                    raise ConfigurationError(
                        f"Reference points for '{module.key}.{metric.key}' are out of order"
                    )

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "BenchmarkConfig":
        settings = settings or get_settings()
        return cls(
            floor_ratio=settings.PERCENTILE_FLOOR_RATIO,
            ceiling_ratio=settings.PERCENTILE_CEILING_RATIO,
            peer_population=settings.PEER_POPULATION,
            rank_scale=settings.RANK_SCALE,
        )

    def module(self, key: str) -> ModuleDefinition:
        """Look up a module by input key, IndustryBenchmarks field or display name."""
        for module in self.modules:
            if key in (module.key, module.field, module.name):
                return module
        raise UnknownModuleError(key)
