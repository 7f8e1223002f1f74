"""
Custom Exceptions - PE Deal Analytics
deal_analytics/core/exceptions.py

Custom exception classes for scoring and benchmarking.
"""

from typing import Sequence


class ScoringException(Exception):
    """Base exception for scoring and benchmarking operations."""

    pass


class DegenerateCategoryError(ScoringException):
    """Category factors carry no weight, so no weighted mean exists."""

    def __init__(self, category: str, factor_names: Sequence[str] = ()):
        self.category = category
        self.factor_names = list(factor_names)
        super().__init__(
            f"Category '{category}' has zero total factor weight "
            f"(factors: {', '.join(self.factor_names) or 'none'})"
        )


class ConfigurationError(ScoringException):
    """Scoring or benchmarking configuration is internally inconsistent."""

    def __init__(self, message: str = "Invalid scoring configuration"):
        self.message = message
        super().__init__(message)


class UnknownModuleError(ScoringException):
    """Benchmark requested for a module with no definition."""

    def __init__(self, module_key: str):
        self.module_key = module_key
        super().__init__(f"No benchmark definition for module '{module_key}'")
