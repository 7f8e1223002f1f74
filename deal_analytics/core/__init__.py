"""
Core Package - PE Deal Analytics
deal_analytics/core/__init__.py

Core infrastructure: exceptions, logging.
"""

from deal_analytics.core.exceptions import (
    ConfigurationError,
    DegenerateCategoryError,
    ScoringException,
    UnknownModuleError,
)
from deal_analytics.core.logging import configure_logging

__all__ = [
    # Exceptions
    "ConfigurationError",
    "DegenerateCategoryError",
    "ScoringException",
    "UnknownModuleError",
    # Logging
    "configure_logging",
]
