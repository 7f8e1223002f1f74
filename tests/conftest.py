# tests/conftest.py

"""
Pytest Fixtures - Shared projects, configurations and reference time

PROJECT REFERENCE:
- p-001  Technology growth, $50M, medium risk, 70% progress (baseline example)
- p-002  Retail mature, $150M, high risk, 20% progress, deadline in 10 days
- p-003  Healthcare growth, low risk, 50% progress, no deal value
"""

import pytest
from datetime import datetime, timedelta, timezone

from deal_analytics.benchmarking import BenchmarkConfig
from deal_analytics.config import Settings
from deal_analytics.models import FundBenchmarkInput, ProjectInput
from deal_analytics.scoring import DealScorer, ScoringConfig


# =============================================================================
# REFERENCE TIME
# =============================================================================

@pytest.fixture
def as_of():
    """Fixed scoring time so deadline factors are reproducible."""
    return datetime(2026, 3, 2, 12, 0, tzinfo=timezone.utc)


# =============================================================================
# CONFIGURATION FIXTURES
# =============================================================================

@pytest.fixture
def settings():
    """Settings with defaults only (ignores any local .env)."""
    return Settings(_env_file=None)


@pytest.fixture
def scoring_config():
    return ScoringConfig()


@pytest.fixture
def benchmark_config():
    return BenchmarkConfig()


@pytest.fixture
def scorer(scoring_config):
    return DealScorer(scoring_config)


# =============================================================================
# PROJECT FIXTURES
# =============================================================================

@pytest.fixture
def baseline_project():
    """$50M Technology growth deal, medium risk, 70% progress."""
    return ProjectInput(
        project_id="p-001",
        project_name="Project Atlas",
        deal_value=50_000_000,
        sector="Technology",
        stage="growth",
        risk_rating="medium",
        progress=70,
        team_size=4,
        work_products=8,
        confidence_score=0.8,
    )


@pytest.fixture
def stressed_project(as_of):
    """Oversized, high-risk Retail deal running out of time."""
    return ProjectInput(
        project_id="p-002",
        project_name="Project Birch",
        deal_value=150_000_000,
        sector="Retail",
        stage="mature",
        geography="Latin America",
        risk_rating="high",
        progress=20,
        team_size=2,
        work_products=1,
        deadline=as_of + timedelta(days=10),
        confidence_score=0.4,
    )


@pytest.fixture
def healthcare_project():
    """Low-risk Healthcare growth deal without a recorded deal value."""
    return ProjectInput(
        project_id="p-003",
        project_name="Project Cedar",
        sector="Healthcare",
        stage="growth",
        risk_rating="low",
        progress=50,
        team_size=5,
        work_products=12,
    )


@pytest.fixture
def camel_case_payload():
    """Project record as emitted by the workspace layer."""
    return {
        "id": "p-004",
        "name": "Project Dune",
        "dealValue": 80_000_000,
        "sector": "healthcare",
        "stage": "BUYOUT",
        "geography": "europe",
        "riskRating": "low",
        "progress": 85,
        "teamSize": 6,
        "workProducts": 14,
        "confidenceScore": 0.9,
    }


# =============================================================================
# BENCHMARK FIXTURES
# =============================================================================

@pytest.fixture
def default_fund_input():
    """Fund input with every metric left at its documented default."""
    return FundBenchmarkInput()


@pytest.fixture
def weak_portfolio_input():
    """Portfolio metrics at percentiles {10, 10, 25}."""
    return FundBenchmarkInput(portfolio={"irr": 5.0, "moic": 1.0, "dpi": 0.3})
