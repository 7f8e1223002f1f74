# tests/test_property_based.py
"""
Property-Based Tests

Hypothesis tests with max_examples=500, covering:
  - CategoryAggregator bounds and formula
  - DealScorer overall / risk-adjusted bounds and ordering
  - Percentile banding monotonicity and grade step function
  - ModuleBenchmarker overall score = mean of percentiles
"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal, ROUND_HALF_UP

from hypothesis import given, settings
from hypothesis import strategies as st

from deal_analytics.benchmarking import (
    BenchmarkConfig,
    MetricReference,
    ModuleBenchmarker,
    calculate_grade,
    calculate_percentile,
)
from deal_analytics.models import (
    Category,
    Geography,
    Grade,
    Impact,
    ProjectInput,
    RiskRating,
    ScoringFactor,
    Sector,
    Stage,
)
from deal_analytics.scoring import CategoryAggregator, DealScorer, ScoringConfig

AS_OF = datetime(2026, 3, 2, 12, 0, tzinfo=timezone.utc)
SCORER = DealScorer(ScoringConfig())

# ---------------------------------------------------------------------------
# Shared strategies
# ---------------------------------------------------------------------------

unit_st = st.floats(min_value=0.0, max_value=1.0, allow_nan=False, allow_infinity=False)
positive_weight_st = st.floats(min_value=0.01, max_value=1.0, allow_nan=False, allow_infinity=False)
score_0_100 = st.integers(min_value=0, max_value=100)


@st.composite
def factor_st(draw, weight=positive_weight_st):
    return ScoringFactor(
        name="f",
        value=draw(unit_st),
        impact=draw(st.sampled_from(list(Impact))),
        description="",
        weight=draw(weight),
    )


@st.composite
def project_st(draw):
    """Any valid project, deadline optional."""
    deadline = draw(st.one_of(
        st.none(),
        st.integers(min_value=-30, max_value=365).map(lambda d: AS_OF + timedelta(days=d)),
    ))
    return ProjectInput(
        project_id=draw(st.text(min_size=1, max_size=8)),
        deal_value=draw(st.one_of(st.none(), st.floats(min_value=0, max_value=1e9))),
        sector=draw(st.sampled_from(list(Sector))),
        stage=draw(st.sampled_from(list(Stage))),
        geography=draw(st.sampled_from(list(Geography))),
        risk_rating=draw(st.sampled_from(list(RiskRating))),
        progress=draw(st.floats(min_value=0, max_value=100)),
        team_size=draw(st.integers(min_value=0, max_value=30)),
        work_products=draw(st.integers(min_value=0, max_value=50)),
        deadline=deadline,
        confidence_score=draw(st.one_of(st.none(), unit_st)),
    )


@st.composite
def reference_st(draw):
    """Ordered (median, top quartile, top decile) for a higher-is-better metric."""
    values = sorted(draw(st.lists(
        st.floats(min_value=0.01, max_value=1000, allow_nan=False, allow_infinity=False),
        min_size=3, max_size=3,
    )))
    return MetricReference(median=values[0], top_quartile=values[1], top_decile=values[2])


# ---------------------------------------------------------------------------
# Category aggregation
# ---------------------------------------------------------------------------


class TestCategoryPropertyBased:

    @given(st.lists(factor_st(), min_size=1, max_size=6))
    @settings(max_examples=500)
    def test_score_bounded(self, factors):
        """Category score is always in [0, 100]."""
        result = CategoryAggregator().aggregate(Category.RISK, factors, 0.2, 0.9)
        assert 0 <= result.score <= 100

    @given(st.lists(factor_st(), min_size=1, max_size=6))
    @settings(max_examples=500)
    def test_matches_weighted_mean(self, factors):
        """score = round(100 × Σ(v × w) / Σ(w)), half-up."""
        values = [Decimal(str(f.value)) for f in factors]
        weights = [Decimal(str(f.weight)) for f in factors]
        expected = sum(v * w for v, w in zip(values, weights)) / sum(weights) * 100
        expected = int(expected.quantize(Decimal("1"), rounding=ROUND_HALF_UP))

        result = CategoryAggregator().aggregate(Category.FINANCIAL, factors, 0.35, 0.7)
        assert result.score == expected

    @given(unit_st, st.lists(factor_st(), min_size=1, max_size=6))
    @settings(max_examples=500)
    def test_uniform_values(self, value, factors):
        """When every factor has the same value the score is 100 × value."""
        same = [f.model_copy(update={"value": value}) for f in factors]
        result = CategoryAggregator().aggregate(Category.STRATEGIC, same, 0.2, 0.75)
        assert abs(result.score - value * 100) <= 0.5 + 1e-9


# ---------------------------------------------------------------------------
# Deal scorer
# ---------------------------------------------------------------------------


class TestDealScorerPropertyBased:

    @given(project_st())
    @settings(max_examples=500)
    def test_scores_bounded(self, project):
        """Every score and the confidence stay in range for any valid project."""
        result = SCORER.score_deal(project, as_of=AS_OF)
        for _, category in result.categories.items():
            assert 0 <= category.score <= 100
        assert 0 <= result.overall_score <= 100
        assert 0 <= result.risk_adjusted_score <= 100
        assert 0.5 <= result.confidence <= 0.99

    @given(project_st())
    @settings(max_examples=500)
    def test_overall_is_weighted_category_sum(self, project):
        """overall = round(Σ score × weight), independent of category order."""
        result = SCORER.score_deal(project, as_of=AS_OF)
        items = list(result.categories.items())
        forward = sum(Decimal(c.score) * Decimal(str(c.weight)) for _, c in items)
        backward = sum(Decimal(c.score) * Decimal(str(c.weight)) for _, c in reversed(items))
        assert forward == backward
        assert result.overall_score == int(forward.quantize(Decimal("1"), rounding=ROUND_HALF_UP))

    @given(project_st())
    @settings(max_examples=500)
    def test_recommendation_verdict_first(self, project):
        """The first recommendation is always one of the four verdicts."""
        result = SCORER.score_deal(project, as_of=AS_OF)
        assert result.recommendations[0].split(":")[0] in {"STRONG BUY", "BUY", "HOLD", "PASS"}

    @given(st.integers(min_value=10, max_value=95))
    @settings(max_examples=500)
    def test_risk_adjustment_ordering(self, overall):
        """low > medium > high > critical for a fixed overall score."""
        low = SCORER.apply_risk_adjustment(overall, RiskRating.LOW)
        medium = SCORER.apply_risk_adjustment(overall, RiskRating.MEDIUM)
        high = SCORER.apply_risk_adjustment(overall, RiskRating.HIGH)
        critical = SCORER.apply_risk_adjustment(overall, RiskRating.CRITICAL)
        assert medium == overall
        assert low > medium > high > critical

    @given(score_0_100)
    @settings(max_examples=500)
    def test_risk_adjustment_weak_ordering_full_range(self, overall):
        """Across 0-100 the ordering holds non-strictly; ties appear at 0 and at the 100 clamp."""
        low, medium, high, critical = (
            SCORER.apply_risk_adjustment(overall, r)
            for r in (RiskRating.LOW, RiskRating.MEDIUM, RiskRating.HIGH, RiskRating.CRITICAL)
        )
        assert medium == overall
        assert low >= medium >= high >= critical

    @given(score_0_100, st.sampled_from(list(RiskRating)))
    @settings(max_examples=500)
    def test_risk_adjusted_bounded(self, overall, rating):
        assert 0 <= SCORER.apply_risk_adjustment(overall, rating) <= 100


# ---------------------------------------------------------------------------
# Benchmarking
# ---------------------------------------------------------------------------


class TestBenchmarkPropertyBased:

    @given(reference_st())
    @settings(max_examples=500)
    def test_reference_points_monotone(self, ref):
        """percentile(top decile) >= percentile(top quartile) >= percentile(median) >= percentile(median / 2)."""
        p = [calculate_percentile(v, ref) for v in (ref.top_decile, ref.top_quartile, ref.median, ref.median * 0.5)]
        assert p == sorted(p, reverse=True)
        assert p[0] == 90

    @given(reference_st(), st.floats(min_value=0, max_value=2000), st.floats(min_value=0, max_value=2000))
    @settings(max_examples=500)
    def test_monotone_in_value(self, ref, a, b):
        """A higher value never earns a lower band (higher is better)."""
        low, high = sorted((a, b))
        assert calculate_percentile(low, ref) <= calculate_percentile(high, ref)

    @given(reference_st(), st.floats(min_value=0, max_value=2000), st.floats(min_value=0, max_value=2000))
    @settings(max_examples=500)
    def test_monotone_lower_is_better(self, ref, a, b):
        """A lower value never earns a lower band (lower is better)."""
        lib = MetricReference(median=ref.top_decile, top_quartile=ref.top_quartile, top_decile=ref.median)
        low, high = sorted((a, b))
        assert calculate_percentile(low, lib, True) >= calculate_percentile(high, lib, True)

    @given(reference_st(), st.floats(min_value=0, max_value=2000))
    @settings(max_examples=500)
    def test_banded_output(self, ref, value):
        """Percentile is always one of the five bands and is deterministic."""
        first = calculate_percentile(value, ref)
        assert first in {10, 25, 50, 75, 90}
        assert calculate_percentile(value, ref) == first

    @given(st.floats(min_value=0, max_value=100), st.floats(min_value=0, max_value=100))
    @settings(max_examples=500)
    def test_grade_monotone(self, a, b):
        """A higher percentile never earns a worse grade."""
        order = list(Grade)
        low, high = sorted((a, b))
        assert order.index(calculate_grade(high)) <= order.index(calculate_grade(low))

    @given(
        st.floats(min_value=0, max_value=40),
        st.floats(min_value=0, max_value=5),
        st.floats(min_value=0, max_value=1.5),
    )
    @settings(max_examples=500)
    def test_module_score_is_mean_of_percentiles(self, irr, moic, dpi):
        result = ModuleBenchmarker(BenchmarkConfig()).benchmark(
            "portfolio", {"irr": irr, "moic": moic, "dpi": dpi}, AS_OF
        )
        percentiles = [m.percentile for m in result.metrics]
        assert abs(result.overall_score - sum(percentiles) / 3) < 1e-9
        assert result.grade is calculate_grade(result.overall_score)
