# tests/test_factor_evaluators.py

"""
Factor Evaluator Tests - one rule per factor, boundaries included
"""

import pytest
from datetime import timedelta

from deal_analytics.models import Geography, Impact, ProjectInput, RiskRating, Sector
from deal_analytics.scoring import factor_evaluators as fe


def make_project(**overrides):
    data = {"project_id": "p-test", "progress": 50, "team_size": 3, "work_products": 5}
    data.update(overrides)
    return ProjectInput(**data)


# FINANCIAL


class TestDealSize:
    """Sweet spot is $20M-$100M inclusive."""

    @pytest.mark.parametrize("value", [20_000_000, 50_000_000, 100_000_000])
    def test_sweet_spot_rewarded(self, value):
        factor = fe.evaluate_deal_size(value)
        assert factor.value == 0.8
        assert factor.impact is Impact.POSITIVE
        assert factor.weight == 0.3

    def test_oversized_is_neutral(self):
        factor = fe.evaluate_deal_size(100_000_001)
        assert factor.value == 0.65
        assert factor.impact is Impact.NEUTRAL

    def test_undersized_penalized(self):
        factor = fe.evaluate_deal_size(19_999_999)
        assert factor.value == 0.4
        assert factor.impact is Impact.NEGATIVE

    def test_description_in_millions(self):
        factor = fe.evaluate_deal_size(50_000_000)
        assert factor.description == "Deal size of $50.0M is optimal for mid-market PE"


class TestValuationMultiple:
    """Implied multiple is always 1 / 0.15 = 6.67x."""

    def test_below_sector_average_rewarded(self):
        # 6.67 / 8.5 = 0.78
        factor = fe.evaluate_valuation_multiple(50_000_000, Sector.TECHNOLOGY)
        assert factor.value == 0.85
        assert factor.impact is Impact.POSITIVE
        assert factor.description == "Implied multiple of 6.7x vs sector average of 8.5x"

    def test_above_sector_average_penalized(self):
        # 6.67 / 4.2 = 1.59
        factor = fe.evaluate_valuation_multiple(50_000_000, Sector.RETAIL)
        assert factor.value == 0.3
        assert factor.impact is Impact.NEGATIVE

    def test_near_sector_average_neutral(self):
        # 6.67 / 6.8 = 0.98
        factor = fe.evaluate_valuation_multiple(50_000_000, Sector.MANUFACTURING)
        assert factor.value == 0.6
        assert factor.impact is Impact.NEUTRAL

    def test_unknown_sector_has_no_benchmark(self):
        factor = fe.evaluate_valuation_multiple(50_000_000, Sector.UNKNOWN)
        assert factor.name == "Sector Multiple Analysis"
        assert factor.value == 0.5
        assert factor.description == "Sector benchmarks not available"

    def test_zero_deal_value_is_neutral(self):
        factor = fe.evaluate_valuation_multiple(0, Sector.TECHNOLOGY)
        assert factor.value == 0.6
        assert factor.impact is Impact.NEUTRAL
        assert factor.weight == 0.25


class TestExpectedIrr:

    def test_progress_lowers_required_return(self):
        # 22.5 - (70 - 50) / 50 * 2 = 21.7
        project = make_project(sector="Technology", progress=70)
        assert fe.estimate_irr(project) == pytest.approx(21.7)
        factor = fe.evaluate_expected_irr(project)
        assert factor.value == 0.7
        assert factor.impact is Impact.POSITIVE
        assert factor.description == "Projected IRR of 21.7% vs sector target of 22.5%"

    def test_high_risk_adds_four_points(self):
        # 22.5 + 4 - (-2) = 28.5
        project = make_project(sector="Technology", risk_rating="high", progress=0)
        assert fe.estimate_irr(project) == pytest.approx(28.5)
        assert fe.evaluate_expected_irr(project).value == 0.9

    def test_low_irr_penalized(self):
        # 14 - 2 - 2 = 10
        project = make_project(sector="Financial Services", risk_rating="low", progress=100)
        factor = fe.evaluate_expected_irr(project)
        assert factor.value == 0.2
        assert factor.impact is Impact.NEGATIVE

    def test_unknown_sector_targets_twenty(self):
        project = make_project(sector="Aerospace", progress=50)
        assert fe.estimate_irr(project) == 20.0
        assert "sector target of 20%" in fe.evaluate_expected_irr(project).description


class TestConfidenceFactor:

    def test_passes_value_through(self):
        factor = fe.evaluate_confidence(0.8)
        assert factor.value == 0.8
        assert factor.impact is Impact.NEUTRAL
        assert factor.description == "80% confidence in analysis accuracy"

    def test_impact_thresholds(self):
        assert fe.evaluate_confidence(0.81).impact is Impact.POSITIVE
        assert fe.evaluate_confidence(0.59).impact is Impact.NEGATIVE


# OPERATIONAL


class TestProgressFactor:

    def test_growth_stage_expectation(self):
        project = make_project(stage="growth", progress=70)
        factor = fe.evaluate_progress(project)
        assert factor.value == pytest.approx((70 / 65) / 1.2)
        assert factor.impact is Impact.POSITIVE
        assert factor.description == "70% progress vs 65% expected for growth stage"

    def test_capped_at_120_percent_of_expectation(self):
        project = make_project(stage="mature", progress=100)
        assert fe.evaluate_progress(project).value == 1.0

    def test_stage_without_norm_expects_fifty(self):
        project = make_project(stage="venture", progress=25)
        assert fe.expected_progress(project) == 50.0
        factor = fe.evaluate_progress(project)
        assert factor.value == pytest.approx(0.5 / 1.2)
        assert factor.impact is Impact.NEGATIVE


class TestTeamFactor:

    def test_optimal_team_grows_with_complexity(self):
        simple = make_project(deal_value=50_000_000, sector="Technology")
        complex_deal = make_project(deal_value=90_000_000, sector="Healthcare", risk_rating="high")
        assert fe.optimal_team_size(simple) == 3
        assert fe.optimal_team_size(complex_deal) == 7

    def test_missing_deal_value_assumes_fifty_million(self):
        assert fe.optimal_team_size(make_project(deal_value=None)) == 3

    def test_efficiency_capped_at_150_percent(self):
        factor = fe.evaluate_team(make_project(team_size=20))
        assert factor.value == 1.0

    def test_understaffed_team_penalized(self):
        factor = fe.evaluate_team(make_project(team_size=1))
        assert factor.impact is Impact.NEGATIVE
        assert factor.description == "Team of 1 vs optimal 3 for this deal complexity"


class TestWorkProducts:

    @pytest.mark.parametrize("count,impact,depth", [
        (12, Impact.POSITIVE, "thorough"),
        (8, Impact.NEUTRAL, "adequate"),
        (2, Impact.NEGATIVE, "limited"),
    ])
    def test_depth_labels(self, count, impact, depth):
        factor = fe.evaluate_work_products(count)
        assert factor.impact is impact
        assert factor.description == f"{count} work products indicating {depth} analysis depth"

    def test_capped_at_twelve(self):
        assert fe.evaluate_work_products(40).value == 1.0


class TestTimeline:

    def test_no_deadline(self, as_of):
        factor = fe.evaluate_timeline(make_project(), as_of)
        assert factor.name == "Timeline Management"
        assert factor.value == 0.6
        assert factor.description == "No deadline specified"

    def test_low_burn_rate_rewarded(self, as_of):
        # 50% left over 60 days = 0.0083 per day
        project = make_project(progress=50, deadline=as_of + timedelta(days=60))
        factor = fe.evaluate_timeline(project, as_of)
        assert factor.name == "Timeline Adherence"
        assert factor.value == 0.9
        assert factor.description == "60 days remaining, 50% work left"

    def test_high_burn_rate_penalized(self, as_of):
        # 80% left over 10 days = 0.08 per day
        project = make_project(progress=20, deadline=as_of + timedelta(days=10))
        assert fe.evaluate_timeline(project, as_of).value == 0.3

    def test_overdue_deadline_uses_one_day(self, as_of):
        project = make_project(progress=99, deadline=as_of - timedelta(days=5))
        factor = fe.evaluate_timeline(project, as_of)
        # 1% left over max(-5, 1) days
        assert factor.value == 0.9


# STRATEGIC


class TestStrategicFactors:

    def test_sector_fit(self):
        factor = fe.evaluate_sector_fit(Sector.RETAIL)
        assert factor.value == 0.5
        assert factor.impact is Impact.NEGATIVE
        assert factor.description == "Retail aligns weakly with portfolio strategy"

    def test_geographic_fit(self):
        factor = fe.evaluate_geographic_fit(make_project(geography="Europe"))
        assert factor.value == 0.75
        assert factor.impact is Impact.NEUTRAL
        assert factor.description == "Europe matches secondary geographic focus"

    @pytest.mark.parametrize("stage,value", [
        ("growth", 0.9), ("buyout", 0.85), ("mature", 0.6),
        ("venture", 0.4), ("distressed", 0.3), ("seed", 0.5),
    ])
    def test_stage_alignment_table(self, stage, value):
        assert fe.evaluate_stage_alignment(make_project(stage=stage)).value == value

    def test_diversification_bonuses(self):
        plain = fe.evaluate_diversification(make_project(sector="Retail", geography="North America"))
        both = fe.evaluate_diversification(make_project(sector="Healthcare", geography="Asia Pacific"))
        assert plain.value == 0.6
        assert plain.impact is Impact.NEUTRAL
        assert both.value == pytest.approx(0.8)
        assert both.impact is Impact.POSITIVE
        assert both.description == "Deal adds strong diversification benefit"

    def test_single_bonus_is_not_strong(self):
        factor = fe.evaluate_diversification(make_project(sector="Technology"))
        assert factor.value == 0.7
        assert factor.impact is Impact.NEUTRAL


# RISK


class TestRiskFactors:

    @pytest.mark.parametrize("rating,value", [
        (RiskRating.LOW, 0.9), (RiskRating.MEDIUM, 0.7),
        (RiskRating.HIGH, 0.4), (RiskRating.CRITICAL, 0.1),
    ])
    def test_rating_table(self, rating, value):
        assert fe.evaluate_risk_rating(rating).value == value

    def test_sector_risk(self):
        factor = fe.evaluate_sector_risk(Sector.HEALTHCARE)
        assert factor.value == 0.8
        assert factor.description == "Healthcare sector has low inherent risk"

    def test_geographic_risk(self):
        factor = fe.evaluate_geographic_risk(make_project(geography=Geography.AFRICA))
        assert factor.value == 0.2
        assert factor.impact is Impact.NEGATIVE
        assert factor.description == "Africa has high political/economic risk"


class TestExecutionRisk:

    def test_adequate_team_no_deadline(self, as_of):
        factor = fe.evaluate_execution_risk(make_project(team_size=3), as_of)
        assert factor.value == pytest.approx(0.8)
        # 0.7 + 0.1 lands just below 0.8 in binary floating point
        assert factor.impact is Impact.NEUTRAL

    def test_nearly_done_before_deadline(self, as_of):
        project = make_project(progress=90, team_size=3, deadline=as_of + timedelta(days=5))
        factor = fe.evaluate_execution_risk(project, as_of)
        assert factor.value == pytest.approx(1.0)
        assert factor.impact is Impact.POSITIVE

    def test_behind_schedule_and_understaffed(self, as_of):
        project = make_project(
            deal_value=150_000_000, progress=10, team_size=2,
            deadline=as_of + timedelta(days=10),
        )
        factor = fe.evaluate_execution_risk(project, as_of)
        assert factor.value == pytest.approx(0.2)
        assert factor.impact is Impact.NEGATIVE
        assert factor.description == "High execution risk based on progress and resources"

    def test_value_never_negative(self, as_of):
        project = make_project(
            deal_value=150_000_000, progress=0, team_size=0,
            deadline=as_of + timedelta(days=1),
        )
        assert 0.0 <= fe.evaluate_execution_risk(project, as_of).value <= 1.0

    @pytest.mark.parametrize("deal_value,expected", [
        (None, 3), (50_000_000, 3), (50_000_001, 4), (100_000_001, 6),
    ])
    def test_expected_execution_team(self, deal_value, expected):
        assert fe.expected_execution_team(deal_value) == expected
