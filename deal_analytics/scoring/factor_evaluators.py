"""
Factor Evaluators
deal_analytics/scoring/factor_evaluators.py

Pure functions turning one raw project attribute into a ScoringFactor
(normalized value in [0, 1], impact tag, rationale, weight within its
category). Grouped by the category that consumes them.

  Category     | Factor                      | Weight
  ─────────────┼─────────────────────────────┼───────
  financial    | Deal Size Optimization      | 0.30
               | Valuation Multiple          | 0.25
               | Expected IRR                | 0.30
               | Analysis Confidence         | 0.15
  operational  | Progress Efficiency         | 0.40
               | Team Optimization           | 0.30
               | Work Product Quality        | 0.20
               | Timeline Adherence          | 0.10
  strategic    | Sector Strategic Fit        | 0.40
               | Geographic Fit              | 0.30
               | Deal Stage Alignment        | 0.30
               | Portfolio Diversification   | 0.30
  risk         | Base Risk Assessment        | 0.40
               | Sector Risk Profile         | 0.30
               | Geographic Risk             | 0.20
               | Execution Risk              | 0.30
"""

from datetime import datetime
from typing import Optional

from deal_analytics.models.deal_score import ScoringFactor
from deal_analytics.models.enumerations import Impact, RiskRating, Sector
from deal_analytics.models.project import ProjectInput
from deal_analytics.scoring.tables import DEFAULT_TABLES, DealScoringTables

# Mid-market sweet spot for deal size (currency units)
SWEET_SPOT_MIN = 20_000_000
SWEET_SPOT_MAX = 100_000_000

# Scoring assumes EBITDA at 15% of deal value
EBITDA_MARGIN = 0.15

# Deal value assumed for staffing when none is recorded
STAFFING_DEFAULT_DEAL_VALUE = 50_000_000

WORK_PRODUCT_TARGET = 10
SECONDS_PER_DAY = 60 * 60 * 24


def _impact(value: float, positive_above: float, negative_below: float) -> Impact:
    if value > positive_above:
        return Impact.POSITIVE
    if value < negative_below:
        return Impact.NEGATIVE
    return Impact.NEUTRAL


def _pick(impact: Impact, positive: str, negative: str, neutral: str) -> str:
    if impact is Impact.POSITIVE:
        return positive
    if impact is Impact.NEGATIVE:
        return negative
    return neutral


def _days_to_deadline(deadline: datetime, as_of: datetime) -> float:
    return (deadline - as_of).total_seconds() / SECONDS_PER_DAY


# ---------------------------------------------------------------------------
# Financial
# ---------------------------------------------------------------------------

def evaluate_deal_size(deal_value: float) -> ScoringFactor:
    """Sweet-spot curve: mid-market deals score best, small deals worst."""
    if SWEET_SPOT_MIN <= deal_value <= SWEET_SPOT_MAX:
        score, impact = 0.8, Impact.POSITIVE
        verdict = "is optimal for mid-market PE"
    elif deal_value > SWEET_SPOT_MAX:
        score, impact = 0.65, Impact.NEUTRAL
        verdict = "is manageable but requires careful resource allocation"
    else:
        score, impact = 0.4, Impact.NEGATIVE
        verdict = "may be too small for efficient execution"

    return ScoringFactor(
        name="Deal Size Optimization",
        value=score,
        impact=impact,
        description=f"Deal size of ${deal_value / 1_000_000:.1f}M {verdict}",
        weight=0.3,
    )


def evaluate_valuation_multiple(
    deal_value: float,
    sector: Sector,
    tables: DealScoringTables = DEFAULT_TABLES,
) -> ScoringFactor:
    """Implied EV/EBITDA multiple relative to the sector average."""
    avg_multiple = tables.sector(sector).avg_multiple
    if avg_multiple is None:
        return ScoringFactor(
            name="Sector Multiple Analysis",
            value=0.5,
            impact=Impact.NEUTRAL,
            description="Sector benchmarks not available",
            weight=0.25,
        )

    if deal_value <= 0:
        return ScoringFactor(
            name="Valuation Multiple",
            value=0.6,
            impact=Impact.NEUTRAL,
            description=f"Implied multiple unavailable without a deal value (sector average {avg_multiple:g}x)",
            weight=0.25,
        )

    # deal_value / (deal_value × margin), independent of deal size
    implied_multiple = 1 / EBITDA_MARGIN
    relative = implied_multiple / avg_multiple

    if relative < 0.9:
        score, impact = 0.85, Impact.POSITIVE
    elif relative > 1.2:
        score, impact = 0.3, Impact.NEGATIVE
    else:
        score, impact = 0.6, Impact.NEUTRAL

    return ScoringFactor(
        name="Valuation Multiple",
        value=score,
        impact=impact,
        description=f"Implied multiple of {implied_multiple:.1f}x vs sector average of {avg_multiple:g}x",
        weight=0.25,
    )


def estimate_irr(
    project: ProjectInput,
    tables: DealScoringTables = DEFAULT_TABLES,
) -> float:
    """Sector target IRR, shifted by risk rating and by progress certainty."""
    expected = tables.target_irr(project.sector) + tables.risk_irr_offset(project.risk_rating)
    # more progress, more certainty, lower required return (+/-2 points)
    expected -= (project.progress - 50) / 50 * 2
    return expected


def evaluate_expected_irr(
    project: ProjectInput,
    tables: DealScoringTables = DEFAULT_TABLES,
) -> ScoringFactor:
    target = tables.target_irr(project.sector)
    expected = estimate_irr(project, tables)

    if expected > 25:
        score, impact = 0.9, Impact.POSITIVE
    elif expected > 18:
        score, impact = 0.7, Impact.POSITIVE
    elif expected < 12:
        score, impact = 0.2, Impact.NEGATIVE
    else:
        score, impact = 0.5, Impact.NEUTRAL

    return ScoringFactor(
        name="Expected IRR",
        value=score,
        impact=impact,
        description=f"Projected IRR of {expected:.1f}% vs sector target of {target:g}%",
        weight=0.3,
    )


def evaluate_confidence(confidence_score: float) -> ScoringFactor:
    """Input confidence passed straight through as the factor value."""
    return ScoringFactor(
        name="Analysis Confidence",
        value=confidence_score,
        impact=_impact(confidence_score, 0.8, 0.6),
        description=f"{confidence_score * 100:.0f}% confidence in analysis accuracy",
        weight=0.15,
    )


# ---------------------------------------------------------------------------
# Operational
# ---------------------------------------------------------------------------

def expected_progress(project: ProjectInput, tables: DealScoringTables = DEFAULT_TABLES) -> float:
    """Progress (0-100) expected at this stage; 50 when the stage has no norm."""
    expectation = tables.stage(project.stage).progress_expectation
    return expectation * 100 if expectation else 50.0


def evaluate_progress(
    project: ProjectInput,
    tables: DealScoringTables = DEFAULT_TABLES,
) -> ScoringFactor:
    expected = expected_progress(project, tables)
    ratio = project.progress / expected
    score = min(ratio, 1.2) / 1.2          # capped at 120% of expectation

    return ScoringFactor(
        name="Progress Efficiency",
        value=score,
        impact=_impact(score, 0.8, 0.6),
        description=(
            f"{project.progress:g}% progress vs {expected:.0f}% expected "
            f"for {project.stage.label} stage"
        ),
        weight=0.4,
    )


def optimal_team_size(project: ProjectInput) -> int:
    """Base team of 3, grown for large deals, specialist sectors and high risk."""
    deal_value = project.deal_value or STAFFING_DEFAULT_DEAL_VALUE
    optimal = 3
    if deal_value > 75_000_000:
        optimal += 2
    if project.sector is Sector.HEALTHCARE:
        optimal += 1
    if project.risk_rating is RiskRating.HIGH:
        optimal += 1
    return optimal


def evaluate_team(project: ProjectInput) -> ScoringFactor:
    optimal = optimal_team_size(project)
    efficiency = min(project.team_size / optimal, 1.5) / 1.5

    return ScoringFactor(
        name="Team Optimization",
        value=efficiency,
        impact=_impact(efficiency, 0.8, 0.6),
        description=f"Team of {project.team_size} vs optimal {optimal} for this deal complexity",
        weight=0.3,
    )


def evaluate_work_products(work_products: int) -> ScoringFactor:
    score = min(work_products / WORK_PRODUCT_TARGET, 1.2) / 1.2
    impact = _impact(score, 0.7, 0.4)
    depth = _pick(impact, "thorough", "limited", "adequate")

    return ScoringFactor(
        name="Work Product Quality",
        value=score,
        impact=impact,
        description=f"{work_products} work products indicating {depth} analysis depth",
        weight=0.2,
    )


def evaluate_timeline(project: ProjectInput, as_of: datetime) -> ScoringFactor:
    """Daily burn rate needed to finish the remaining work before the deadline."""
    if project.deadline is None:
        return ScoringFactor(
            name="Timeline Management",
            value=0.6,
            impact=Impact.NEUTRAL,
            description="No deadline specified",
            weight=0.1,
        )

    days = _days_to_deadline(project.deadline, as_of)
    remaining = 1 - project.progress / 100
    work_per_day = remaining / max(days, 1)

    if work_per_day < 0.02:
        score, impact = 0.9, Impact.POSITIVE
    elif work_per_day > 0.05:
        score, impact = 0.3, Impact.NEGATIVE
    else:
        score, impact = 0.5, Impact.NEUTRAL

    return ScoringFactor(
        name="Timeline Adherence",
        value=score,
        impact=impact,
        description=f"{days:.0f} days remaining, {remaining * 100:.0f}% work left",
        weight=0.1,
    )


# ---------------------------------------------------------------------------
# Strategic
# ---------------------------------------------------------------------------

def evaluate_sector_fit(sector: Sector, tables: DealScoringTables = DEFAULT_TABLES) -> ScoringFactor:
    score = tables.sector(sector).strategic_fit
    impact = _impact(score, 0.75, 0.55)
    strength = _pick(impact, "strongly", "weakly", "moderately")

    return ScoringFactor(
        name="Sector Strategic Fit",
        value=score,
        impact=impact,
        description=f"{sector.label} aligns {strength} with portfolio strategy",
        weight=0.4,
    )


def evaluate_geographic_fit(project: ProjectInput, tables: DealScoringTables = DEFAULT_TABLES) -> ScoringFactor:
    score = tables.geography(project.geography).strategic_fit
    impact = _impact(score, 0.75, 0.5)
    focus = _pick(impact, "core", "non-core", "secondary")

    return ScoringFactor(
        name="Geographic Fit",
        value=score,
        impact=impact,
        description=f"{project.geography.label} matches {focus} geographic focus",
        weight=0.3,
    )


def evaluate_stage_alignment(project: ProjectInput, tables: DealScoringTables = DEFAULT_TABLES) -> ScoringFactor:
    score = tables.stage(project.stage).alignment
    impact = _impact(score, 0.8, 0.5)
    fit = _pick(impact, "strongly matches", "misaligns with", "fits")

    return ScoringFactor(
        name="Deal Stage Alignment",
        value=score,
        impact=impact,
        description=f"{project.stage.label} stage {fit} investment criteria",
        weight=0.3,
    )


def evaluate_diversification(project: ProjectInput, tables: DealScoringTables = DEFAULT_TABLES) -> ScoringFactor:
    """Baseline 0.6, +0.1 for a high-growth sector, +0.1 for a diversifying region."""
    score = 0.6
    if tables.sector(project.sector).high_growth:
        score += 0.1
    if tables.geography(project.geography).diversifying:
        score += 0.1

    strong = score > 0.7
    return ScoringFactor(
        name="Portfolio Diversification",
        value=min(score, 1.0),
        impact=Impact.POSITIVE if strong else Impact.NEUTRAL,
        description=f"Deal adds {'strong' if strong else 'moderate'} diversification benefit",
        weight=0.3,
    )


# ---------------------------------------------------------------------------
# Risk
# ---------------------------------------------------------------------------

def evaluate_risk_rating(rating: RiskRating, tables: DealScoringTables = DEFAULT_TABLES) -> ScoringFactor:
    score = tables.risk_score(rating)
    impact = _impact(score, 0.8, 0.5)
    level = _pick(impact, "low", "high", "moderate")

    return ScoringFactor(
        name="Base Risk Assessment",
        value=score,
        impact=impact,
        description=f"{rating.label} risk rating indicates {level} investment risk",
        weight=0.4,
    )


def evaluate_sector_risk(sector: Sector, tables: DealScoringTables = DEFAULT_TABLES) -> ScoringFactor:
    score = tables.sector(sector).risk_score
    impact = _impact(score, 0.75, 0.5)
    level = _pick(impact, "low", "high", "moderate")

    return ScoringFactor(
        name="Sector Risk Profile",
        value=score,
        impact=impact,
        description=f"{sector.label} sector has {level} inherent risk",
        weight=0.3,
    )


def evaluate_geographic_risk(project: ProjectInput, tables: DealScoringTables = DEFAULT_TABLES) -> ScoringFactor:
    score = tables.geography(project.geography).risk_score
    impact = _impact(score, 0.75, 0.5)
    level = _pick(impact, "low", "high", "moderate")

    return ScoringFactor(
        name="Geographic Risk",
        value=score,
        impact=impact,
        description=f"{project.geography.label} has {level} political/economic risk",
        weight=0.2,
    )


def expected_execution_team(deal_value: Optional[float]) -> int:
    deal_value = deal_value or STAFFING_DEFAULT_DEAL_VALUE
    if deal_value > 100_000_000:
        return 6
    if deal_value > 50_000_000:
        return 4
    return 3


def evaluate_execution_risk(project: ProjectInput, as_of: datetime) -> ScoringFactor:
    """Deadline pressure against progress, then team adequacy; clamped to [0, 1]."""
    score = 0.7

    if project.deadline is not None:
        days = _days_to_deadline(project.deadline, as_of)
        progress_rate = project.progress / 100
        if progress_rate > 0.8 and days > 0:
            score += 0.2
        elif progress_rate < 0.3 and days < 30:
            score -= 0.3

    expected_team = expected_execution_team(project.deal_value)
    if project.team_size >= expected_team:
        score += 0.1
    elif project.team_size < expected_team * 0.7:
        score -= 0.2

    score = max(0.0, min(1.0, score))
    impact = _impact(score, 0.8, 0.5)
    level = _pick(impact, "Low", "High", "Moderate")

    return ScoringFactor(
        name="Execution Risk",
        value=score,
        impact=impact,
        description=f"{level} execution risk based on progress and resources",
        weight=0.3,
    )
