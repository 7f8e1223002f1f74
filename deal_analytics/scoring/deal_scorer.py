"""
Deal Scorer
deal_analytics/scoring/deal_scorer.py

Orchestrates the four scoring categories into a DealScore.

Formula:
    category_c     = round(100 × Σ(value × weight) / Σ(weight))
    overall        = round(Σ_c category_c × W_c)
    risk_adjusted  = round(overall × RiskMultiplier(rating))   clamped to [0, 100]

Default category weights (sum = 1.0):
    financial    0.35
    operational  0.25
    strategic    0.20
    risk         0.20

Risk multipliers:
    low 1.05 | medium 1.00 | high 0.90 | critical 0.75

Benchmarks compare the deal against a caller-supplied peer set using the
linear "quick score" proxy, not the full four-category algorithm.
"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Union

import structlog

from deal_analytics.models.deal_score import (
    DealBenchmarks,
    DealScore,
    DealScoreCategories,
    DealScoreCategory,
    OpportunityScore,
)
from deal_analytics.models.enumerations import Category, Impact, RiskRating
from deal_analytics.models.project import ProjectInput
from deal_analytics.scoring import factor_evaluators as fe
from deal_analytics.scoring.category_aggregator import CategoryAggregator
from deal_analytics.scoring.recommendations import generate_recommendations, recommendation_for
from deal_analytics.scoring.scoring_config import ScoringConfig
from deal_analytics.scoring.tables import UNKNOWN_SECTOR_AVERAGE
from deal_analytics.scoring.utils import clamp, exact_decimal, mean, round_half_up

logger = structlog.get_logger(__name__)

ProjectLike = Union[ProjectInput, Mapping[str, Any]]

# Quick score: linear proxy used only for peer benchmarks
QUICK_BASE = Decimal("50")
QUICK_RISK_BONUS = {RiskRating.LOW: Decimal("20"), RiskRating.HIGH: Decimal("-15")}
QUICK_PROGRESS_SLOPE = Decimal("0.4")
QUICK_CONFIDENCE_SCALE = Decimal("20")
QUICK_SECTOR_BONUS = Decimal("10")

# Opportunity IRR uses its own risk offsets and bounds
OPPORTUNITY_IRR_OFFSETS = {RiskRating.LOW: -2.0, RiskRating.HIGH: 3.0}
OPPORTUNITY_IRR_MIN = 8.0
OPPORTUNITY_IRR_MAX = 35.0

CONFIDENCE_MIN = 0.5
CONFIDENCE_MAX = 0.99
FULL_TEAM = 6

MAX_KEY_FACTORS = 4
MAX_RISK_FACTORS = 3


def _as_project(project: ProjectLike) -> ProjectInput:
    if isinstance(project, ProjectInput):
        return project
    return ProjectInput.model_validate(project)


def _same_project(peer: ProjectInput, project: ProjectInput) -> bool:
    if peer is project:
        return True
    return bool(project.project_id) and peer.project_id == project.project_id


def _as_utc(as_of: Optional[datetime]) -> datetime:
    if as_of is None:
        return datetime.now(timezone.utc)
    if as_of.tzinfo is None:
        return as_of.replace(tzinfo=timezone.utc)
    return as_of


class DealScorer:
    """Multi-factor deal scorer driven by an immutable ScoringConfig."""

    def __init__(self, config: Optional[ScoringConfig] = None):
        self.config = config or ScoringConfig.from_settings()
        self.tables = self.config.tables
        self._aggregator = CategoryAggregator()

    # ------------------------------------------------------------------
    # Full score
    # ------------------------------------------------------------------

    def score_deal(
        self,
        project: ProjectLike,
        peers: Iterable[ProjectLike] = (),
        as_of: Optional[datetime] = None,
    ) -> DealScore:
        """
        Score one project.

        Args:
            project: ProjectInput, or a mapping accepted by ProjectInput.
            peers: Other known projects, used for the portfolio and stage
                   averages. A peer with the scored project's id is skipped.
            as_of: Reference time for deadline factors and last_updated.
                   Defaults to now (UTC); naive values are taken as UTC.

        Returns:
            DealScore with categories in financial, operational, strategic,
            risk order.

        Raises:
            DegenerateCategoryError: a category's factors carry no weight.
        """
        project = _as_project(project)
        as_of = _as_utc(as_of)

        categories = DealScoreCategories(
            financial=self.financial_category(project),
            operational=self.operational_category(project, as_of),
            strategic=self.strategic_category(project),
            risk=self.risk_category(project, as_of),
        )

        overall = self.overall_score(categories)
        risk_adjusted = self.apply_risk_adjustment(overall, project.risk_rating)
        benchmarks = self.calculate_benchmarks(project, peers)
        recommendations = generate_recommendations(project, overall, categories)
        confidence = self.calculate_confidence(project)

        logger.info(
            "deal_scored",
            project_id=project.project_id,
            financial=categories.financial.score,
            operational=categories.operational.score,
            strategic=categories.strategic.score,
            risk=categories.risk.score,
            overall_score=overall,
            risk_adjusted_score=risk_adjusted,
            risk_rating=project.risk_rating.value,
            confidence=confidence,
        )

        return DealScore(
            project_id=project.project_id,
            project_name=project.project_name,
            overall_score=overall,
            risk_adjusted_score=risk_adjusted,
            categories=categories,
            benchmarks=benchmarks,
            recommendations=recommendations,
            confidence=confidence,
            last_updated=as_of,
        )

    # ------------------------------------------------------------------
    # Categories
    # ------------------------------------------------------------------

    def _aggregate(self, category: Category, factors) -> DealScoreCategory:
        return self._aggregator.aggregate(
            category,
            factors,
            weight=self.config.weight(category),
            confidence=self.config.confidence(category),
        )

    def financial_category(self, project: ProjectInput) -> DealScoreCategory:
        deal_value = project.deal_value or 0
        return self._aggregate(Category.FINANCIAL, [
            fe.evaluate_deal_size(deal_value),
            fe.evaluate_valuation_multiple(deal_value, project.sector, self.tables),
            fe.evaluate_expected_irr(project, self.tables),
            fe.evaluate_confidence(project.effective_confidence),
        ])

    def operational_category(self, project: ProjectInput, as_of: datetime) -> DealScoreCategory:
        return self._aggregate(Category.OPERATIONAL, [
            fe.evaluate_progress(project, self.tables),
            fe.evaluate_team(project),
            fe.evaluate_work_products(project.work_products),
            fe.evaluate_timeline(project, as_of),
        ])

    def strategic_category(self, project: ProjectInput) -> DealScoreCategory:
        return self._aggregate(Category.STRATEGIC, [
            fe.evaluate_sector_fit(project.sector, self.tables),
            fe.evaluate_geographic_fit(project, self.tables),
            fe.evaluate_stage_alignment(project, self.tables),
            fe.evaluate_diversification(project, self.tables),
        ])

    def risk_category(self, project: ProjectInput, as_of: datetime) -> DealScoreCategory:
        return self._aggregate(Category.RISK, [
            fe.evaluate_risk_rating(project.risk_rating, self.tables),
            fe.evaluate_sector_risk(project.sector, self.tables),
            fe.evaluate_geographic_risk(project, self.tables),
            fe.evaluate_execution_risk(project, as_of),
        ])

    # ------------------------------------------------------------------
    # Composite scores
    # ------------------------------------------------------------------

    def overall_score(self, categories: DealScoreCategories) -> int:
        """round(Σ score × weight) over the four categories."""
        total = sum(
            (Decimal(category.score) * exact_decimal(category.weight) for _, category in categories.items()),
            Decimal("0"),
        )
        return round_half_up(clamp(total))

    def apply_risk_adjustment(self, overall_score: int, rating: RiskRating) -> int:
        multiplier = exact_decimal(self.config.risk_multiplier(rating))
        return round_half_up(clamp(Decimal(overall_score) * multiplier))

    def calculate_confidence(self, project: ProjectInput) -> float:
        """Progress and staffing raise confidence; averaged with the input score."""
        confidence = 0.7
        confidence += (project.progress / 100) * 0.2
        confidence += min(project.team_size / FULL_TEAM, 1) * 0.1

        if project.confidence_score:
            confidence = (confidence + project.confidence_score) / 2

        return min(CONFIDENCE_MAX, max(CONFIDENCE_MIN, confidence))

    # ------------------------------------------------------------------
    # Benchmarks
    # ------------------------------------------------------------------

    def quick_score(self, project: ProjectLike) -> float:
        """
        Cheap linear proxy score in [0, 100].

        50 base, +20 low risk / −15 high risk, +0.4 per progress point over
        50, +20 × confidence, +10 for high-growth sectors.
        """
        project = _as_project(project)
        score = QUICK_BASE
        score += QUICK_RISK_BONUS.get(project.risk_rating, Decimal("0"))
        score += (exact_decimal(project.progress) - 50) * QUICK_PROGRESS_SLOPE
        score += exact_decimal(project.effective_confidence) * QUICK_CONFIDENCE_SCALE
        if self.tables.sector(project.sector).high_growth:
            score += QUICK_SECTOR_BONUS
        return float(clamp(score))

    def calculate_benchmarks(
        self,
        project: ProjectInput,
        peers: Iterable[ProjectLike] = (),
    ) -> DealBenchmarks:
        others = [p for p in map(_as_project, peers) if not _same_project(p, project)]

        sector_irr = self.tables.sector(project.sector).avg_irr
        sector_average = UNKNOWN_SECTOR_AVERAGE if sector_irr is None else sector_irr

        if others:
            portfolio_average = mean(self.quick_score(p) for p in others)
        else:
            portfolio_average = self.quick_score(project)

        stage_peers = [p for p in others if p.stage is project.stage]
        if stage_peers:
            stage_average = mean(self.quick_score(p) for p in stage_peers)
        else:
            stage_average = portfolio_average

        return DealBenchmarks(
            sector_average=sector_average,
            portfolio_average=portfolio_average,
            stage_average=stage_average,
        )

    # ------------------------------------------------------------------
    # Opportunity pipeline
    # ------------------------------------------------------------------

    def expected_irr(self, project: ProjectLike) -> float:
        """Sector IRR shifted by risk and progress, bounded to [8, 35]."""
        project = _as_project(project)
        irr = self.tables.target_irr(project.sector)
        irr += OPPORTUNITY_IRR_OFFSETS.get(project.risk_rating, 0.0)
        irr -= (project.progress - 50) / 50 * 2
        return max(OPPORTUNITY_IRR_MIN, min(OPPORTUNITY_IRR_MAX, irr))

    def score_opportunity(
        self,
        project: ProjectLike,
        peers: Iterable[ProjectLike] = (),
        as_of: Optional[datetime] = None,
    ) -> OpportunityScore:
        project = _as_project(project)
        deal_score = self.score_deal(project, peers, as_of)
        categories = deal_score.categories

        return OpportunityScore(
            id=project.project_id,
            name=project.project_name,
            description=describe_opportunity(project),
            overall_score=deal_score.overall_score,
            financial_score=categories.financial.score,
            market_score=categories.strategic.score,
            risk_score=categories.risk.score,
            strategic_fit=categories.strategic.score,
            expected_irr=self.expected_irr(project),
            risk_adjusted_return=deal_score.risk_adjusted_score,
            confidence=deal_score.confidence,
            recommendation=recommendation_for(deal_score.risk_adjusted_score),
            key_factors=extract_key_factors(deal_score),
            risk_factors=extract_risk_factors(deal_score),
        )

    def score_all_opportunities(
        self,
        projects: Sequence[ProjectLike],
        as_of: Optional[datetime] = None,
    ) -> List[OpportunityScore]:
        """Score each project with the rest of the list as its peers."""
        projects = [_as_project(p) for p in projects]
        as_of = _as_utc(as_of)
        return [self.score_opportunity(p, projects, as_of) for p in projects]


def describe_opportunity(project: ProjectInput) -> str:
    description = f"{project.sector.label} {project.stage.label} opportunity"
    if project.deal_value:
        millions = round_half_up(exact_decimal(project.deal_value) / Decimal("1000000"))
        description += f" valued at ${millions}M"
    description += f" based in {project.geography.label}"
    description += (
        f". Current analysis shows {project.progress:g}% completion with "
        f"{project.team_size} team members conducting comprehensive due diligence."
    )
    return description


def extract_key_factors(deal_score: DealScore) -> List[str]:
    """Best positive factor per category, in category order; at most 4."""
    factors = []
    for _, category in deal_score.categories.items():
        positive = [f for f in category.factors if f.impact is Impact.POSITIVE]
        if positive:
            factors.append(max(positive, key=lambda f: f.value).description)
    return factors[:MAX_KEY_FACTORS]


def extract_risk_factors(deal_score: DealScore) -> List[str]:
    """Worst negative factor per category, in category order; at most 3."""
    factors = []
    for _, category in deal_score.categories.items():
        negative = [f for f in category.factors if f.impact is Impact.NEGATIVE]
        if negative:
            factors.append(min(negative, key=lambda f: f.value).description)
    return factors[:MAX_RISK_FACTORS]
