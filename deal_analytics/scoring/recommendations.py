"""
scoring/recommendations.py

Rule-based recommendation text for a scored deal.

Output order is fixed:
    1. overall verdict (STRONG BUY / BUY / HOLD / PASS)
    2. category advisories: financial < 60, operational < 60, risk < 60,
       strategic > 80
    3. deal notes: deal value > $100M, high risk rating
"""

from typing import List

from deal_analytics.models.deal_score import DealScoreCategories
from deal_analytics.models.enumerations import Recommendation, RiskRating
from deal_analytics.models.project import ProjectInput

STRONG_BUY_THRESHOLD = 80
BUY_THRESHOLD = 65
HOLD_THRESHOLD = 45

ADVISORY_FLOOR = 60
STRATEGIC_FAST_TRACK = 80
LARGE_DEAL_VALUE = 100_000_000

VERDICTS = {
    Recommendation.STRONG_BUY: "STRONG BUY: Excellent opportunity with strong fundamentals across all categories",
    Recommendation.BUY: "BUY: Solid investment opportunity with good risk-adjusted returns",
    Recommendation.HOLD: "HOLD: Proceed with caution - address key risk factors before committing",
    Recommendation.PASS: "PASS: Significant concerns across multiple evaluation criteria",
}

FINANCIAL_ADVISORY = "Consider renegotiating valuation terms or deal structure"
OPERATIONAL_ADVISORY = "Increase team resources or extend timeline to improve execution probability"
RISK_ADVISORY = "Implement additional risk mitigation measures before proceeding"
STRATEGIC_ADVISORY = "High strategic value - consider fast-tracking through approval process"
LARGE_DEAL_NOTE = "Large deal size - ensure adequate capital allocation and resources"
HIGH_RISK_NOTE = "High risk designation - consider co-investment or structured protection"


def recommendation_for(score: int) -> Recommendation:
    """Map a 0-100 score onto the four-step verdict scale."""
    if score >= STRONG_BUY_THRESHOLD:
        return Recommendation.STRONG_BUY
    if score >= BUY_THRESHOLD:
        return Recommendation.BUY
    if score >= HOLD_THRESHOLD:
        return Recommendation.HOLD
    return Recommendation.PASS


def generate_recommendations(
    project: ProjectInput,
    overall_score: int,
    categories: DealScoreCategories,
) -> List[str]:
    recommendations = [VERDICTS[recommendation_for(overall_score)]]

    if categories.financial.score < ADVISORY_FLOOR:
        recommendations.append(FINANCIAL_ADVISORY)
    if categories.operational.score < ADVISORY_FLOOR:
        recommendations.append(OPERATIONAL_ADVISORY)
    if categories.risk.score < ADVISORY_FLOOR:
        recommendations.append(RISK_ADVISORY)
    if categories.strategic.score > STRATEGIC_FAST_TRACK:
        recommendations.append(STRATEGIC_ADVISORY)

    if (project.deal_value or 0) > LARGE_DEAL_VALUE:
        recommendations.append(LARGE_DEAL_NOTE)
    if project.risk_rating is RiskRating.HIGH:
        recommendations.append(HIGH_RISK_NOTE)

    return recommendations
