"""
Industry Reference Data
deal_analytics/benchmarking/reference_data.py

Static median / top-quartile / top-decile reference points for the seven
fund-management modules, three metrics each. Lower-is-better metrics
(durations, cost ratios) list their reference points in descending order.

  Module                 | Input key             | Metrics
  ───────────────────────┼───────────────────────┼──────────────────────────────────────────
  Portfolio Management   | portfolio             | irr, moic, dpi
  Due Diligence          | due_diligence         | dd_duration*, dd_accuracy, risk_identification
  Legal Management       | legal                 | compliance_score, legal_costs*, document_turnaround*
  Deal Screening         | deal_screening        | screening_accuracy, time_to_deal*, deal_conversion
  Fund Operations        | operations            | operational_efficiency, cost_ratio*, data_accuracy
  Investment Committee   | investment_committee  | decision_speed*, decision_accuracy, meeting_efficiency
  Market Intelligence    | market_intelligence   | forecast_accuracy, data_timeliness, market_coverage

  * lower is better
"""

from dataclasses import dataclass
from typing import Tuple

from deal_analytics.models.enumerations import BenchmarkTarget, Trend


@dataclass(frozen=True)
class MetricReference:
    median: float
    top_quartile: float
    top_decile: float


@dataclass(frozen=True)
class MetricDefinition:
    key: str                        # key in the fund's metric mapping
    label: str                      # display name on BenchmarkData.metric
    reference: MetricReference
    default_value: float            # used when the fund omits the metric
    lower_is_better: bool = False
    trend: Trend = Trend.STABLE
    benchmark: BenchmarkTarget = BenchmarkTarget.TOP_QUARTILE


@dataclass(frozen=True)
class ModuleDefinition:
    key: str                        # FundBenchmarkInput field
    field: str                      # IndustryBenchmarks field
    name: str
    metrics: Tuple[MetricDefinition, ...]
    similar_to: Tuple[str, ...]
    strengths: Tuple[str, ...]
    improvement_areas: Tuple[str, ...]
    lagging_behind: Tuple[str, ...]


def _ref(median: float, top_quartile: float, top_decile: float) -> MetricReference:
    return MetricReference(median, top_quartile, top_decile)


PORTFOLIO_MANAGEMENT = ModuleDefinition(
    key="portfolio",
    field="portfolio_management",
    name="Portfolio Management",
    metrics=(
        MetricDefinition("irr", "Internal Rate of Return (IRR)", _ref(15.2, 19.8, 24.5), 17.4,
                         trend=Trend.IMPROVING),
        MetricDefinition("moic", "Multiple of Invested Capital (MOIC)", _ref(2.1, 2.8, 3.5), 2.3),
        MetricDefinition("dpi", "Distributions to Paid-in (DPI)", _ref(0.42, 0.65, 0.85), 0.58,
                         trend=Trend.IMPROVING),
    ),
    similar_to=("Apollo Global", "Blackstone", "KKR"),
    strengths=("Strong IRR performance", "Excellent portfolio returns"),
    improvement_areas=("Portfolio optimization", "Exit timing"),
    lagging_behind=("IRR optimization", "Value creation"),
)

DUE_DILIGENCE = ModuleDefinition(
    key="due_diligence",
    field="due_diligence",
    name="Due Diligence",
    metrics=(
        MetricDefinition("dd_duration", "Due Diligence Duration (Days)", _ref(95, 75, 60), 78,
                         lower_is_better=True, trend=Trend.IMPROVING),
        MetricDefinition("dd_accuracy", "DD Accuracy Score", _ref(0.78, 0.88, 0.95), 0.86),
        MetricDefinition("risk_identification", "Risk Identification Rate", _ref(0.72, 0.85, 0.94), 0.89,
                         trend=Trend.IMPROVING),
    ),
    similar_to=("Carlyle Group", "TPG Capital", "Warburg Pincus"),
    strengths=("Efficient DD process", "Strong risk identification"),
    improvement_areas=("Speed optimization", "Accuracy improvement"),
    lagging_behind=("Process efficiency", "Technology adoption"),
)

LEGAL_MANAGEMENT = ModuleDefinition(
    key="legal",
    field="legal_management",
    name="Legal Management",
    metrics=(
        MetricDefinition("compliance_score", "Compliance Score", _ref(88, 95, 98), 96),
        MetricDefinition("legal_costs", "Legal Cost Efficiency (% AUM)", _ref(0.045, 0.032, 0.025), 0.028,
                         lower_is_better=True, trend=Trend.IMPROVING),
        MetricDefinition("document_turnaround", "Document Turnaround (Days)", _ref(12, 8, 5), 7,
                         lower_is_better=True, trend=Trend.IMPROVING),
    ),
    similar_to=("Bain Capital", "General Atlantic", "Silver Lake"),
    strengths=("Excellent compliance", "Cost efficiency"),
    improvement_areas=("Document automation", "Cost optimization"),
    lagging_behind=("Process automation", "Regulatory efficiency"),
)

DEAL_SCREENING = ModuleDefinition(
    key="deal_screening",
    field="deal_screening",
    name="Deal Screening",
    metrics=(
        MetricDefinition("screening_accuracy", "Screening Accuracy", _ref(0.71, 0.84, 0.92), 0.84,
                         trend=Trend.IMPROVING),
        MetricDefinition("time_to_deal", "Time to Deal (Days)", _ref(145, 95, 65), 95,
                         lower_is_better=True, trend=Trend.IMPROVING),
        MetricDefinition("deal_conversion", "Deal Conversion Rate", _ref(0.18, 0.28, 0.38), 0.28),
    ),
    similar_to=("Hellman & Friedman", "Francisco Partners", "Thoma Bravo"),
    strengths=("Strong deal flow", "Quality screening", "Efficient conversion"),
    improvement_areas=("Screening speed", "Deal quality"),
    lagging_behind=("Deal sourcing", "Screening efficiency"),
)

FUND_OPERATIONS = ModuleDefinition(
    key="operations",
    field="fund_operations",
    name="Fund Operations",
    metrics=(
        MetricDefinition("operational_efficiency", "Operational Efficiency", _ref(0.75, 0.87, 0.94), 0.89,
                         trend=Trend.IMPROVING),
        MetricDefinition("cost_ratio", "Cost Ratio (% AUM)", _ref(0.025, 0.018, 0.012), 0.016,
                         lower_is_better=True),
        MetricDefinition("data_accuracy", "Data Accuracy", _ref(0.89, 0.95, 0.98), 0.96),
    ),
    similar_to=("Vista Equity Partners", "Leonard Green", "Advent International"),
    strengths=("Excellent operational efficiency", "Cost leadership"),
    improvement_areas=("Cost optimization", "Process automation"),
    lagging_behind=("Technology adoption", "Operational scaling"),
)

INVESTMENT_COMMITTEE = ModuleDefinition(
    key="investment_committee",
    field="investment_committee",
    name="Investment Committee",
    metrics=(
        MetricDefinition("decision_speed", "Decision Speed (Days)", _ref(28, 18, 12), 18,
                         lower_is_better=True, trend=Trend.IMPROVING),
        MetricDefinition("decision_accuracy", "Decision Accuracy", _ref(0.74, 0.86, 0.93), 0.86),
        MetricDefinition("meeting_efficiency", "Meeting Efficiency", _ref(0.68, 0.82, 0.91), 0.82,
                         trend=Trend.IMPROVING),
    ),
    similar_to=("CVC Capital", "EQT Partners", "Cinven"),
    strengths=("Efficient decisions", "Strong governance", "Fast turnaround"),
    improvement_areas=("Decision speed", "Meeting efficiency"),
    lagging_behind=("Decision processes", "Committee efficiency"),
)

MARKET_INTELLIGENCE = ModuleDefinition(
    key="market_intelligence",
    field="market_intelligence",
    name="Market Intelligence",
    metrics=(
        MetricDefinition("forecast_accuracy", "Forecast Accuracy", _ref(0.68, 0.81, 0.91), 0.81,
                         trend=Trend.IMPROVING),
        MetricDefinition("data_timeliness", "Data Timeliness", _ref(0.74, 0.87, 0.94), 0.87),
        MetricDefinition("market_coverage", "Market Coverage", _ref(0.72, 0.85, 0.93), 0.85,
                         trend=Trend.IMPROVING),
    ),
    similar_to=("Permira", "PAI Partners", "Nordic Capital"),
    strengths=("Good market coverage", "Accurate forecasting", "Timely insights"),
    improvement_areas=("Predictive analytics", "Competitive intelligence"),
    lagging_behind=("Competitive intelligence", "Market timing"),
)

# Canonical module order (matches the IndustryBenchmarks field order)
DEFAULT_MODULE_DEFINITIONS: Tuple[ModuleDefinition, ...] = (
    PORTFOLIO_MANAGEMENT,
    DUE_DILIGENCE,
    LEGAL_MANAGEMENT,
    DEAL_SCREENING,
    FUND_OPERATIONS,
    INVESTMENT_COMMITTEE,
    MARKET_INTELLIGENCE,
)
