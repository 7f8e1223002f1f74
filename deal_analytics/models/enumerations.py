from enum import Enum
from typing import Optional


class _ParsableEnum(str, Enum):
    """
    str-Enum with an explicit total parse.

    Missing values (None / empty) map to the class DEFAULT; values that are
    not recognised map to the class FALLBACK. Matching is case-insensitive
    and accepts member names as well as values.
    """

    @classmethod
    def parse(cls, value: Optional[str]):
        if isinstance(value, cls):
            return value
        if value is None or (isinstance(value, str) and not value.strip()):
            return cls.default()
        key = str(value).strip().lower().replace("-", " ").replace("_", " ")
        for member in cls:
            if key in (member.value.lower(), member.name.lower().replace("_", " ")):
                return member
        return cls.fallback()

    @classmethod
    def default(cls):
        """Member for a missing value; every subclass overrides this."""
        raise NotImplementedError(f"{cls.__name__} does not define a default member")

    @classmethod
    def fallback(cls):
        return cls.default()

    @property
    def label(self) -> str:
        return self.value


class Sector(_ParsableEnum):
    TECHNOLOGY = "Technology"
    HEALTHCARE = "Healthcare"
    RETAIL = "Retail"
    MANUFACTURING = "Manufacturing"
    FINANCIAL_SERVICES = "Financial Services"
    UNKNOWN = "Unknown"

    @classmethod
    def default(cls):
        return cls.TECHNOLOGY

    @classmethod
    def fallback(cls):
        return cls.UNKNOWN


class Stage(_ParsableEnum):
    GROWTH = "growth"
    BUYOUT = "buyout"
    MATURE = "mature"
    VENTURE = "venture"
    DISTRESSED = "distressed"
    UNKNOWN = "unknown"

    @classmethod
    def default(cls):
        return cls.GROWTH

    @classmethod
    def fallback(cls):
        return cls.UNKNOWN


class Geography(_ParsableEnum):
    NORTH_AMERICA = "North America"
    EUROPE = "Europe"
    ASIA_PACIFIC = "Asia Pacific"
    LATIN_AMERICA = "Latin America"
    AFRICA = "Africa"
    MIDDLE_EAST = "Middle East"
    UNKNOWN = "Unknown"

    @classmethod
    def default(cls):
        return cls.NORTH_AMERICA

    @classmethod
    def fallback(cls):
        return cls.UNKNOWN


class RiskRating(_ParsableEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

    @classmethod
    def default(cls):
        return cls.MEDIUM          # unknown ratings also land here


class Impact(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


class Category(str, Enum):
    """The 4 deal score categories, in output order."""
    FINANCIAL = "financial"
    OPERATIONAL = "operational"
    STRATEGIC = "strategic"
    RISK = "risk"


class Recommendation(str, Enum):
    STRONG_BUY = "strong_buy"
    BUY = "buy"
    HOLD = "hold"
    PASS = "pass"


class Trend(str, Enum):
    IMPROVING = "improving"
    DECLINING = "declining"
    STABLE = "stable"


class BenchmarkTarget(str, Enum):
    PEER_MEDIAN = "peer-median"
    TOP_QUARTILE = "top-quartile"
    TOP_DECILE = "top-decile"


class Grade(str, Enum):
    A_PLUS = "A+"
    A = "A"
    B_PLUS = "B+"
    B = "B"
    C_PLUS = "C+"
    C = "C"
    D = "D"


class InsightType(str, Enum):
    STRENGTH = "strength"
    OPPORTUNITY = "opportunity"
    RISK = "risk"
    TREND = "trend"


class InsightImpact(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
