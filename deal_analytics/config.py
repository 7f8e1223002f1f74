"""Application configuration with comprehensive validation."""
from typing import Literal
from functools import lru_cache
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine settings: logging plus the scoring and benchmarking knobs."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "PE Deal Analytics"
    APP_VERSION: str = "1.0.0"
    APP_ENV: Literal["development", "staging", "production"] = "development"
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    LOG_FORMAT: Literal["json", "console"] = "json"

    # Category Weights
    W_FINANCIAL: float = Field(default=0.35, gt=0.0, le=1.0)
    W_OPERATIONAL: float = Field(default=0.25, gt=0.0, le=1.0)
    W_STRATEGIC: float = Field(default=0.20, gt=0.0, le=1.0)
    W_RISK: float = Field(default=0.20, gt=0.0, le=1.0)

    # Risk Multipliers
    RISK_MULT_LOW: float = Field(default=1.05, ge=1.0, le=1.5)
    RISK_MULT_MEDIUM: float = Field(default=1.00, ge=0.5, le=1.5)
    RISK_MULT_HIGH: float = Field(default=0.90, ge=0.5, le=1.0)
    RISK_MULT_CRITICAL: float = Field(default=0.75, ge=0.0, le=1.0)

    # Percentile Bands
    PERCENTILE_FLOOR_RATIO: float = Field(default=0.7, gt=0.0, lt=1.0)
    PERCENTILE_CEILING_RATIO: float = Field(default=1.5, gt=1.0, le=5.0)

    # Fund Ranking
    PEER_POPULATION: int = Field(default=487, ge=1)
    RANK_SCALE: int = Field(default=5, ge=1)

    @model_validator(mode="after")
    def validate_category_weights(self):
        """Validate category weights sum to 1.0."""
        total = sum(self.category_weights)
        if abs(total - 1.0) > 0.001:
            raise ValueError(f"Category weights must sum to 1.0, got {total}")
        return self

    @model_validator(mode="after")
    def validate_risk_multipliers(self):
        """Riskier ratings must never be rewarded more than safer ones."""
        ordered = [
            self.RISK_MULT_LOW, self.RISK_MULT_MEDIUM,
            self.RISK_MULT_HIGH, self.RISK_MULT_CRITICAL,
        ]
        if any(a <= b for a, b in zip(ordered, ordered[1:])):
            raise ValueError(
                f"Risk multipliers must strictly decrease low > medium > high > critical, got {ordered}"
            )
        return self

    @property
    def category_weights(self) -> list[float]:
        """Get category weights as list (financial, operational, strategic, risk)."""
        return [self.W_FINANCIAL, self.W_OPERATIONAL, self.W_STRATEGIC, self.W_RISK]


@lru_cache
def get_settings() -> Settings:
    return Settings()
