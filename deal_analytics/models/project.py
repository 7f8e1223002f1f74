from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from datetime import datetime, timezone
from typing import Optional

from deal_analytics.models.enumerations import Geography, RiskRating, Sector, Stage


class ProjectInput(BaseModel):
    """
    Raw attribute record for one deal / workspace project.

    Accepts both snake_case and the camelCase keys emitted by the workspace
    layer (dealValue, riskRating, teamSize, workProducts, confidenceScore).
    Categorical attributes are resolved through their enum's total parse, so
    a missing or unrecognised value never aborts scoring.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    project_id: str = Field(
        default="",
        validation_alias=AliasChoices("project_id", "projectId", "id"),
        description="Unique project identifier, empty when the caller has none",
    )

    project_name: str = Field(
        default="",
        validation_alias=AliasChoices("project_name", "projectName", "name"),
        description="Display name of the project",
    )

    deal_value: Optional[float] = Field(
        default=None,
        ge=0,
        validation_alias=AliasChoices("deal_value", "dealValue"),
        description="Deal value in currency units",
    )

    sector: Sector = Field(default=Sector.TECHNOLOGY)
    stage: Stage = Field(default=Stage.GROWTH)
    geography: Geography = Field(default=Geography.NORTH_AMERICA)

    risk_rating: RiskRating = Field(
        default=RiskRating.MEDIUM,
        validation_alias=AliasChoices("risk_rating", "riskRating"),
    )

    progress: float = Field(
        default=0.0,
        ge=0,
        le=100,
        description="Completion percentage (0-100)",
    )

    team_size: int = Field(
        default=0,
        ge=0,
        validation_alias=AliasChoices("team_size", "teamSize"),
    )

    work_products: int = Field(
        default=0,
        ge=0,
        validation_alias=AliasChoices("work_products", "workProducts"),
        description="Number of work products produced for the deal",
    )

    deadline: Optional[datetime] = Field(default=None)

    confidence_score: Optional[float] = Field(
        default=None,
        ge=0,
        le=1,
        validation_alias=AliasChoices("confidence_score", "confidenceScore"),
        description="Analyst confidence in the underlying data (0-1)",
    )

    @field_validator("sector", mode="before")
    @classmethod
    def parse_sector(cls, v):
        return Sector.parse(v)

    @field_validator("stage", mode="before")
    @classmethod
    def parse_stage(cls, v):
        return Stage.parse(v)

    @field_validator("geography", mode="before")
    @classmethod
    def parse_geography(cls, v):
        return Geography.parse(v)

    @field_validator("risk_rating", mode="before")
    @classmethod
    def parse_risk_rating(cls, v):
        return RiskRating.parse(v)

    @field_validator("deadline")
    @classmethod
    def deadline_as_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        """Naive deadlines are taken to be UTC."""
        if v is not None and v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v

    @property
    def effective_confidence(self) -> float:
        """Confidence score with the 0.5 default applied (0 counts as absent)."""
        return self.confidence_score or 0.5
