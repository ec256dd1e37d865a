"""
Pydantic models for the /drinking-window API.

Vintage plausibility is checked here, at the edge. The estimator itself
accepts any integer vintage.

Example:
POST /drinking-window
{
  "wine": {"vintage": 2015, "grape_variety": "Cabernet Sauvignon", "region": "Bordeaux"},
  "current_year": 2026
}
->
{
  "start": 2018, "peak": 2023, "end": 2035,
  "status": "ready", "status_label": "Ready Now", "status_emoji": "🟢",
  "formatted": "2018 - 2035", "rule": "age_worthy_red", "current_year": 2026
}
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from ..config import Config
from .enums import DrinkingStatus


class WineAttributesIn(BaseModel):
    """Wine fields needed to estimate a drinking window."""
    vintage: int = Field(..., ge=Config.MIN_VINTAGE, description="Harvest year")
    grape_variety: Optional[str] = Field(
        "", max_length=Config.MAX_TEXT_LENGTH,
        description="Grape variety or blend (e.g., 'Cabernet Sauvignon, Merlot')"
    )
    region: Optional[str] = Field(
        "", max_length=Config.MAX_TEXT_LENGTH,
        description="Wine region (e.g., 'Bordeaux', 'Barolo')"
    )


class CellarWineIn(WineAttributesIn):
    """A cellar wine with a stable identifier for grouping."""
    id: str = Field(..., min_length=1, max_length=Config.MAX_ID_LENGTH, description="Wine record ID")
    name: Optional[str] = Field(None, description="Display name (not used for estimation)")


def _check_vintages(vintages: list[int], current_year: Optional[int]) -> None:
    """Reject vintages later than the evaluation year allows."""
    year = current_year if current_year is not None else Config.evaluation_year()
    latest = Config.max_vintage(year)
    for vintage in vintages:
        if vintage > latest:
            raise ValueError(f"vintage {vintage} is after {latest}")


class DrinkingWindowRequest(BaseModel):
    """Request body for POST /drinking-window."""
    wine: WineAttributesIn
    current_year: Optional[int] = Field(
        None,
        ge=Config.MIN_EVALUATION_YEAR,
        le=Config.MAX_EVALUATION_YEAR,
        description="Evaluation year; defaults to EVALUATION_YEAR or the current year",
    )

    @model_validator(mode="after")
    def validate_vintage_not_future(self) -> "DrinkingWindowRequest":
        _check_vintages([self.wine.vintage], self.current_year)
        return self


class DrinkingWindowResponse(BaseModel):
    """Estimated window and its status for one wine."""
    start: int = Field(..., description="First year the wine is drinkable")
    peak: int = Field(..., description="Best year to drink")
    end: int = Field(..., description="Last good year")
    status: DrinkingStatus
    status_label: str = Field(..., description="Display label, e.g. 'Ready Now'")
    status_emoji: str = Field(..., description="Display glyph, e.g. '🟢'")
    formatted: str = Field(..., description="Window as 'start - end'")
    rule: Optional[str] = Field(None, description="Name of the aging rule that matched")
    current_year: int = Field(..., description="Year the status was evaluated for")


class BucketRequest(BaseModel):
    """Request body for POST /drinking-window/buckets."""
    wines: list[CellarWineIn] = Field(default_factory=list, max_length=Config.MAX_BUCKET_WINES)
    current_year: Optional[int] = Field(
        None,
        ge=Config.MIN_EVALUATION_YEAR,
        le=Config.MAX_EVALUATION_YEAR,
    )

    @field_validator("wines")
    @classmethod
    def validate_unique_ids(cls, v: list[CellarWineIn]) -> list[CellarWineIn]:
        """Each wine must appear once so it lands in exactly one bucket."""
        seen: set[str] = set()
        for wine in v:
            if wine.id in seen:
                raise ValueError(f"duplicate wine id: {wine.id}")
            seen.add(wine.id)
        return v

    @model_validator(mode="after")
    def validate_vintages_not_future(self) -> "BucketRequest":
        _check_vintages([wine.vintage for wine in self.wines], self.current_year)
        return self


class BucketResponse(BaseModel):
    """Cellar wine IDs grouped by drinking status."""
    current_year: int
    total: int = Field(..., description="Number of wines bucketed")
    buckets: dict[DrinkingStatus, list[str]] = Field(
        ..., description="Wine IDs per status, in request order"
    )
    counts: dict[DrinkingStatus, int]


class StatusDisplayOut(BaseModel):
    """Display metadata for one drinking status."""
    status: DrinkingStatus
    label: str
    emoji: str
    description: str
