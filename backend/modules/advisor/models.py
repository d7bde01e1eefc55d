"""
Pole advisor models.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field

from modules.poles.models import SearchFilters


class Feel(str, Enum):
    """How the vaulter's current pole feels."""

    TOO_SOFT = "too_soft"
    PERFECT = "perfect"
    TOO_STIFF = "too_stiff"


class AdvisorInput(BaseModel):
    """What the vaulter tells the advisor about their current pole."""

    current_length: Optional[int] = Field(None, gt=0, description="Current pole length in cm")
    current_weight: Optional[int] = Field(None, gt=0, description="Current pole weight rating in lbs")
    feel: Optional[Feel] = None
    body_weight: Optional[float] = Field(None, gt=0, description="Vaulter body weight")
    grip_height: Optional[float] = Field(None, gt=0, description="Top hand grip height in cm")


class Range(BaseModel):
    """Inclusive integer range."""

    min: int
    max: int


class Recommendation(BaseModel):
    """Suggested length and weight ranges with the reasons behind them."""

    length: Optional[Range] = None
    weight: Optional[Range] = None
    reasoning: list[str] = Field(default_factory=list)

    def to_search_filters(self) -> SearchFilters:
        """Listing filter matching the recommended ranges."""
        filters: dict = {}
        if self.length is not None:
            filters["length_min"] = self.length.min
            filters["length_max"] = self.length.max
        if self.weight is not None:
            filters["weight_min"] = self.weight.min
            filters["weight_max"] = self.weight.max
        return SearchFilters(**filters)
