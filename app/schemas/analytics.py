"""
Analytics Pydantic schemas - KPIs, bracket distribution and rankings.
"""
from pydantic import BaseModel, Field
from typing import List

from app.schemas.common import Number, SelectionEcho


class KPIResponse(BaseModel):
    """Average/min/max of the selected metric across all areas."""
    selection: SelectionEcho
    metric: str
    metric_name: str
    key: str
    average: Number  # 2 decimals; whole number for population
    min: Number
    max: Number
    area_count: int
    missing_area_ids: List[str] = Field(
        default_factory=list, description="Areas counted as 0 because they have no data"
    )
    average_display: str
    min_display: str
    max_display: str


class BracketShare(BaseModel):
    """One slice of the distribution chart."""
    label: str
    color: str
    count: int
    percentage: float


class DistributionResponse(BaseModel):
    """Bracket counts in ascending range order."""
    selection: SelectionEcho
    metric: str
    key: str
    brackets: List[BracketShare]
    total_areas: int
    missing_area_ids: List[str] = Field(default_factory=list)


class RankedAreaItem(BaseModel):
    """One bar of the ranked chart."""
    rank: int
    area_id: str
    display_name: str
    value: Number
    value_display: str
    color: str


class RankingResponse(BaseModel):
    """Areas ordered by value, highest first."""
    selection: SelectionEcho
    metric: str
    key: str
    rankings: List[RankedAreaItem]
    total_ranked: int
    excluded_area_ids: List[str] = Field(
        default_factory=list, description="Areas left out because they have no data"
    )
