"""
Metadata Pydantic schemas - selectable options and bracket tables.
"""
from pydantic import BaseModel
from typing import Dict, List

from app.schemas.geospatial import BracketLegendItem


class DimensionOption(BaseModel):
    value: str
    display_name: str


class DimensionsResponse(BaseModel):
    """Options for every selector."""
    metrics: List[DimensionOption]
    gender: List[DimensionOption]
    age_band: List[DimensionOption]
    social_category: List[DimensionOption]
    economic_class: List[DimensionOption]
    key_count: int


class BracketTablesResponse(BaseModel):
    """Bracket table per metric, shared by map fill and distribution chart."""
    tables: Dict[str, List[BracketLegendItem]]
