"""
Geospatial Pydantic schemas for choropleth data.
"""
from pydantic import BaseModel
from typing import List, Optional

from app.schemas.common import Number, SelectionEcho


class BracketLegendItem(BaseModel):
    """Legend entry; upper_exclusive is None for the unbounded bracket."""
    label: str
    lower_inclusive: float
    upper_exclusive: Optional[float] = None
    color: str


class AreaFill(BaseModel):
    """Fill color and tooltip fields for one area."""
    area_id: str
    display_name: str
    value: Optional[Number] = None
    value_display: str
    fill_color: str
    label: Optional[str] = None
    has_data: bool


class ChoroplethResponse(BaseModel):
    """Response for the per-area fill endpoint."""
    selection: SelectionEcho
    areas: List[AreaFill]
    total_areas: int
    legend: List[BracketLegendItem]


class GeoJSONFeature(BaseModel):
    """GeoJSON feature."""
    type: str = "Feature"
    id: Optional[str] = None
    geometry: dict
    properties: dict


class GeoJSONResponse(BaseModel):
    """GeoJSON response."""
    type: str = "FeatureCollection"
    features: List[GeoJSONFeature]


class MapViewResponse(BaseModel):
    """Initial map view."""
    center_lat: float
    center_lng: float
    zoom: int
