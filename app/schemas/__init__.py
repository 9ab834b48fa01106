"""
Schemas package initialization.
"""
from app.schemas.common import (
    SelectionEcho,
    HealthResponse,
    ErrorResponse,
)
from app.schemas.analytics import (
    KPIResponse,
    BracketShare,
    DistributionResponse,
    RankedAreaItem,
    RankingResponse,
)
from app.schemas.geospatial import (
    BracketLegendItem,
    AreaFill,
    ChoroplethResponse,
    GeoJSONFeature,
    GeoJSONResponse,
    MapViewResponse,
)
from app.schemas.metadata import (
    DimensionOption,
    DimensionsResponse,
    BracketTablesResponse,
)

__all__ = [
    # Common
    "SelectionEcho",
    "HealthResponse",
    "ErrorResponse",
    # Analytics
    "KPIResponse",
    "BracketShare",
    "DistributionResponse",
    "RankedAreaItem",
    "RankingResponse",
    # Geospatial
    "BracketLegendItem",
    "AreaFill",
    "ChoroplethResponse",
    "GeoJSONFeature",
    "GeoJSONResponse",
    "MapViewResponse",
    # Metadata
    "DimensionOption",
    "DimensionsResponse",
    "BracketTablesResponse",
]
