"""
Metadata API endpoints - selector options, legends and map view.
"""
from fastapi import APIRouter

from app.config import settings
from app.models.brackets import BRACKET_TABLES
from app.models.demographics import Metric, Gender, AgeBand, SocialCategory, EconomicClass
from app.schemas.geospatial import MapViewResponse
from app.schemas.metadata import DimensionsResponse, BracketTablesResponse
from app.services.key_resolver import all_keys
from app.utils.constants import (
    METRIC_DISPLAY_NAMES,
    GENDER_DISPLAY_NAMES,
    AGE_BAND_DISPLAY_NAMES,
    SOCIAL_CATEGORY_DISPLAY_NAMES,
    ECONOMIC_CLASS_DISPLAY_NAMES,
)

router = APIRouter()


def _options(enum_cls, display_names):
    return [{"value": member.value, "display_name": display_names[member]} for member in enum_cls]


@router.get("/dimensions", response_model=DimensionsResponse)
def get_dimensions():
    """
    Get every selectable metric and dimension value.

    Use this to populate the selectors in the frontend.
    """
    return {
        "metrics": _options(Metric, METRIC_DISPLAY_NAMES),
        "gender": _options(Gender, GENDER_DISPLAY_NAMES),
        "age_band": _options(AgeBand, AGE_BAND_DISPLAY_NAMES),
        "social_category": _options(SocialCategory, SOCIAL_CATEGORY_DISPLAY_NAMES),
        "economic_class": _options(EconomicClass, ECONOMIC_CLASS_DISPLAY_NAMES),
        "key_count": len(all_keys()),
    }


@router.get("/brackets", response_model=BracketTablesResponse)
def get_bracket_tables():
    """Get the bracket table (legend) of every metric."""
    return {
        "tables": {metric.value: table.to_list() for metric, table in BRACKET_TABLES.items()}
    }


@router.get("/map-view", response_model=MapViewResponse)
def get_map_view():
    """Get the initial map center and zoom."""
    return {
        "center_lat": settings.MAP_CENTER_LAT,
        "center_lng": settings.MAP_CENTER_LNG,
        "zoom": settings.MAP_ZOOM,
    }
