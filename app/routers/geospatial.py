"""
Geospatial API endpoints for choropleth data.
"""
from fastapi import APIRouter, Depends

from app.data_store import get_service
from app.routers.dependencies import get_selection
from app.schemas.geospatial import ChoroplethResponse, GeoJSONResponse
from app.services.choropleth_service import ChoroplethService
from app.services.key_resolver import Selection

router = APIRouter()


@router.get("/areas", response_model=ChoroplethResponse)
def get_area_fills(
    selection: Selection = Depends(get_selection),
    service: ChoroplethService = Depends(get_service)
):
    """
    Get fill color and tooltip fields for every area.

    Returns array of {area_id, display_name, value, value_display,
    fill_color, label, has_data} plus the legend for the metric.
    """
    areas = service.get_area_fills(selection)

    return {
        "selection": selection.to_dict(),
        "areas": areas,
        "total_areas": len(areas),
        "legend": service.bracket_table(selection.metric).to_list(),
    }


@router.get("/geojson", response_model=GeoJSONResponse)
def get_choropleth_geojson(
    selection: Selection = Depends(get_selection),
    service: ChoroplethService = Depends(get_service)
):
    """
    Get the area polygons as a FeatureCollection ready for a GeoJSON layer.

    Each feature carries a `style` object (fillColor, weight, opacity,
    color, fillOpacity) and tooltip properties.
    """
    return service.get_geojson(selection)
