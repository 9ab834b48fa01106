"""
Analytics & KPI API endpoints.
"""
from fastapi import APIRouter, Depends, Query

from app.config import settings
from app.data_store import get_service
from app.routers.dependencies import get_selection
from app.schemas.analytics import KPIResponse, DistributionResponse, RankingResponse
from app.services.choropleth_service import ChoroplethService
from app.services.key_resolver import Selection

router = APIRouter()


@router.get("/kpis", response_model=KPIResponse)
def get_kpis(
    selection: Selection = Depends(get_selection),
    service: ChoroplethService = Depends(get_service)
):
    """
    Get the KPI summary for the selected metric and demographic segment.

    Returns:
    - Average (2 decimals; whole number for population)
    - Min and max (exact)
    - Display strings formatted for the metric
    - Areas counted as 0 because they have no data
    """
    kpis = service.get_kpis(selection)
    return {"selection": selection.to_dict(), **kpis}


@router.get("/distribution", response_model=DistributionResponse)
def get_distribution(
    selection: Selection = Depends(get_selection),
    service: ChoroplethService = Depends(get_service)
):
    """
    Get the number of areas per bracket for a proportion chart.

    Brackets are returned in ascending range order with the same colors
    used to fill the map.
    """
    distribution = service.get_distribution(selection)
    return {"selection": selection.to_dict(), **distribution}


@router.get("/rankings", response_model=RankingResponse)
def get_rankings(
    selection: Selection = Depends(get_selection),
    limit: int = Query(settings.DEFAULT_RANK_LIMIT, ge=1, le=settings.MAX_RANK_LIMIT),
    service: ChoroplethService = Depends(get_service)
):
    """
    Get areas ranked by the selected metric, highest first.

    Areas with no data for the segment are excluded and listed separately.
    """
    ranked = service.get_rankings(selection)

    return {
        "selection": selection.to_dict(),
        "metric": ranked["metric"],
        "key": ranked["key"],
        "rankings": ranked["rankings"][:limit],
        "total_ranked": len(ranked["rankings"]),
        "excluded_area_ids": ranked["excluded_area_ids"],
    }
