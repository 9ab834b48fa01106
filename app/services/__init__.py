"""
Services package initialization.
"""
from app.services.key_resolver import DemographicKey, Selection, resolve_key, all_keys
from app.services.metric_repository import (
    MetricRepository,
    MissingDataLog,
    generate_synthetic_metrics,
    load_metric_table,
)
from app.services.kpi_calculator import KPICalculator, KPIResult
from app.services.bracket_classifier import BracketCount, classify, classify_index
from app.services.rank_builder import RankedArea, rank
from app.services.color_mapper import color_of
from app.services.area_catalog import AreaCatalog, load_area_catalog
from app.services.choropleth_service import ChoroplethService

__all__ = [
    "DemographicKey",
    "Selection",
    "resolve_key",
    "all_keys",
    "MetricRepository",
    "MissingDataLog",
    "generate_synthetic_metrics",
    "load_metric_table",
    "KPICalculator",
    "KPIResult",
    "BracketCount",
    "classify",
    "classify_index",
    "RankedArea",
    "rank",
    "color_of",
    "AreaCatalog",
    "load_area_catalog",
    "ChoroplethService",
]
