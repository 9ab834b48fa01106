"""
Choropleth service - derived views for the map, KPI cards and charts.

Every view is a pure function of the selection and the immutable snapshot
(catalog + repository), memoized per (view, metric, demographic key). A new
snapshot gets a new service, so the memo never outlives its data.
"""
from typing import Any, Callable, Dict, List, Optional, Tuple

from app.exceptions import MetricNotFoundError
from app.models.brackets import BracketTable, BRACKET_TABLES
from app.models.demographics import Metric, ensure_exhaustive
from app.services.area_catalog import AreaCatalog
from app.services.bracket_classifier import classify
from app.services.color_mapper import color_of
from app.services.key_resolver import DemographicKey, Selection
from app.services.kpi_calculator import KPICalculator
from app.services.metric_repository import MetricRepository, MissingDataLog
from app.services.rank_builder import rank
from app.utils.constants import METRIC_DISPLAY_NAMES, POLYGON_STYLE
from app.utils.formatters import format_metric_value


class ChoroplethService:
    """Derive KPIs, distributions, rankings and fills for a selection."""

    def __init__(
        self,
        catalog: AreaCatalog,
        repository: MetricRepository,
        bracket_tables: Optional[Dict[Metric, BracketTable]] = None,
    ):
        self.catalog = catalog
        self.repository = repository
        self.bracket_tables = ensure_exhaustive(
            bracket_tables if bracket_tables is not None else BRACKET_TABLES, Metric, "bracket_tables"
        )
        self.kpi_calculator = KPICalculator(repository)
        self._cache: Dict[Tuple[str, Metric, DemographicKey], Any] = {}

    def _memoized(self, view: str, selection: Selection, compute: Callable[[Metric, DemographicKey], Any]) -> Any:
        cache_key = (view, selection.metric, selection.key)
        if cache_key not in self._cache:
            self._cache[cache_key] = compute(selection.metric, selection.key)
        return self._cache[cache_key]

    def clear_cache(self):
        self._cache.clear()

    def bracket_table(self, metric: Metric) -> BracketTable:
        return self.bracket_tables[metric]

    def get_kpis(self, selection: Selection) -> Dict[str, Any]:
        """
        KPI summary with display strings.

        Raises:
            EmptyInputError: if the catalog has no areas
        """
        def compute(metric: Metric, key: DemographicKey) -> Dict[str, Any]:
            result = self.kpi_calculator.aggregate(metric, key, self.catalog.areas)
            return {
                **result.to_dict(),
                "metric_name": METRIC_DISPLAY_NAMES[metric],
                "average_display": format_metric_value(metric, result.average),
                "min_display": format_metric_value(metric, result.min),
                "max_display": format_metric_value(metric, result.max),
            }

        return self._memoized("kpis", selection, compute)

    def get_distribution(self, selection: Selection) -> Dict[str, Any]:
        """Bracket counts in table order, with shares for a proportion chart."""
        def compute(metric: Metric, key: DemographicKey) -> Dict[str, Any]:
            diagnostics = MissingDataLog()
            counts = classify(
                metric, key, self.catalog.areas, self.bracket_table(metric),
                self.repository, diagnostics=diagnostics,
            )
            total = sum(c.count for c in counts)
            brackets = []
            for c in counts:
                percentage = (c.count / total * 100) if total > 0 else 0
                brackets.append({**c.to_dict(), "percentage": round(percentage, 2)})
            return {
                "metric": metric.value,
                "key": key.code,
                "brackets": brackets,
                "total_areas": total,
                "missing_area_ids": diagnostics.area_ids,
            }

        return self._memoized("distribution", selection, compute)

    def get_rankings(self, selection: Selection) -> Dict[str, Any]:
        """Areas by value, highest first, with bar colors; missing areas are left out."""
        def compute(metric: Metric, key: DemographicKey) -> Dict[str, Any]:
            diagnostics = MissingDataLog()
            table = self.bracket_table(metric)
            ranked = rank(metric, key, self.catalog.areas, self.repository, diagnostics=diagnostics)
            return {
                "metric": metric.value,
                "key": key.code,
                "rankings": [
                    {
                        **r.to_dict(),
                        "rank": position,
                        "value_display": format_metric_value(metric, r.value),
                        "color": color_of(metric, r.value, table),
                    }
                    for position, r in enumerate(ranked, start=1)
                ],
                "excluded_area_ids": diagnostics.area_ids,
            }

        return self._memoized("rankings", selection, compute)

    def get_area_fills(self, selection: Selection) -> List[Dict[str, Any]]:
        """
        Per-area fill color and tooltip fields.

        A missing vector is filled like a value of 0, consistent with the
        distribution counts, and its tooltip says so.
        """
        def compute(metric: Metric, key: DemographicKey) -> List[Dict[str, Any]]:
            table = self.bracket_table(metric)
            diagnostics = MissingDataLog()
            fills = []
            for area in self.catalog.areas:
                try:
                    value = self.repository.get(area.id, key).value_of(metric)
                    has_data = True
                except MetricNotFoundError as e:
                    diagnostics.record(e)
                    value, has_data = 0, False
                fills.append({
                    "area_id": area.id,
                    "display_name": area.display_name,
                    "value": value if has_data else None,
                    "value_display": format_metric_value(metric, value) if has_data else "No data",
                    "fill_color": color_of(metric, value, table),
                    "label": self.catalog.labels.get(area.id),
                    "has_data": has_data,
                })
            return fills

        return self._memoized("fills", selection, compute)

    def get_geojson(self, selection: Selection) -> Dict[str, Any]:
        """FeatureCollection with fill style and tooltip properties per feature."""
        features = []
        for fill in self.get_area_fills(selection):
            features.append({
                "type": "Feature",
                "id": fill["area_id"],
                "geometry": self.catalog.geometries[fill["area_id"]],
                "properties": {
                    "name": fill["display_name"],
                    "value": fill["value"],
                    "value_display": fill["value_display"],
                    "label": fill["label"],
                    "style": {"fillColor": fill["fill_color"], **POLYGON_STYLE},
                },
            })
        return {"type": "FeatureCollection", "features": features}
