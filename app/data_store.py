"""
Data store lifecycle - one-time loading of the area catalog and metrics.

Until loading finishes, get_service raises NotReadyError; a failed load
stays failed (LoadFailureError) until load() is called again.
"""
import logging
from enum import Enum
from typing import Any, Dict, Optional

from app.config import settings, Settings
from app.exceptions import LoadFailureError, NotReadyError
from app.services.area_catalog import AreaCatalog, load_area_catalog
from app.services.choropleth_service import ChoroplethService
from app.services.metric_repository import (
    MetricRepository,
    generate_synthetic_metrics,
    load_metric_table,
)

logger = logging.getLogger(__name__)


class StoreStatus(str, Enum):
    NOT_LOADED = "not_loaded"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


class DataStore:
    """Holds the read-only snapshot and the service built over it."""

    def __init__(self):
        self.status = StoreStatus.NOT_LOADED
        self.error: Optional[LoadFailureError] = None
        self._service: Optional[ChoroplethService] = None

    def load(self, config: Settings = settings) -> ChoroplethService:
        """
        Load the area catalog, then the metric table or synthetic metrics.

        Raises:
            LoadFailureError: if either source cannot be read; the store
                stays FAILED and no retry is attempted
        """
        self.status = StoreStatus.LOADING
        self.error = None
        try:
            catalog = load_area_catalog(
                config.resolve_path(config.GEOJSON_PATH),
                id_property=config.AREA_ID_PROPERTY,
                name_property=config.AREA_NAME_PROPERTY,
            )
            if config.METRICS_PATH:
                repository = load_metric_table(config.resolve_path(config.METRICS_PATH))
            else:
                seed = None if config.SYNTHETIC_RANDOM else config.SYNTHETIC_SEED
                repository = generate_synthetic_metrics(catalog.areas, seed=seed)
        except LoadFailureError as e:
            self.status = StoreStatus.FAILED
            self.error = e
            logger.error(f"❌ {e}")
            raise

        return self.install(catalog, repository)

    def install(self, catalog: AreaCatalog, repository: MetricRepository) -> ChoroplethService:
        """Publish an already-materialized catalog and repository."""
        gaps = repository.coverage_gaps(catalog.areas)
        for area_id, missing in gaps.items():
            logger.warning(f"Data integrity: area '{area_id}' is missing {missing} demographic keys")

        self._service = ChoroplethService(catalog, repository)
        self.status = StoreStatus.READY
        self.error = None
        logger.info(f"✅ Data store ready: {len(catalog)} areas")
        return self._service

    def require_ready(self) -> ChoroplethService:
        if self.status is StoreStatus.READY and self._service is not None:
            return self._service
        if self.status is StoreStatus.FAILED and self.error is not None:
            raise self.error
        raise NotReadyError()

    def reset(self):
        self.status = StoreStatus.NOT_LOADED
        self.error = None
        self._service = None

    def health(self) -> Dict[str, Any]:
        return {
            "status": self.status.value,
            "area_count": len(self._service.catalog) if self._service else 0,
            "error": str(self.error) if self.error else None,
        }


# Global store instance
data_store = DataStore()


def get_service() -> ChoroplethService:
    """
    Dependency for getting the choropleth service.
    Use with FastAPI's Depends().
    """
    return data_store.require_ready()
