"""
Area catalog loading from a GeoJSON FeatureCollection.

Only fillable polygon features become areas; points, lines and empty
geometries are dropped before the catalog reaches the engine.
"""
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Union, Any

from app.exceptions import LoadFailureError
from app.models.area import Area
from app.utils.constants import FILLABLE_GEOMETRY_TYPES

logger = logging.getLogger(__name__)


@dataclass
class AreaCatalog:
    """Areas in feature order, with the geometry kept for map output."""
    areas: List[Area] = field(default_factory=list)
    geometries: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    labels: Dict[str, str] = field(default_factory=dict)  # optional tooltip labels, never generated

    def get(self, area_id: str) -> Optional[Area]:
        for area in self.areas:
            if area.id == area_id:
                return area
        return None

    def __len__(self) -> int:
        return len(self.areas)

    def __iter__(self) -> Iterator[Area]:
        return iter(self.areas)


def is_fillable(geometry: Optional[Dict[str, Any]]) -> bool:
    """True for Polygon/MultiPolygon geometries with coordinates."""
    if not geometry:
        return False
    return geometry.get("type") in FILLABLE_GEOMETRY_TYPES and bool(geometry.get("coordinates"))


def parse_feature_collection(
    data: Dict[str, Any],
    id_property: str = "id",
    name_property: str = "name",
    label_property: str = "label",
) -> AreaCatalog:
    """
    Build an AreaCatalog from parsed GeoJSON.

    The area id comes from the feature id, then id_property, then
    name_property. Features without any id and duplicate ids are skipped.
    """
    if not isinstance(data, dict) or data.get("type") != "FeatureCollection":
        raise ValueError("GeoJSON root must be a FeatureCollection")

    catalog = AreaCatalog()
    skipped = 0
    for feature in data.get("features") or []:
        geometry = feature.get("geometry")
        if not is_fillable(geometry):
            skipped += 1
            continue

        properties = feature.get("properties") or {}
        raw_id = feature.get("id")
        if raw_id is None:
            raw_id = properties.get(id_property)
        if raw_id is None:
            raw_id = properties.get(name_property)
        if raw_id is None or str(raw_id).strip() == "":
            logger.warning("Skipping feature without an id or name")
            skipped += 1
            continue

        area_id = str(raw_id)
        if area_id in catalog.geometries:
            logger.warning(f"Skipping duplicate area id: {area_id}")
            skipped += 1
            continue

        display_name = properties.get(name_property) or area_id
        catalog.areas.append(Area(id=area_id, display_name=str(display_name)))
        catalog.geometries[area_id] = geometry
        if properties.get(label_property):
            catalog.labels[area_id] = str(properties[label_property])

    logger.info(f"Area catalog: {len(catalog)} areas, {skipped} features skipped")
    return catalog


def load_area_catalog(
    path: Union[str, Path],
    id_property: str = "id",
    name_property: str = "name",
) -> AreaCatalog:
    """
    Read and parse a GeoJSON file into an AreaCatalog.

    Raises:
        LoadFailureError: if the file is missing or is not a valid FeatureCollection
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return parse_feature_collection(data, id_property, name_property)
    except (OSError, ValueError, AttributeError) as e:
        raise LoadFailureError(f"area catalog {path}", str(e)) from e
