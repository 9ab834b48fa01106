"""
test_area_catalog.py - GeoJSON parsing and polygon filtering.
"""
import json

import pytest

from app.config import settings
from app.exceptions import LoadFailureError
from app.services.area_catalog import is_fillable, load_area_catalog, parse_feature_collection

from conftest import square


def feature(geometry, feature_id=None, **properties):
    data = {"type": "Feature", "geometry": geometry, "properties": properties}
    if feature_id is not None:
        data["id"] = feature_id
    return data


def collection(*features):
    return {"type": "FeatureCollection", "features": list(features)}


class TestIsFillable:

    def test_polygon_types(self):
        assert is_fillable(square(79.0, 30.0))
        assert is_fillable({"type": "MultiPolygon", "coordinates": [square(79.0, 30.0)["coordinates"]]})

    def test_other_geometries(self):
        assert not is_fillable({"type": "Point", "coordinates": [79.0, 30.0]})
        assert not is_fillable({"type": "LineString", "coordinates": [[79.0, 30.0], [79.1, 30.1]]})
        assert not is_fillable({"type": "Polygon", "coordinates": []})
        assert not is_fillable(None)


class TestParseFeatureCollection:

    def test_keeps_only_polygons_in_order(self):
        catalog = parse_feature_collection(collection(
            feature(square(79.0, 30.0), "B", name="Bee"),
            feature({"type": "Point", "coordinates": [79.0, 30.0]}, "P", name="Pin"),
            feature(square(79.2, 30.0), "A", name="Ay"),
        ))
        assert [a.id for a in catalog] == ["B", "A"]
        assert len(catalog) == 2
        assert catalog.get("P") is None

    def test_id_fallbacks(self):
        catalog = parse_feature_collection(collection(
            feature(square(79.0, 30.0), "F1", name="From feature"),
            feature(square(79.2, 30.0), id="P1", name="From property"),
            feature(square(79.4, 30.0), name="Name Only"),
        ))
        assert [a.id for a in catalog] == ["F1", "P1", "Name Only"]
        assert catalog.get("Name Only").display_name == "Name Only"

    def test_null_feature_id_falls_back_to_properties(self):
        catalog = parse_feature_collection(collection(
            {"type": "Feature", "id": None, "geometry": square(79.0, 30.0), "properties": {"name": "Almora"}},
            {"type": "Feature", "id": None, "geometry": square(79.2, 30.0), "properties": {"id": "UK-BAG", "name": "Bageshwar"}},
        ))
        assert [a.id for a in catalog] == ["Almora", "UK-BAG"]
        assert catalog.get("UK-BAG").display_name == "Bageshwar"

    def test_custom_properties(self):
        catalog = parse_feature_collection(
            collection(feature(square(79.0, 30.0), code="UK01", district="Almora")),
            id_property="code",
            name_property="district",
        )
        assert catalog.get("UK01").display_name == "Almora"

    def test_numeric_ids_become_strings(self):
        catalog = parse_feature_collection(collection(feature(square(79.0, 30.0), 7, name="Seven")))
        assert catalog.areas[0].id == "7"

    def test_display_name_defaults_to_id(self):
        catalog = parse_feature_collection(collection(feature(square(79.0, 30.0), "X")))
        assert catalog.get("X").display_name == "X"

    def test_features_without_id_skipped(self, caplog):
        catalog = parse_feature_collection(collection(feature(square(79.0, 30.0))))
        assert len(catalog) == 0
        assert "without an id" in caplog.text

    def test_duplicate_ids_skipped(self, caplog):
        catalog = parse_feature_collection(collection(
            feature(square(79.0, 30.0), "A", name="First"),
            feature(square(79.2, 30.0), "A", name="Second"),
        ))
        assert len(catalog) == 1
        assert catalog.get("A").display_name == "First"
        assert "duplicate" in caplog.text

    def test_labels_only_when_present(self):
        catalog = parse_feature_collection(collection(
            feature(square(79.0, 30.0), "A", name="Ay", label="Hill district"),
            feature(square(79.2, 30.0), "B", name="Bee"),
        ))
        assert catalog.labels == {"A": "Hill district"}

    def test_geometry_kept(self):
        geometry = square(79.0, 30.0)
        catalog = parse_feature_collection(collection(feature(geometry, "A")))
        assert catalog.geometries["A"] == geometry

    def test_root_must_be_feature_collection(self):
        with pytest.raises(ValueError):
            parse_feature_collection({"type": "Feature"})


class TestLoadAreaCatalog:

    def test_bundled_districts(self):
        catalog = load_area_catalog(settings.resolve_path(settings.GEOJSON_PATH))
        assert len(catalog) == 13
        assert catalog.get("UK-DEH").display_name == "Dehradun"
        assert catalog.get("UK-CAPITAL") is None
        assert catalog.get("UK-GANGA") is None
        assert catalog.geometries["UK-HAR"]["type"] == "MultiPolygon"

    def test_missing_file(self, tmp_path):
        with pytest.raises(LoadFailureError) as exc:
            load_area_catalog(tmp_path / "missing.geojson")
        assert "missing.geojson" in str(exc.value)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.geojson"
        path.write_text("{")
        with pytest.raises(LoadFailureError):
            load_area_catalog(path)

    def test_wrong_root_type(self, tmp_path):
        path = tmp_path / "list.geojson"
        path.write_text(json.dumps([1, 2, 3]))
        with pytest.raises(LoadFailureError):
            load_area_catalog(path)
