"""
test_api.py - HTTP endpoints, query validation and error mapping.
"""
import pytest

from app.data_store import DataStore, get_service
from app.exceptions import LoadFailureError
from app.main import app
from app.services.choropleth_service import ChoroplethService
from app.services.key_resolver import ALL_DIMENSIONS_KEY

from conftest import make_catalog


class TestRoot:

    async def test_root(self, client):
        response = await client.get("/")
        assert response.status_code == 200
        assert "endpoints" in response.json()

    async def test_health_keys(self, client):
        response = await client.get("/api/health")
        assert response.status_code == 200
        data = response.json()
        assert {"status", "version", "store_status", "area_count", "error"} <= set(data)


class TestAnalytics:

    async def test_kpis(self, client):
        response = await client.get("/api/analytics/kpis", params={"metric": "literacy"})
        assert response.status_code == 200
        data = response.json()
        assert data["average"] == 79.33
        assert data["min"] == 65
        assert data["max"] == 91
        assert data["average_display"] == "79.33%"
        assert data["selection"]["key"] == ALL_DIMENSIONS_KEY.code

    async def test_kpis_population_average_is_integer(self, client):
        response = await client.get("/api/analytics/kpis", params={"metric": "population"})
        assert response.json()["average"] == 120000
        assert isinstance(response.json()["average"], int)

    async def test_distribution(self, client):
        response = await client.get("/api/analytics/distribution")
        assert response.status_code == 200
        brackets = response.json()["brackets"]
        assert [(b["label"], b["count"]) for b in brackets] == [
            ("<70", 1), ("70-80", 0), ("80-90", 1), (">=90", 1),
        ]

    async def test_rankings_with_limit(self, client):
        response = await client.get("/api/analytics/rankings", params={"limit": 2})
        assert response.status_code == 200
        data = response.json()
        assert [r["value"] for r in data["rankings"]] == [91, 82]
        assert data["total_ranked"] == 3

    async def test_segment_selection_echoed(self, client):
        params = {
            "metric": "income",
            "gender": "female",
            "age_band": "51+",
            "social_category": "sc",
            "economic_class": "bpl",
        }
        response = await client.get("/api/analytics/distribution", params=params)
        data = response.json()
        assert data["selection"]["key"] == "female_age51_plus_sc_bpl"
        # the fixture only has all-dimension vectors, so every area counts as 0
        assert data["brackets"][0]["count"] == 3
        assert len(data["missing_area_ids"]) == 3

    @pytest.mark.parametrize("params", [
        {"metric": "density"},
        {"gender": "unknown"},
        {"age_band": "60+"},
        {"social_category": "general"},
        {"economic_class": "rich"},
        {"limit": 0},
    ])
    async def test_invalid_query_is_422(self, client, params):
        response = await client.get("/api/analytics/rankings", params=params)
        assert response.status_code == 422


class TestChoropleth:

    async def test_area_fills_with_legend(self, client):
        response = await client.get("/api/choropleth/areas", params={"metric": "literacy"})
        assert response.status_code == 200
        data = response.json()
        assert data["total_areas"] == 3
        assert [a["fill_color"] for a in data["areas"]] == ["#E0FFFF", "#0000FF", "#00008B"]
        assert [item["color"] for item in data["legend"]] == ["#E0FFFF", "#ADD8E6", "#0000FF", "#00008B"]
        assert data["legend"][-1]["upper_exclusive"] is None

    async def test_geojson(self, client):
        response = await client.get("/api/choropleth/geojson", params={"metric": "income"})
        assert response.status_code == 200
        data = response.json()
        assert data["type"] == "FeatureCollection"
        assert data["features"][0]["properties"]["style"]["fillColor"] == "#ADD8E6"


class TestMetadata:

    async def test_dimensions(self, client):
        response = await client.get("/api/metadata/dimensions")
        data = response.json()
        assert [m["value"] for m in data["metrics"]] == ["literacy", "income", "population"]
        assert [a["value"] for a in data["age_band"]] == ["all", "0-18", "19-35", "36-50", "51+"]
        assert data["key_count"] == 600

    async def test_brackets(self, client):
        response = await client.get("/api/metadata/brackets")
        tables = response.json()["tables"]
        assert set(tables) == {"literacy", "income", "population"}
        assert [b["label"] for b in tables["population"]] == ["<50000", "50000-100000", "100000-500000", ">=500000"]

    async def test_map_view(self, client):
        response = await client.get("/api/metadata/map-view")
        assert response.json() == {"center_lat": 30.0668, "center_lng": 79.0193, "zoom": 8}


class TestErrorMapping:

    async def test_not_ready_is_503_with_retry_after(self, client):
        app.dependency_overrides[get_service] = DataStore().require_ready
        response = await client.get("/api/analytics/kpis")
        assert response.status_code == 503
        assert response.headers["Retry-After"] == "5"
        assert response.json()["error_type"] == "NotReadyError"

    async def test_load_failure_is_500(self, client):
        def failed_store():
            raise LoadFailureError("area catalog areas.geojson", "file not found")

        app.dependency_overrides[get_service] = failed_store
        response = await client.get("/api/choropleth/areas")
        assert response.status_code == 500
        assert "areas.geojson" in response.json()["error"]

    async def test_empty_catalog_kpis_is_404(self, client, literacy_repository):
        empty = ChoroplethService(make_catalog([]), literacy_repository)
        app.dependency_overrides[get_service] = lambda: empty
        response = await client.get("/api/analytics/kpis")
        assert response.status_code == 404
        assert response.json()["error_type"] == "EmptyInputError"

    async def test_metadata_available_before_load(self, client):
        app.dependency_overrides[get_service] = DataStore().require_ready
        response = await client.get("/api/metadata/brackets")
        assert response.status_code == 200

    async def test_error_body_documented_for_derived_endpoints(self, client):
        response = await client.get("/openapi.json")
        openapi = response.json()
        kpi_responses = openapi["paths"]["/api/analytics/kpis"]["get"]["responses"]
        area_responses = openapi["paths"]["/api/choropleth/areas"]["get"]["responses"]
        for responses in (kpi_responses, area_responses):
            assert {"404", "500", "503"} <= set(responses)
            assert responses["503"]["content"]["application/json"]["schema"]["$ref"].endswith("/ErrorResponse")
        assert "error_type" in openapi["components"]["schemas"]["ErrorResponse"]["properties"]
