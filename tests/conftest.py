"""
pytest configuration and shared fixtures for the choropleth engine tests.

Tests never touch the global data store: routers get a fixture-built
ChoroplethService through app.dependency_overrides[get_service], the same
way a fake database would be swapped in.
"""
import pytest
from httpx import ASGITransport, AsyncClient

from app.models.area import Area, MetricVector
from app.services.area_catalog import AreaCatalog
from app.services.choropleth_service import ChoroplethService
from app.services.key_resolver import ALL_DIMENSIONS_KEY, resolve_key
from app.services.metric_repository import MetricRepository

FEMALE_19_35 = resolve_key("female", "19-35", "all", "all")


def square(lng: float, lat: float, size: float = 0.1) -> dict:
    return {
        "type": "Polygon",
        "coordinates": [[
            [lng, lat], [lng + size, lat], [lng + size, lat + size], [lng, lat + size], [lng, lat],
        ]],
    }


def make_catalog(areas) -> AreaCatalog:
    return AreaCatalog(
        areas=list(areas),
        geometries={a.id: square(79.0 + i * 0.2, 30.0) for i, a in enumerate(areas)},
    )


@pytest.fixture()
def three_areas():
    return [
        Area("UK-ALM", "Almora"),
        Area("UK-BAG", "Bageshwar"),
        Area("UK-CHA", "Chamoli"),
    ]


@pytest.fixture()
def literacy_repository(three_areas):
    """Literacy 65 / 82 / 91 at the all-dimensions key."""
    literacy = {"UK-ALM": 65.0, "UK-BAG": 82.0, "UK-CHA": 91.0}
    return MetricRepository({
        area.id: {ALL_DIMENSIONS_KEY: MetricVector(literacy[area.id], 40000, 120000)}
        for area in three_areas
    })


@pytest.fixture()
def area_x():
    return Area("UK-X", "Area X")


@pytest.fixture()
def missing_repository(three_areas, area_x):
    """Area X has no vector for female/19-35; the other areas do."""
    table = {
        "UK-ALM": {FEMALE_19_35: MetricVector(72.5, 35000, 60000)},
        "UK-BAG": {FEMALE_19_35: MetricVector(88.0, 52000, 45000)},
        "UK-CHA": {FEMALE_19_35: MetricVector(64.0, 28000, 80000)},
        area_x.id: {ALL_DIMENSIONS_KEY: MetricVector(70.0, 30000, 100000)},
    }
    return MetricRepository(table)


@pytest.fixture()
def service(three_areas, literacy_repository):
    return ChoroplethService(make_catalog(three_areas), literacy_repository)


@pytest.fixture()
def missing_service(three_areas, area_x, missing_repository):
    return ChoroplethService(make_catalog(three_areas + [area_x]), missing_repository)


@pytest.fixture()
async def client(service):
    """
    HTTPX async test client wired to the FastAPI app with the three-area
    service installed.
    """
    from app.main import app
    from app.data_store import get_service

    app.dependency_overrides[get_service] = lambda: service
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
