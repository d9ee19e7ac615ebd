import pytest
from fastapi.testclient import TestClient

from src.main import initialize_backend_application
from src.models.schemas.roadmap import RoadmapCatalogEntry
from src.services.roadmap_catalog import RoadmapCatalog
from src.services.roadmap_registry import RoadmapRegistry
from tests.factories import make_phase


@pytest.fixture
def fixture_catalog() -> RoadmapCatalog:
    return RoadmapCatalog(
        [
            RoadmapCatalogEntry(slug="alpha", title="Alpha", emoji="🅰️", color="#111111", description="Alpha roadmap", tags=("One",)),
            RoadmapCatalogEntry(slug="ghost", title="Ghost", emoji="👻", color="#222222", description="Listed without content"),
            RoadmapCatalogEntry(slug="soon", title="Soon", emoji="⏳", color="#333333", description="Not yet", coming_soon=True),
        ]
    )


@pytest.fixture
def fixture_registry() -> RoadmapRegistry:
    return RoadmapRegistry(
        {
            "alpha": [
                make_phase("phase-1", ["a-one", "a-two"]),
                make_phase("phase-2", []),
                make_phase("phase-3", ["c-one"]),
            ],
        }
    )


@pytest.fixture
def client(fixture_registry: RoadmapRegistry, fixture_catalog: RoadmapCatalog):
    app = initialize_backend_application(registry=fixture_registry, catalog=fixture_catalog)
    with TestClient(app) as test_client:
        yield test_client
