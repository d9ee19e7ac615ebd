import fastapi

from src.services.roadmap_catalog import RoadmapCatalog
from src.services.roadmap_registry import RoadmapRegistry


def get_roadmap_registry(request: fastapi.Request) -> RoadmapRegistry:
    return request.app.state.roadmap_registry


def get_roadmap_catalog(request: fastapi.Request) -> RoadmapCatalog:
    return request.app.state.roadmap_catalog
