import logging

import fastapi

from src.api.dependencies.registry import get_roadmap_catalog, get_roadmap_registry
from src.models.schemas.roadmap import ContentSchemaResponse, Phase, Roadmap, RoadmapsListResponse, Topic
from src.services.content_loader import content_json_schema
from src.services.presentation import build_roadmap_cards
from src.services.roadmap_catalog import RoadmapCatalog
from src.services.roadmap_registry import RoadmapRegistry
from src.utilities.exceptions.http.exc_404 import (
    http_404_exc_phase_not_found_request,
    http_404_exc_roadmap_not_found_request,
    http_404_exc_topic_not_found_request,
)

logger = logging.getLogger(__name__)

router = fastapi.APIRouter(prefix="/roadmaps", tags=["roadmaps"])


@router.get(
    path="",
    name="roadmaps:list",
    response_model=RoadmapsListResponse,
    status_code=fastapi.status.HTTP_200_OK,
    summary="List every roadmap in the catalog",
    description=(
        "Returns one card per catalog entry in display order, with derived topic and phase counts. "
        "Coming-soon entries and entries without content are returned as non-navigable cards with zero counts."
    ),
)
async def list_roadmaps(
    catalog: RoadmapCatalog = fastapi.Depends(get_roadmap_catalog),
    registry: RoadmapRegistry = fastapi.Depends(get_roadmap_registry),
) -> RoadmapsListResponse:
    return RoadmapsListResponse(roadmaps=build_roadmap_cards(catalog=catalog, registry=registry))


@router.get(
    path="/{slug}",
    name="roadmaps:detail",
    response_model=Roadmap,
    status_code=fastapi.status.HTTP_200_OK,
    summary="Get a roadmap with its phases",
    description="Catalog metadata together with every phase and topic. 404 when either the metadata or the content is missing.",
)
async def get_roadmap(
    slug: str,
    catalog: RoadmapCatalog = fastapi.Depends(get_roadmap_catalog),
    registry: RoadmapRegistry = fastapi.Depends(get_roadmap_registry),
) -> Roadmap:
    meta = catalog.get_roadmap_meta(slug)
    phases = registry.get_roadmap_phases(slug)
    if meta is None or phases is None:
        logger.info("GET /roadmaps/%s not found (meta=%s, phases=%s)", slug, meta is not None, phases is not None)
        raise await http_404_exc_roadmap_not_found_request(slug=slug)
    return Roadmap(**meta.model_dump(), phases=phases)


@router.get(
    path="/{slug}/phases/{phase_id}",
    name="roadmaps:phase",
    response_model=Phase,
    status_code=fastapi.status.HTTP_200_OK,
    summary="Get one phase of a roadmap",
)
async def get_phase(
    slug: str,
    phase_id: str,
    registry: RoadmapRegistry = fastapi.Depends(get_roadmap_registry),
) -> Phase:
    if registry.get_roadmap_phases(slug) is None:
        raise await http_404_exc_roadmap_not_found_request(slug=slug)
    phase = registry.get_phase_by_id(slug, phase_id)
    if phase is None:
        raise await http_404_exc_phase_not_found_request(slug=slug, phase_id=phase_id)
    return phase


@router.get(
    path="/{slug}/phases/{phase_id}/topics/{topic_id}",
    name="roadmaps:topic",
    response_model=Topic,
    status_code=fastapi.status.HTTP_200_OK,
    summary="Get one topic of a phase",
)
async def get_topic(
    slug: str,
    phase_id: str,
    topic_id: str,
    registry: RoadmapRegistry = fastapi.Depends(get_roadmap_registry),
) -> Topic:
    if registry.get_roadmap_phases(slug) is None:
        raise await http_404_exc_roadmap_not_found_request(slug=slug)
    if registry.get_phase_by_id(slug, phase_id) is None:
        raise await http_404_exc_phase_not_found_request(slug=slug, phase_id=phase_id)
    topic = registry.get_topic_by_id(slug, phase_id, topic_id)
    if topic is None:
        raise await http_404_exc_topic_not_found_request(slug=slug, phase_id=phase_id, topic_id=topic_id)
    return topic


content_router = fastapi.APIRouter(prefix="/content", tags=["content"])


@content_router.get(
    path="/schema",
    name="content:schema",
    response_model=ContentSchemaResponse,
    status_code=fastapi.status.HTTP_200_OK,
    summary="JSON Schema of content fragments",
    description="Schemas for authoring base phase fragments (a Phase object) and continuation fragments (a list of Topics).",
)
async def get_content_schema() -> ContentSchemaResponse:
    return ContentSchemaResponse(**content_json_schema())
