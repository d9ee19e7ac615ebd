import logging
import pathlib

import fastapi
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from src.api.dependencies.registry import get_roadmap_catalog, get_roadmap_registry
from src.config.manager import settings
from src.services.presentation import (
    build_roadmap_cards,
    build_sidebar,
    resolve_phase_page,
    resolve_roadmap_page,
    resolve_topic_page,
)
from src.services.roadmap_catalog import RoadmapCatalog
from src.services.roadmap_registry import RoadmapRegistry
from src.utilities.formatters.markdown_formatter import format_inline_markdown, format_markdown

logger = logging.getLogger(__name__)

TEMPLATES_DIR: pathlib.Path = pathlib.Path(__file__).parent.parent.parent.joinpath("templates").resolve()

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters["inline_markdown"] = format_inline_markdown
templates.env.filters["markdown"] = format_markdown
templates.env.globals["site_title"] = settings.TITLE
templates.env.globals["api_prefix"] = settings.API_PREFIX

router = fastapi.APIRouter(tags=["pages"], include_in_schema=False, default_response_class=HTMLResponse)


def render_not_found(request: fastapi.Request, catalog: RoadmapCatalog, registry: RoadmapRegistry, what: str) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "not_found.html",
        {"what": what, "sidebar": build_sidebar(catalog, registry)},
        status_code=fastapi.status.HTTP_404_NOT_FOUND,
    )


@router.get(path="/", name="pages:index")
async def index_page(
    request: fastapi.Request,
    catalog: RoadmapCatalog = fastapi.Depends(get_roadmap_catalog),
    registry: RoadmapRegistry = fastapi.Depends(get_roadmap_registry),
) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "index.html",
        {"cards": build_roadmap_cards(catalog, registry), "sidebar": build_sidebar(catalog, registry)},
    )


@router.get(path="/roadmap/{slug}", name="pages:roadmap")
async def roadmap_page(
    request: fastapi.Request,
    slug: str,
    catalog: RoadmapCatalog = fastapi.Depends(get_roadmap_catalog),
    registry: RoadmapRegistry = fastapi.Depends(get_roadmap_registry),
) -> HTMLResponse:
    page = resolve_roadmap_page(catalog, registry, slug)
    if page is None:
        logger.info("Roadmap page not found: %s", slug)
        return render_not_found(request, catalog, registry, what="Roadmap")
    return templates.TemplateResponse(
        request,
        "roadmap.html",
        {"page": page, "sidebar": build_sidebar(catalog, registry, slug=slug)},
    )


@router.get(path="/roadmap/{slug}/{phase_id}", name="pages:phase")
async def phase_page(
    request: fastapi.Request,
    slug: str,
    phase_id: str,
    catalog: RoadmapCatalog = fastapi.Depends(get_roadmap_catalog),
    registry: RoadmapRegistry = fastapi.Depends(get_roadmap_registry),
) -> HTMLResponse:
    page = resolve_phase_page(catalog, registry, slug, phase_id)
    if page is None:
        logger.info("Phase page not found: %s/%s", slug, phase_id)
        return render_not_found(request, catalog, registry, what="Phase")
    return templates.TemplateResponse(
        request,
        "phase.html",
        {"page": page, "sidebar": build_sidebar(catalog, registry, slug=slug, phase_id=phase_id)},
    )


@router.get(path="/roadmap/{slug}/{phase_id}/{topic_id}", name="pages:topic")
async def topic_page(
    request: fastapi.Request,
    slug: str,
    phase_id: str,
    topic_id: str,
    catalog: RoadmapCatalog = fastapi.Depends(get_roadmap_catalog),
    registry: RoadmapRegistry = fastapi.Depends(get_roadmap_registry),
) -> HTMLResponse:
    page = resolve_topic_page(catalog, registry, slug, phase_id, topic_id)
    if page is None:
        logger.info("Topic page not found: %s/%s/%s", slug, phase_id, topic_id)
        return render_not_found(request, catalog, registry, what="Topic")
    return templates.TemplateResponse(
        request,
        "topic.html",
        {
            "page": page,
            "sidebar": build_sidebar(catalog, registry, slug=slug, phase_id=phase_id, topic_id=topic_id),
        },
    )
