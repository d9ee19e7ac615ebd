import contextlib
import pathlib

import fastapi
import uvicorn
from dotenv import load_dotenv
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from src.api.endpoints import router as api_endpoint_router
from src.api.routes.pages import router as pages_router
from src.config.events import (
    execute_backend_server_event_handler,
    terminate_backend_server_event_handler,
)
from src.config.manager import settings
from src.services.roadmap_catalog import RoadmapCatalog, roadmap_catalog
from src.services.roadmap_registry import RoadmapRegistry, roadmap_registry

STATIC_DIR: pathlib.Path = pathlib.Path(__file__).parent.joinpath("static").resolve()


def initialize_backend_application(
    registry: RoadmapRegistry | None = None,
    catalog: RoadmapCatalog | None = None,
) -> fastapi.FastAPI:
    # Load environment variables from .env if present
    load_dotenv()

    @contextlib.asynccontextmanager
    async def lifespan(backend_app: fastapi.FastAPI):
        await execute_backend_server_event_handler(backend_app=backend_app)()
        yield
        await terminate_backend_server_event_handler(backend_app=backend_app)()

    app = fastapi.FastAPI(**settings.set_backend_app_attributes, lifespan=lifespan)  # type: ignore

    # Content is built once; tests inject their own registry and catalog
    app.state.roadmap_registry = registry if registry is not None else roadmap_registry
    app.state.roadmap_catalog = catalog if catalog is not None else roadmap_catalog

    # Tags metadata for Swagger grouping
    tags_metadata = [
        {"name": "roadmaps", "description": "Roadmap catalog, phases and topics."},
        {"name": "content", "description": "Authoring schema of content fragments."},
        {"name": "chat", "description": "Topic assistant streaming answers over server-sent events."},
        {"name": "health", "description": "Liveness probe."},
    ]
    app.openapi_tags = tags_metadata  # type: ignore[attr-defined]

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=settings.IS_ALLOWED_CREDENTIALS,
        allow_methods=settings.ALLOWED_METHODS,
        allow_headers=settings.ALLOWED_HEADERS,
    )

    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")
    app.include_router(router=api_endpoint_router, prefix=settings.API_PREFIX)
    app.include_router(router=pages_router)

    return app


backend_app: fastapi.FastAPI = initialize_backend_application()

if __name__ == "__main__":
    uvicorn.run(
        app="src.main:backend_app",
        host=settings.SERVER_HOST,
        port=settings.SERVER_PORT,
        reload=settings.DEBUG,
        workers=settings.SERVER_WORKERS,
        log_level=settings.LOGGING_LEVEL,
    )
