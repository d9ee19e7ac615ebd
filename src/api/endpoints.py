import fastapi

from src.api.routes.chat import router as chat_router
from src.api.routes.roadmaps import content_router
from src.api.routes.roadmaps import router as roadmaps_router
from src.config.manager import settings

router = fastapi.APIRouter()


# Health check endpoint for container probes
@router.get("/health", status_code=200, tags=["health"])
async def health_check(request: fastapi.Request):
    registry = request.app.state.roadmap_registry
    return {
        "status": "healthy",
        "service": "learning-roadmaps",
        "version": settings.VERSION,
        "roadmaps": len(registry),
    }

router.include_router(router=roadmaps_router)
router.include_router(router=content_router)
router.include_router(router=chat_router)
