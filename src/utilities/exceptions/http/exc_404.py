import fastapi

from src.utilities.messages.exceptions.http.exc_details import (
    http_404_phase_details,
    http_404_roadmap_details,
    http_404_topic_details,
)


async def http_404_exc_roadmap_not_found_request(slug: str) -> Exception:
    return fastapi.HTTPException(
        status_code=fastapi.status.HTTP_404_NOT_FOUND,
        detail=http_404_roadmap_details(slug=slug),
    )


async def http_404_exc_phase_not_found_request(slug: str, phase_id: str) -> Exception:
    return fastapi.HTTPException(
        status_code=fastapi.status.HTTP_404_NOT_FOUND,
        detail=http_404_phase_details(slug=slug, phase_id=phase_id),
    )


async def http_404_exc_topic_not_found_request(slug: str, phase_id: str, topic_id: str) -> Exception:
    return fastapi.HTTPException(
        status_code=fastapi.status.HTTP_404_NOT_FOUND,
        detail=http_404_topic_details(slug=slug, phase_id=phase_id, topic_id=topic_id),
    )
