import fastapi

from src.utilities.messages.exceptions.http.exc_details import http_503_chat_not_configured_details


async def http_exc_503_chat_not_configured_request() -> Exception:
    return fastapi.HTTPException(
        status_code=fastapi.status.HTTP_503_SERVICE_UNAVAILABLE,
        detail=http_503_chat_not_configured_details(),
    )
