import fastapi

from src.utilities.messages.exceptions.http.exc_details import http_500_chat_failed_details


async def http_exc_500_chat_failed_request() -> Exception:
    return fastapi.HTTPException(
        status_code=fastapi.status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=http_500_chat_failed_details(),
    )
