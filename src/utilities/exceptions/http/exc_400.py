import fastapi

from src.utilities.messages.exceptions.http.exc_details import (
    http_400_invalid_chat_payload_details,
    http_400_invalid_chat_request_details,
)


async def http_exc_400_invalid_chat_payload_request() -> Exception:
    return fastapi.HTTPException(
        status_code=fastapi.status.HTTP_400_BAD_REQUEST,
        detail=http_400_invalid_chat_payload_details(),
    )


async def http_exc_400_invalid_chat_request() -> Exception:
    return fastapi.HTTPException(
        status_code=fastapi.status.HTTP_400_BAD_REQUEST,
        detail=http_400_invalid_chat_request_details(),
    )
