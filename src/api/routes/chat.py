import logging

import fastapi
from fastapi.responses import StreamingResponse

from src.api.dependencies.registry import get_roadmap_registry
from src.models.schemas.chat import ChatRequest
from src.services import chat as chat_service
from src.services.roadmap_registry import RoadmapRegistry
from src.utilities.exceptions.chat import InvalidChatPayload, InvalidChatRequest
from src.utilities.exceptions.http.exc_400 import (
    http_exc_400_invalid_chat_payload_request,
    http_exc_400_invalid_chat_request,
)
from src.utilities.exceptions.http.exc_500 import http_exc_500_chat_failed_request
from src.utilities.exceptions.http.exc_503 import http_exc_503_chat_not_configured_request

logger = logging.getLogger(__name__)

router = fastapi.APIRouter(prefix="/chat", tags=["chat"])

CHAT_REQUEST_EXAMPLE = ChatRequest.model_config["json_schema_extra"]["examples"][0]  # type: ignore[index]


@router.post(
    path="",
    name="chat:stream",
    status_code=fastapi.status.HTTP_200_OK,
    summary="Ask the topic assistant",
    description=(
        "Streams the assistant's answer as server-sent events. The body is a ChatRequest sent either as JSON "
        "(application/json) or as Base64 of that JSON (text/plain). Each event line is `data: <base64 JSON>` "
        "where the JSON is `{type: token, content}`, `{type: done}` or `{type: error, message}`."
    ),
    response_class=StreamingResponse,
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {
                    "schema": {"type": "object", "description": "ChatRequest: messages and optional topic"},
                    "example": CHAT_REQUEST_EXAMPLE,
                },
                "text/plain": {"schema": {"type": "string", "format": "base64"}},
            },
        }
    },
)
async def stream_chat(
    request: fastapi.Request,
    registry: RoadmapRegistry = fastapi.Depends(get_roadmap_registry),
) -> StreamingResponse:
    raw = await request.body()
    try:
        chat_request = chat_service.decode_chat_payload(raw, request.headers.get("content-type"))
    except InvalidChatPayload as e:
        logger.info("POST /chat rejected undecodable payload: %s", e)
        raise await http_exc_400_invalid_chat_payload_request()
    except InvalidChatRequest as e:
        logger.info("POST /chat rejected request: %s", e)
        raise await http_exc_400_invalid_chat_request()

    client = chat_service.get_chat_client()
    if client is None:
        logger.error("POST /chat called but CHAT_API_KEY is not configured")
        raise await http_exc_503_chat_not_configured_request()

    try:
        messages = chat_service.build_conversation(chat_request, registry)
    except Exception:
        logger.exception("POST /chat failed before streaming")
        raise await http_exc_500_chat_failed_request()
    logger.info("POST /chat streaming answer for %d messages (topic=%s)", len(messages), chat_request.topic is not None)
    return StreamingResponse(
        chat_service.stream_chat_events(client, messages),
        media_type=chat_service.STREAM_MEDIA_TYPE,
        headers=chat_service.STREAM_HEADERS,
    )
