"""
Topic assistant: streams LLM answers over server-sent events.

The assistant talks to an OpenAI-compatible endpoint (OpenRouter by default).
Each event is written as ``data: <base64 JSON>\\n\\n`` where the JSON is a
``ChatStreamEvent``: ``token`` events carry text, a final ``done`` event closes
the answer and an ``error`` event replaces it when the upstream stream fails.
"""
from __future__ import annotations

import base64
import binascii
import json
import logging
from typing import Any, AsyncIterator, Dict, List, Optional

import pydantic
from openai import AsyncOpenAI

from src.config.manager import settings
from src.models.schemas.chat import ChatMessage, ChatRequest, ChatStreamEvent
from src.models.schemas.roadmap import Topic
from src.services.roadmap_registry import RoadmapRegistry
from src.utilities.exceptions.chat import InvalidChatPayload, InvalidChatRequest

logger = logging.getLogger(__name__)

STREAM_HEADERS: Dict[str, str] = {
    "Cache-Control": "no-cache, no-transform",
    "Connection": "keep-alive",
    "X-Accel-Buffering": "no",
}
STREAM_MEDIA_TYPE = "text/event-stream; charset=utf-8"
STREAM_ERROR_MESSAGE = "Something went wrong while streaming the response."

# Lazy client holder; create only when needed and when API key is present
_client: AsyncOpenAI | None = None


def get_chat_client() -> AsyncOpenAI | None:
    global _client
    if _client is not None:
        return _client
    api_key = settings.CHAT_API_KEY
    if not api_key:
        return None
    _client = AsyncOpenAI(
        api_key=api_key,
        base_url=settings.CHAT_BASE_URL,
        timeout=float(settings.CHAT_TIMEOUT_SECONDS),
        max_retries=2,
    )
    return _client


async def close_chat_client() -> None:
    global _client
    if _client is not None:
        await _client.close()
        _client = None


def resolve_model_name(model_name: str) -> str:
    """Bare model names are taken as Google models on the router."""
    return model_name if "/" in model_name else f"google/{model_name}"


def decode_chat_payload(raw: bytes, content_type: Optional[str] = None) -> ChatRequest:
    """
    Decode a chat request body.

    JSON bodies are accepted as-is; any other body is read as Base64 of the
    JSON document, which is what browser clients send.
    """
    is_json = bool(content_type) and "application/json" in content_type.lower()  # type: ignore[union-attr]
    try:
        if is_json:
            data: Any = json.loads(raw.decode("utf-8"))
        else:
            decoded = base64.b64decode(raw.strip(), validate=True)
            data = json.loads(decoded.decode("utf-8"))
    except (binascii.Error, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise InvalidChatPayload(str(e)) from e

    if not isinstance(data, dict) or not isinstance(data.get("messages"), list) or not data["messages"]:
        raise InvalidChatRequest("messages must be a non-empty list")
    try:
        return ChatRequest.model_validate(data)
    except pydantic.ValidationError as e:
        raise InvalidChatRequest(str(e)) from e


def build_topic_system_message(topic: Topic) -> ChatMessage:
    mistakes = "\n- ".join(topic.common_mistakes)
    questions = "\n\n".join(f"Q: {question.q}\nA: {question.a}" for question in topic.interview_questions)
    content = (
        "You are an expert interview preparation assistant.\n"
        "The user is currently studying the following topic:\n\n"
        f"Title: {topic.title}\n"
        f"Explanation: {topic.explanation}\n"
        f"Code Examples: {topic.code_example}\n"
        f"Exercise: {topic.exercise}\n"
        f"Common Mistakes:\n- {mistakes}\n"
        f"Interview Questions:\n{questions}\n\n"
        "Answer all questions in the context of this topic only. Be extremely concise. "
        "Keep your responses short, practical, and to the point.\n"
        "- Use brief bullet points instead of long paragraphs.\n"
        "- Provide only the bare minimum code needed to explain the concept.\n"
        "- Format your responses in markdown.\n\n"
        "If the user asks a question that is not related to the topic above, politely respond with "
        "\"I'm sorry, but I can't assist with that. Please ask a question related to the topic above.\""
    )
    return ChatMessage(role="system", content=content)


def build_conversation(request: ChatRequest, registry: RoadmapRegistry) -> List[ChatMessage]:
    """Messages sent upstream, prefixed with the topic context when the topic resolves."""
    messages = list(request.messages)
    if request.topic is not None:
        topic = registry.get_topic_by_id(request.topic.slug, request.topic.phase_id, request.topic.topic_id)
        if topic is None:
            logger.info(
                f"Chat topic {request.topic.slug}/{request.topic.phase_id}/{request.topic.topic_id} not found; "
                "answering without topic context"
            )
        else:
            messages.insert(0, build_topic_system_message(topic))
    return messages


def encode_event(event: ChatStreamEvent) -> str:
    payload = json.dumps(event.model_dump(exclude_none=True), ensure_ascii=False)
    return f"data: {base64.b64encode(payload.encode('utf-8')).decode('ascii')}\n\n"


async def stream_chat_events(
    client: AsyncOpenAI,
    messages: List[ChatMessage],
    model: Optional[str] = None,
) -> AsyncIterator[str]:
    """Yield encoded SSE events for one assistant answer."""
    selected_model = resolve_model_name(model or settings.CHAT_MODEL)
    try:
        stream = await client.chat.completions.create(
            model=selected_model,
            messages=[{"role": message.role, "content": message.content} for message in messages],  # type: ignore[misc]
            stream=True,
        )
        async for chunk in stream:
            if not chunk.choices:
                continue
            token = chunk.choices[0].delta.content
            if token:
                yield encode_event(ChatStreamEvent(type="token", content=token))
        yield encode_event(ChatStreamEvent(type="done"))
    except Exception:
        logger.exception(f"Chat stream failed (model={selected_model})")
        yield encode_event(ChatStreamEvent(type="error", message=STREAM_ERROR_MESSAGE))
