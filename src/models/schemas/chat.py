from __future__ import annotations

import typing

import pydantic

from src.models.schemas.base import BaseSchemaModel


class ChatMessage(BaseSchemaModel):
    role: typing.Literal["user", "assistant", "system"]
    content: str

    @pydantic.field_validator("role", mode="before")
    @classmethod
    def coerce_unknown_role(cls, v: typing.Any) -> str:
        # Anything that is not an assistant or system turn is sent as the learner's
        if v in ("assistant", "system"):
            return v
        return "user"



class TopicReference(BaseSchemaModel):
    """Points the assistant at the topic the learner is reading."""

    slug: str
    phase_id: str
    topic_id: str


class ChatRequest(BaseSchemaModel):
    messages: list[ChatMessage] = pydantic.Field(min_length=1)
    topic: TopicReference | None = None

    model_config = BaseSchemaModel.model_config.copy()
    model_config["json_schema_extra"] = {
        "examples": [
            {
                "messages": [{"role": "user", "content": "Why do microtasks run before timers?"}],
                "topic": {"slug": "javascript", "phaseId": "phase-3", "topicId": "event-loop-call-stack"},
            }
        ]
    }


class ChatStreamEvent(BaseSchemaModel):
    """One server-sent event of the assistant stream."""

    type: typing.Literal["token", "done", "error"]
    content: str | None = None
    message: str | None = None
