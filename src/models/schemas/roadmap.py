"""Schemas for roadmap content and its catalog.

The same models validate authored JSON fragments (camelCase keys, e.g.
``codeExample``) and shape the API responses. Content models are frozen:
phases and topics are built once at startup and shared by every request.
"""

from __future__ import annotations

import typing

import pydantic

from src.models.schemas.base import BaseSchemaModel, ContentSchemaModel

QuestionType = typing.Literal["conceptual", "coding", "scenario", "tricky"]


class InterviewQuestion(ContentSchemaModel):
    type: QuestionType = pydantic.Field(description="Kind of question: conceptual, coding, scenario or tricky")
    q: str = pydantic.Field(description="Question text (Markdown)")
    a: str = pydantic.Field(description="Answer text (Markdown)")


class Topic(ContentSchemaModel):
    """Smallest content unit: one lesson."""

    id: str = pydantic.Field(min_length=1, description="Identifier, unique within the owning phase")
    title: str
    explanation: str
    code_example: str
    exercise: str
    common_mistakes: tuple[str, ...]
    interview_questions: tuple[InterviewQuestion, ...]


class Phase(ContentSchemaModel):
    """Ordered stage of a roadmap grouping related topics."""

    id: str = pydantic.Field(min_length=1, description="Identifier, unique within the roadmap")
    title: str
    emoji: str
    description: str
    topics: tuple[Topic, ...]


class RoadmapCatalogEntry(ContentSchemaModel):
    """Metadata-only view of a roadmap, used for listings."""

    slug: str = pydantic.Field(min_length=1)
    title: str
    emoji: str
    color: str
    description: str
    tags: tuple[str, ...] = ()
    coming_soon: bool = False


class Roadmap(RoadmapCatalogEntry):
    """Catalog metadata together with the roadmap's phases."""

    phases: tuple[Phase, ...]


class RoadmapCard(BaseSchemaModel):
    """Landing-page card for one catalog entry, with derived counts."""

    slug: str
    title: str
    emoji: str
    color: str
    description: str
    tags: list[str] = pydantic.Field(default_factory=list)
    coming_soon: bool = False
    navigable: bool = pydantic.Field(description="Whether the card links to the roadmap page")
    content_available: bool = pydantic.Field(description="Whether the registry holds phases for this slug")
    topic_count: int = pydantic.Field(ge=0)
    phase_count: int = pydantic.Field(ge=0)
    href: str | None = None


class RoadmapsListResponse(BaseSchemaModel):
    roadmaps: list[RoadmapCard]


class ContentSchemaResponse(BaseSchemaModel):
    phase: dict[str, typing.Any] = pydantic.Field(description="JSON Schema of a base phase fragment")
    continuation: dict[str, typing.Any] = pydantic.Field(description="JSON Schema of a continuation fragment")
