"""
Presentation glue between the registry and the HTML pages.

Builds landing-page cards, detail page view models, sidebar entries and
topic navigation. Nothing here mutates registry data; every resolver returns
``None`` when the requested roadmap, phase or topic is missing so routes can
answer with a 404 page.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from src.models.schemas.roadmap import InterviewQuestion, Phase, RoadmapCard, RoadmapCatalogEntry, Topic
from src.services.roadmap_catalog import RoadmapCatalog
from src.services.roadmap_registry import RoadmapRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QuestionBadge:
    label: str
    color: str


QUESTION_BADGES = {
    "conceptual": QuestionBadge(label="Conceptual", color="#60a5fa"),
    "tricky": QuestionBadge(label="Tricky Output", color="#f59e0b"),
    "coding": QuestionBadge(label="Coding", color="#34d399"),
    "scenario": QuestionBadge(label="Scenario", color="#a78bfa"),
}


def question_badge(question_type: str) -> QuestionBadge:
    """Badge for a question type; unknown types fall back to Conceptual."""
    return QUESTION_BADGES.get(question_type, QUESTION_BADGES["conceptual"])


def roadmap_href(slug: str, phase_id: Optional[str] = None, topic_id: Optional[str] = None) -> str:
    parts = ["", "roadmap", slug]
    if phase_id is not None:
        parts.append(phase_id)
        if topic_id is not None:
            parts.append(topic_id)
    return "/".join(parts)


def phase_label(phase_title: str) -> str:
    """Short breadcrumb label: the phase title up to its first colon."""
    return phase_title.split(":")[0]


# ------------------------------
# Landing page
# ------------------------------


def build_roadmap_card(entry: RoadmapCatalogEntry, registry: RoadmapRegistry) -> RoadmapCard:
    base = dict(
        slug=entry.slug,
        title=entry.title,
        emoji=entry.emoji,
        color=entry.color,
        description=entry.description,
        tags=list(entry.tags),
        coming_soon=entry.coming_soon,
    )
    if entry.coming_soon:
        return RoadmapCard(**base, navigable=False, content_available=False, topic_count=0, phase_count=0)

    phases = registry.get_roadmap_phases(entry.slug)
    if phases is None:
        return RoadmapCard(**base, navigable=False, content_available=False, topic_count=0, phase_count=0)

    return RoadmapCard(
        **base,
        navigable=True,
        content_available=True,
        topic_count=sum(len(phase.topics) for phase in phases),
        phase_count=len(phases),
        href=roadmap_href(entry.slug),
    )


def build_roadmap_cards(catalog: RoadmapCatalog, registry: RoadmapRegistry) -> List[RoadmapCard]:
    """One card per catalog entry, in catalog order."""
    return [build_roadmap_card(entry, registry) for entry in catalog.get_all_roadmaps()]


# ------------------------------
# Topic navigation
# ------------------------------


@dataclass(frozen=True)
class TopicLink:
    phase_id: str
    topic_id: str
    title: str
    href: str


def _link(slug: str, phase: Phase, topic: Topic) -> TopicLink:
    return TopicLink(phase_id=phase.id, topic_id=topic.id, title=topic.title, href=roadmap_href(slug, phase.id, topic.id))


def adjacent_topics(
    slug: str, phases: Tuple[Phase, ...], phase_id: str, topic_id: str
) -> Tuple[Optional[TopicLink], Optional[TopicLink]]:
    """
    Previous and next topic around ``topic_id``.

    Within a phase the neighbours are the surrounding topics; at a phase
    boundary navigation continues into the last topic of the previous phase
    or the first topic of the next one. Phases without topics are skipped.
    """
    flat = [(phase, topic) for phase in phases for topic in phase.topics]
    for index, (phase, topic) in enumerate(flat):
        if phase.id == phase_id and topic.id == topic_id:
            previous = _link(slug, *flat[index - 1]) if index > 0 else None
            following = _link(slug, *flat[index + 1]) if index < len(flat) - 1 else None
            return previous, following
    return None, None


# ------------------------------
# Sidebar
# ------------------------------


@dataclass(frozen=True)
class SidebarTopic:
    title: str
    href: str
    active: bool = False


@dataclass(frozen=True)
class SidebarPhase:
    title: str
    emoji: str
    href: str
    active: bool = False
    topics: Tuple[SidebarTopic, ...] = ()


@dataclass(frozen=True)
class SidebarRoadmap:
    title: str
    emoji: str
    href: Optional[str]
    coming_soon: bool = False
    active: bool = False


@dataclass(frozen=True)
class SidebarView:
    roadmap: Optional[RoadmapCatalogEntry] = None
    phases: Tuple[SidebarPhase, ...] = ()
    roadmaps: Tuple[SidebarRoadmap, ...] = ()


def build_sidebar(
    catalog: RoadmapCatalog,
    registry: RoadmapRegistry,
    slug: Optional[str] = None,
    phase_id: Optional[str] = None,
    topic_id: Optional[str] = None,
) -> SidebarView:
    """Phases of the current roadmap, or every catalog entry outside a roadmap."""
    meta = catalog.get_roadmap_meta(slug) if slug else None
    phases = registry.get_roadmap_phases(slug) if slug else None

    if meta is not None and phases is not None:
        return SidebarView(
            roadmap=meta,
            phases=tuple(
                SidebarPhase(
                    title=phase.title,
                    emoji=phase.emoji,
                    href=roadmap_href(meta.slug, phase.id),
                    active=phase.id == phase_id,
                    topics=tuple(
                        SidebarTopic(
                            title=topic.title,
                            href=roadmap_href(meta.slug, phase.id, topic.id),
                            active=phase.id == phase_id and topic.id == topic_id,
                        )
                        for topic in phase.topics
                    ),
                )
                for phase in phases
            ),
        )

    roadmaps = []
    for entry in catalog.get_all_roadmaps():
        navigable = not entry.coming_soon and entry.slug in registry
        roadmaps.append(
            SidebarRoadmap(
                title=entry.title,
                emoji=entry.emoji,
                href=roadmap_href(entry.slug) if navigable else None,
                coming_soon=entry.coming_soon,
                active=entry.slug == slug,
            )
        )
    return SidebarView(roadmaps=tuple(roadmaps))


# ------------------------------
# Detail pages
# ------------------------------


@dataclass(frozen=True)
class RoadmapPageView:
    meta: RoadmapCatalogEntry
    phases: Tuple[Phase, ...]

    @property
    def topic_count(self) -> int:
        return sum(len(phase.topics) for phase in self.phases)


@dataclass(frozen=True)
class PhasePageView:
    meta: RoadmapCatalogEntry
    phase: Phase
    phase_number: int


@dataclass(frozen=True)
class QuestionView:
    question: InterviewQuestion
    badge: QuestionBadge
    title: str
    show_body: bool


@dataclass(frozen=True)
class TopicPageView:
    meta: RoadmapCatalogEntry
    phase: Phase
    topic: Topic
    phase_label: str
    previous: Optional[TopicLink] = None
    next: Optional[TopicLink] = None
    questions: Tuple[QuestionView, ...] = field(default_factory=tuple)


def build_question_view(question: InterviewQuestion) -> QuestionView:
    """Accordion entry: first line as the title, full body only around fenced code."""
    lines = question.q.split("\n")
    return QuestionView(
        question=question,
        badge=question_badge(question.type),
        title=lines[0],
        show_body="```" in question.q,
    )


def resolve_roadmap_page(catalog: RoadmapCatalog, registry: RoadmapRegistry, slug: str) -> Optional[RoadmapPageView]:
    meta = catalog.get_roadmap_meta(slug)
    phases = registry.get_roadmap_phases(slug)
    if meta is None or phases is None:
        logger.debug(f"Roadmap page unavailable for slug={slug} (meta={meta is not None}, phases={phases is not None})")
        return None
    return RoadmapPageView(meta=meta, phases=phases)


def resolve_phase_page(
    catalog: RoadmapCatalog, registry: RoadmapRegistry, slug: str, phase_id: str
) -> Optional[PhasePageView]:
    page = resolve_roadmap_page(catalog, registry, slug)
    if page is None:
        return None
    for index, phase in enumerate(page.phases):
        if phase.id == phase_id:
            return PhasePageView(meta=page.meta, phase=phase, phase_number=index + 1)
    return None


def resolve_topic_page(
    catalog: RoadmapCatalog, registry: RoadmapRegistry, slug: str, phase_id: str, topic_id: str
) -> Optional[TopicPageView]:
    page = resolve_roadmap_page(catalog, registry, slug)
    if page is None:
        return None
    phase = registry.get_phase_by_id(slug, phase_id)
    topic = registry.get_topic_by_id(slug, phase_id, topic_id)
    if phase is None or topic is None:
        return None

    previous, following = adjacent_topics(slug, page.phases, phase_id, topic_id)
    return TopicPageView(
        meta=page.meta,
        phase=phase,
        topic=topic,
        phase_label=phase_label(phase.title),
        previous=previous,
        next=following,
        questions=tuple(build_question_view(question) for question in topic.interview_questions),
    )
