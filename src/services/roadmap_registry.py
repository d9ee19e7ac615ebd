"""
Roadmap registry: slug -> ordered phases, and the lookups over it.

Phases are assembled once from the content store and held in an immutable
mapping for the lifetime of the process. Every lookup reports a missing
roadmap, phase or topic as ``None``.
"""
from __future__ import annotations

import logging
import types
from collections import Counter
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from src.config.manager import settings
from src.models.schemas.roadmap import Phase, Topic
from src.services.content_loader import ContentLoader
from src.services.roadmap_catalog import RoadmapCatalog
from src.services.roadmap_data import ROADMAP_FRAGMENTS
from src.utilities.exceptions.content import DuplicatePhaseId, EmptyRoadmapContent

logger = logging.getLogger(__name__)


def assemble_phase(base: Phase, continuations: Iterable[Sequence[Topic]] = ()) -> Phase:
    """
    Append continuation topics to a base phase.

    The base phase keeps its id, title, emoji and description; topics are
    concatenated in order without de-duplication.
    """
    topics: List[Topic] = list(base.topics)
    for extra in continuations:
        topics.extend(extra)

    duplicates = sorted(topic_id for topic_id, count in Counter(t.id for t in topics).items() if count > 1)
    if duplicates:
        logger.warning(f"Phase '{base.id}' repeats topic ids {duplicates}; lookups return the first occurrence")

    return base.model_copy(update={"topics": tuple(topics)})


class RoadmapRegistry:
    """Immutable mapping of roadmap slug to its ordered phases."""

    def __init__(self, phases_by_slug: Mapping[str, Iterable[Phase]]) -> None:
        frozen: Dict[str, Tuple[Phase, ...]] = {}
        for slug, phases in phases_by_slug.items():
            ordered = tuple(phases)
            if not ordered:
                raise EmptyRoadmapContent(slug)
            seen = set()
            for phase in ordered:
                if phase.id in seen:
                    raise DuplicatePhaseId(slug, phase.id)
                seen.add(phase.id)
            frozen[slug] = ordered
        self._phases = types.MappingProxyType(frozen)

    def get_roadmap_phases(self, slug: str) -> Optional[Tuple[Phase, ...]]:
        return self._phases.get(slug)

    def get_phase_by_id(self, slug: str, phase_id: str) -> Optional[Phase]:
        phases = self.get_roadmap_phases(slug)
        if phases is None:
            return None
        for phase in phases:
            if phase.id == phase_id:
                return phase
        return None

    def get_topic_by_id(self, slug: str, phase_id: str, topic_id: str) -> Optional[Topic]:
        phase = self.get_phase_by_id(slug, phase_id)
        if phase is None:
            return None
        for topic in phase.topics:
            if topic.id == topic_id:
                return topic
        return None

    def slugs(self) -> List[str]:
        return list(self._phases.keys())

    def topic_count(self, slug: str) -> int:
        phases = self.get_roadmap_phases(slug) or ()
        return sum(len(phase.topics) for phase in phases)

    def __contains__(self, slug: object) -> bool:
        return slug in self._phases

    def __len__(self) -> int:
        return len(self._phases)


def build_roadmap_registry(
    manifest: Mapping[str, Sequence[Sequence[str]]] = ROADMAP_FRAGMENTS,
    loader: Optional[ContentLoader] = None,
) -> RoadmapRegistry:
    """Load every fragment listed in ``manifest`` and assemble the registry."""
    loader = loader or ContentLoader()
    phases_by_slug: Dict[str, List[Phase]] = {}

    for slug, groups in manifest.items():
        phases: List[Phase] = []
        for group in groups:
            base_name, *continuation_names = group
            base = loader.load_phase_fragment(slug, base_name)
            continuations = [loader.load_topic_fragment(slug, name) for name in continuation_names]
            phases.append(assemble_phase(base, continuations))
        phases_by_slug[slug] = phases

    registry = RoadmapRegistry(phases_by_slug)
    total_phases = sum(len(registry.get_roadmap_phases(slug) or ()) for slug in registry.slugs())
    total_topics = sum(registry.topic_count(slug) for slug in registry.slugs())
    logger.info(
        f"Roadmap registry built from {loader.content_dir}: "
        f"{len(registry)} roadmaps, {total_phases} phases, {total_topics} topics"
    )
    return registry


def check_catalog_consistency(catalog: RoadmapCatalog, registry: RoadmapRegistry) -> List[str]:
    """
    Compare catalog and registry slugs.

    Returns one message per mismatch: available catalog entries without
    content, and registry content without catalog metadata.
    """
    problems: List[str] = []
    for entry in catalog:
        if not entry.coming_soon and entry.slug not in registry:
            problems.append(f"Catalog entry '{entry.slug}' has no content; shown as content coming soon")
    for slug in registry.slugs():
        if slug not in catalog:
            problems.append(f"Roadmap content '{slug}' has no catalog entry and is not listed")
    return problems


# Global registry instance for backward compatibility
roadmap_registry = build_roadmap_registry(loader=ContentLoader(settings.CONTENT_DIR))


def get_roadmap_phases(slug: str) -> Optional[Tuple[Phase, ...]]:
    return roadmap_registry.get_roadmap_phases(slug)


def get_phase_by_id(slug: str, phase_id: str) -> Optional[Phase]:
    return roadmap_registry.get_phase_by_id(slug, phase_id)


def get_topic_by_id(slug: str, phase_id: str, topic_id: str) -> Optional[Topic]:
    return roadmap_registry.get_topic_by_id(slug, phase_id, topic_id)
