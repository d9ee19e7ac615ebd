"""
Roadmap catalog: metadata-only listing of every roadmap, including the ones
that are still "coming soon".
"""
from __future__ import annotations

import logging
from typing import Any, Iterable, List, Mapping, Optional, Tuple

from src.models.schemas.roadmap import RoadmapCatalogEntry
from src.services.roadmap_data import ROADMAP_CATALOG
from src.utilities.exceptions.content import DuplicateRoadmapSlug

logger = logging.getLogger(__name__)


class RoadmapCatalog:
    """Ordered, immutable collection of catalog entries."""

    def __init__(self, entries: Iterable[RoadmapCatalogEntry]) -> None:
        ordered: Tuple[RoadmapCatalogEntry, ...] = tuple(entries)
        seen = set()
        for entry in ordered:
            if entry.slug in seen:
                raise DuplicateRoadmapSlug(entry.slug)
            seen.add(entry.slug)
        self._entries = ordered

    def get_all_roadmaps(self) -> List[RoadmapCatalogEntry]:
        """All entries in declaration order."""
        return list(self._entries)

    def get_roadmap_meta(self, slug: str) -> Optional[RoadmapCatalogEntry]:
        """First entry whose slug equals ``slug``, else ``None``."""
        for entry in self._entries:
            if entry.slug == slug:
                return entry
        return None

    def slugs(self) -> List[str]:
        return [entry.slug for entry in self._entries]

    def __contains__(self, slug: object) -> bool:
        return any(entry.slug == slug for entry in self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)


def build_roadmap_catalog(data: Iterable[Mapping[str, Any]] = ROADMAP_CATALOG) -> RoadmapCatalog:
    catalog = RoadmapCatalog(RoadmapCatalogEntry.model_validate(item) for item in data)
    logger.debug(f"Built roadmap catalog with {len(catalog)} entries")
    return catalog


# Global catalog instance for module-level access
roadmap_catalog = build_roadmap_catalog()


def get_all_roadmaps() -> List[RoadmapCatalogEntry]:
    return roadmap_catalog.get_all_roadmaps()


def get_roadmap_meta(slug: str) -> Optional[RoadmapCatalogEntry]:
    return roadmap_catalog.get_roadmap_meta(slug)
