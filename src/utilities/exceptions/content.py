"""Errors raised while loading and assembling roadmap content.

These are authoring mistakes, detected once when the registry is built at
startup. Lookups never raise them; a missing roadmap, phase or topic is
reported as ``None``.
"""
from __future__ import annotations

import pathlib


class ContentError(Exception):
    """Base class for roadmap content errors."""


class ContentFragmentNotFound(ContentError):
    """Throw an exception when a fragment listed in the manifest has no file."""

    def __init__(self, path: pathlib.Path) -> None:
        self.path = path
        super().__init__(f"Content fragment not found: {path}")


class InvalidContentFragment(ContentError):
    """Throw an exception when a fragment is not valid JSON or breaks the content schema."""

    def __init__(self, path: pathlib.Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid content fragment {path}: {reason}")


class DuplicatePhaseId(ContentError):
    """Throw an exception when two phases of one roadmap share an id."""

    def __init__(self, slug: str, phase_id: str) -> None:
        self.slug = slug
        self.phase_id = phase_id
        super().__init__(f"Roadmap '{slug}' defines phase '{phase_id}' more than once")


class EmptyRoadmapContent(ContentError):
    """Throw an exception when a registered roadmap has no phases."""

    def __init__(self, slug: str) -> None:
        self.slug = slug
        super().__init__(f"Roadmap '{slug}' is registered without any phases")


class DuplicateRoadmapSlug(ContentError):
    """Throw an exception when the catalog lists the same slug twice."""

    def __init__(self, slug: str) -> None:
        self.slug = slug
        super().__init__(f"Roadmap catalog lists slug '{slug}' more than once")
