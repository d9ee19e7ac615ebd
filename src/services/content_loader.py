"""
Loading of authored roadmap content.

Content is stored as JSON fragments under ``<content dir>/<slug>/<name>.json``.
A base fragment is a Phase object; a continuation fragment is a JSON list of
Topic objects appended to the preceding base phase. Every fragment is
validated against the content schema when it is read, so authoring mistakes
surface at startup instead of at request time.
"""
from __future__ import annotations

import json
import logging
import pathlib
from typing import Any, Dict, Optional, Tuple

import pydantic

from src.models.schemas.roadmap import Phase, Topic
from src.utilities.exceptions.content import ContentFragmentNotFound, InvalidContentFragment

logger = logging.getLogger(__name__)

BUNDLED_CONTENT_DIR: pathlib.Path = pathlib.Path(__file__).parent.parent.joinpath("content", "roadmaps").resolve()

_PHASE_ADAPTER = pydantic.TypeAdapter(Phase)
_TOPICS_ADAPTER = pydantic.TypeAdapter(Tuple[Topic, ...])


def _summarize_validation_error(error: pydantic.ValidationError) -> str:
    parts = []
    for item in error.errors()[:5]:
        location = ".".join(str(piece) for piece in item.get("loc", ()))
        parts.append(f"{location}: {item.get('msg')}")
    if error.error_count() > 5:
        parts.append(f"... {error.error_count() - 5} more")
    return "; ".join(parts)


class ContentLoader:
    """Reads and validates fragment files from one content directory."""

    def __init__(self, content_dir: Optional[pathlib.Path | str] = None) -> None:
        self.content_dir = pathlib.Path(content_dir).resolve() if content_dir else BUNDLED_CONTENT_DIR

    def fragment_path(self, slug: str, name: str) -> pathlib.Path:
        return self.content_dir.joinpath(slug, f"{name}.json")

    def _read_json(self, path: pathlib.Path) -> Any:
        if not path.is_file():
            raise ContentFragmentNotFound(path)
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise InvalidContentFragment(path, f"invalid JSON at line {e.lineno}: {e.msg}") from e

    def load_phase_fragment(self, slug: str, name: str) -> Phase:
        """Load a base fragment: one Phase object."""
        path = self.fragment_path(slug, name)
        raw = self._read_json(path)
        try:
            phase = _PHASE_ADAPTER.validate_python(raw)
        except pydantic.ValidationError as e:
            raise InvalidContentFragment(path, _summarize_validation_error(e)) from e
        logger.debug(f"Loaded phase fragment {slug}/{name} with {len(phase.topics)} topics")
        return phase

    def load_topic_fragment(self, slug: str, name: str) -> Tuple[Topic, ...]:
        """Load a continuation fragment: a list of Topic objects."""
        path = self.fragment_path(slug, name)
        raw = self._read_json(path)
        if not isinstance(raw, list):
            raise InvalidContentFragment(path, "continuation fragment must be a JSON list of topics")
        try:
            topics = _TOPICS_ADAPTER.validate_python(raw)
        except pydantic.ValidationError as e:
            raise InvalidContentFragment(path, _summarize_validation_error(e)) from e
        logger.debug(f"Loaded continuation fragment {slug}/{name} with {len(topics)} topics")
        return topics


def content_json_schema() -> Dict[str, Dict[str, Any]]:
    """JSON Schemas of both fragment shapes, keyed as the authoring format uses them."""
    return {
        "phase": _PHASE_ADAPTER.json_schema(by_alias=True),
        "continuation": _TOPICS_ADAPTER.json_schema(by_alias=True),
    }
