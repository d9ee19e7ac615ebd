import pytest

from src.services.content_loader import ContentLoader
from src.services.roadmap_catalog import roadmap_catalog
from src.services.roadmap_data import ROADMAP_FRAGMENTS
from src.services.roadmap_registry import (
    RoadmapRegistry,
    assemble_phase,
    check_catalog_consistency,
    get_phase_by_id,
    get_roadmap_phases,
    get_topic_by_id,
    roadmap_registry,
)
from src.utilities.exceptions.content import DuplicatePhaseId, EmptyRoadmapContent
from tests.factories import make_phase, make_topic


@pytest.mark.parametrize("slug", sorted(ROADMAP_FRAGMENTS))
def test_registered_roadmaps_have_phases_with_unique_ids(slug):
    phases = get_roadmap_phases(slug)
    assert phases
    ids = [phase.id for phase in phases]
    assert len(ids) == len(set(ids))


@pytest.mark.parametrize("slug", sorted(ROADMAP_FRAGMENTS))
def test_lookups_round_trip_every_phase_and_topic(slug):
    for phase in get_roadmap_phases(slug):
        assert get_phase_by_id(slug, phase.id) == phase
        for topic in phase.topics:
            # Lookup returns the first topic with a given id
            first = next(candidate for candidate in phase.topics if candidate.id == topic.id)
            assert get_topic_by_id(slug, phase.id, topic.id) == first


def test_unregistered_slug_returns_none_everywhere():
    assert get_roadmap_phases("does-not-exist") is None
    assert get_phase_by_id("does-not-exist", "phase-1") is None
    assert get_topic_by_id("does-not-exist", "phase-1", "anything") is None


def test_unknown_phase_and_topic_return_none():
    assert get_phase_by_id("javascript", "phase-99") is None
    assert get_topic_by_id("javascript", "phase-99", "promises") is None
    assert get_topic_by_id("javascript", "phase-1", "no-such-topic") is None


def test_javascript_first_phase_joins_base_and_continuation():
    phases = get_roadmap_phases("javascript")
    assert phases[0].id == "phase-1"

    loader = ContentLoader()
    base = loader.load_phase_fragment("javascript", "phase-1")
    continuation = loader.load_topic_fragment("javascript", "phase-1b")
    assert len(phases[0].topics) == len(base.topics) + len(continuation)
    assert phases[0].title == base.title


def test_promises_topic_lookup():
    topic = get_topic_by_id("javascript", "phase-3", "promises")
    assert topic is not None
    assert topic.title == "Promises"


def _question_count(slug):
    return sum(len(topic.interview_questions) for phase in get_roadmap_phases(slug) for topic in phase.topics)


@pytest.mark.parametrize("slug,expected", [("javascript", 250), ("typescript", 105), ("dsa", 139)])
def test_bundled_content_keeps_every_interview_question(slug, expected):
    assert _question_count(slug) == expected


def test_bundled_topics_carry_all_five_questions():
    topic = get_topic_by_id("javascript", "phase-1", "variables-data-types")
    assert [question.type for question in topic.interview_questions] == [
        "conceptual",
        "tricky",
        "conceptual",
        "coding",
        "scenario",
    ]
    assert "Real-world analogy" in topic.explanation


def test_android_and_react_native_have_no_content():
    assert get_roadmap_phases("android-senior") is None
    assert get_roadmap_phases("react-native-senior") is None


def test_assemble_phase_keeps_base_metadata_and_order():
    base = make_phase("phase-1", ["one", "two"], title="Phase 1: Basics")
    merged = assemble_phase(base, [(make_topic("three"),), (make_topic("four"), make_topic("five"))])

    assert merged.id == "phase-1"
    assert merged.title == "Phase 1: Basics"
    assert merged.emoji == base.emoji
    assert [topic.id for topic in merged.topics] == ["one", "two", "three", "four", "five"]
    # Base phase itself is left untouched
    assert [topic.id for topic in base.topics] == ["one", "two"]


def test_assemble_phase_keeps_duplicate_topic_ids_and_warns(caplog):
    base = make_phase("phase-1", ["one", "two"])
    duplicate = make_topic("two", title="Second Two")

    with caplog.at_level("WARNING", logger="src.services.roadmap_registry"):
        merged = assemble_phase(base, [(duplicate,)])

    assert [topic.id for topic in merged.topics] == ["one", "two", "two"]
    assert "two" in caplog.text
    registry = RoadmapRegistry({"demo": [merged]})
    assert registry.get_topic_by_id("demo", "phase-1", "two").title == "Two"


def test_registry_rejects_duplicate_phase_ids():
    with pytest.raises(DuplicatePhaseId):
        RoadmapRegistry({"demo": [make_phase("phase-1", ["a"]), make_phase("phase-1", ["b"])]})


def test_registry_rejects_roadmap_without_phases():
    with pytest.raises(EmptyRoadmapContent):
        RoadmapRegistry({"demo": []})


def test_registry_is_read_only(fixture_registry):
    with pytest.raises(TypeError):
        fixture_registry._phases["beta"] = ()  # type: ignore[index]
    phases = fixture_registry.get_roadmap_phases("alpha")
    assert isinstance(phases, tuple)


def test_registry_helpers(fixture_registry):
    assert "alpha" in fixture_registry
    assert "ghost" not in fixture_registry
    assert len(fixture_registry) == 1
    assert fixture_registry.slugs() == ["alpha"]
    assert fixture_registry.topic_count("alpha") == 3
    assert fixture_registry.topic_count("ghost") == 0


def test_catalog_consistency_reports_both_directions(fixture_catalog, fixture_registry):
    extra = RoadmapRegistry({"alpha": fixture_registry.get_roadmap_phases("alpha"), "orphan": [make_phase("phase-1", ["x"])]})

    problems = check_catalog_consistency(fixture_catalog, extra)

    assert any("'ghost'" in problem for problem in problems)
    assert any("'orphan'" in problem for problem in problems)
    assert not any("'soon'" in problem for problem in problems)


def test_production_catalog_consistency_only_flags_placeholders():
    problems = check_catalog_consistency(roadmap_catalog, roadmap_registry)
    flagged = sorted(problem.split("'")[1] for problem in problems)
    assert flagged == ["android-senior", "react-native-senior"]
