import json

import pytest

from scripts import export_static_site as export_module
from scripts.export_content_schema import export_content_schema
from scripts.export_static_site import collect_page_paths, export_static_site
from src.main import initialize_backend_application
from src.utilities.exceptions.export import StaticExportError


def test_collect_page_paths_skips_pages_without_content(fixture_catalog, fixture_registry):
    paths = collect_page_paths(fixture_catalog, fixture_registry)

    assert paths[0] == "/"
    assert "/roadmap/alpha" in paths
    assert "/roadmap/alpha/phase-2" in paths
    assert "/roadmap/alpha/phase-3/c-one" in paths
    assert not any(path.startswith(("/roadmap/ghost", "/roadmap/soon")) for path in paths)
    assert len(paths) == 1 + 1 + 3 + 3


def test_export_static_site_writes_every_page(tmp_path, fixture_catalog, fixture_registry):
    app = initialize_backend_application(registry=fixture_registry, catalog=fixture_catalog)

    written = export_static_site(tmp_path, app=app)

    assert len(written) == 8
    assert (tmp_path / "index.html").is_file()
    topic_page = tmp_path / "roadmap" / "alpha" / "phase-1" / "a-one" / "index.html"
    assert topic_page.is_file()
    assert "Practice Exercise" in topic_page.read_text(encoding="utf-8")
    assert (tmp_path / "static" / "css" / "site.css").is_file()


def test_export_content_schema(tmp_path):
    written = export_content_schema(tmp_path / "schema")

    assert sorted(path.name for path in written) == ["continuation.schema.json", "phase.schema.json"]
    phase_schema = json.loads((tmp_path / "schema" / "phase.schema.json").read_text(encoding="utf-8"))
    assert phase_schema["title"] == "Phase"


def test_export_static_site_fails_on_missing_page(tmp_path, monkeypatch, fixture_catalog, fixture_registry):
    app = initialize_backend_application(registry=fixture_registry, catalog=fixture_catalog)
    monkeypatch.setattr(export_module, "collect_page_paths", lambda catalog, registry: ["/", "/roadmap/ghost"])

    with pytest.raises(StaticExportError, match="/roadmap/ghost answered 404"):
        export_static_site(tmp_path, app=app)
