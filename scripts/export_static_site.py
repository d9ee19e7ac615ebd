#!/usr/bin/env python3
"""
Render every page of the site into a directory of static HTML files.

Each page is requested through the application in-process, so the output is
exactly what the server would answer. Pages are written as
``<path>/index.html`` together with the stylesheet under ``static/``.

Usage:
    python scripts/export_static_site.py [output_dir]   # default: ./site
"""

import shutil
import sys
from pathlib import Path

# Add the parent directory to Python path to import src modules
sys.path.append(str(Path(__file__).parent.parent))

import fastapi
from fastapi.testclient import TestClient

from src.main import STATIC_DIR, backend_app
from src.services.roadmap_catalog import RoadmapCatalog
from src.services.roadmap_registry import RoadmapRegistry
from src.utilities.exceptions.export import StaticExportError


def collect_page_paths(catalog: RoadmapCatalog, registry: RoadmapRegistry) -> list[str]:
    """URL paths of every navigable page, landing page first."""
    paths = ["/"]
    for entry in catalog.get_all_roadmaps():
        phases = registry.get_roadmap_phases(entry.slug)
        if entry.coming_soon or phases is None:
            continue
        paths.append(f"/roadmap/{entry.slug}")
        for phase in phases:
            paths.append(f"/roadmap/{entry.slug}/{phase.id}")
            paths.extend(f"/roadmap/{entry.slug}/{phase.id}/{topic.id}" for topic in phase.topics)
    return paths


def export_static_site(output_dir: Path, app: fastapi.FastAPI | None = None) -> list[Path]:
    app = app or backend_app
    paths = collect_page_paths(app.state.roadmap_catalog, app.state.roadmap_registry)
    written = []
    with TestClient(app) as client:
        for path in paths:
            response = client.get(path)
            if response.status_code != 200:
                raise StaticExportError(f"GET {path} answered {response.status_code}")
            target = output_dir.joinpath(path.strip("/"), "index.html")
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(response.text, encoding="utf-8")
            written.append(target)
    shutil.copytree(STATIC_DIR, output_dir / "static", dirs_exist_ok=True)
    return written


def main() -> None:
    output_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else Path("site")
    try:
        written = export_static_site(output_dir)
    except StaticExportError as e:
        print(f"Export failed: {e}")
        sys.exit(1)
    print(f"Wrote {len(written)} pages to {output_dir}")


if __name__ == "__main__":
    main()
